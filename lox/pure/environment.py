"""Variable bindings for the lox language. There are no nested scopes: one flat Environment per session."""

from lox.lang.error import LoxRuntimeError


class Environment:
    """Mapping of variable name to value. A name is only visible once its declaration has run."""

    def __init__(self):
        self.values = {}

    def define(self, name, value):
        """Binds name to value. Redeclaring a name overwrites the previous binding."""
        self.values[name] = value

    def get(self, name):
        """Returns the value bound to the name Token. Raises a LoxRuntimeError if name is unbound."""
        try:
            return self.values[name.lexeme]
        except KeyError:
            raise LoxRuntimeError("Undefined variable '{}'.", name.lexeme, line=name.line) from None

    def __contains__(self, name):
        return name in self.values

    def __len__(self):
        return len(self.values)

    def __repr__(self):
        return f"Environment({self.values!r})"
