"""Tree-walking evaluation for the lox language. Expressions are evaluated and statements executed by one dispatch
function per node category.

Operators are only defined over numbers (and `!` over booleans): there is no truthiness and no string
concatenation, so any other operand type is a LoxRuntimeError.
"""

import operator

from lox.lang.error import LoxRuntimeError
from lox.pure.ast import Binary, Expression, Grouping, Literal, Print, Unary, Var, Variable
from lox.pure.token import TokenType
from lox.pure.value import divide, is_boolean, is_number, stringify


class Interpreter:
    """Executes statements against an Environment. Holds no state of its own besides the output stream, so running
    the same statements against two fresh Environments gives the same output twice.
    """
    BINARY = {
        TokenType.PLUS: operator.add,
        TokenType.MINUS: operator.sub,
        TokenType.STAR: operator.mul,
        TokenType.SLASH: divide,
        TokenType.GREATER: operator.gt,
        TokenType.GREATER_EQUAL: operator.ge,
        TokenType.LESS: operator.lt,
        TokenType.LESS_EQUAL: operator.le,
        TokenType.BANG_EQUAL: operator.ne,
        TokenType.EQUAL_EQUAL: operator.eq,
    }

    def __init__(self, out=None):
        self.out = out

    def interpret(self, statements, environment):
        """Executes statements in order. Stops at (and raises) the first LoxRuntimeError; bindings made by earlier
        statements are kept.
        """
        for stmt in statements:
            self.execute(stmt, environment)

    def execute(self, stmt, environment):
        if isinstance(stmt, Expression):
            self.evaluate(stmt.expression, environment)

        elif isinstance(stmt, Print):
            value = self.evaluate(stmt.expression, environment)
            print(stringify(value), file=self.out)  # None means sys.stdout

        elif isinstance(stmt, Var):
            value = None
            if stmt.initializer is not None:
                value = self.evaluate(stmt.initializer, environment)
            environment.define(stmt.name.lexeme, value)

        else:
            raise TypeError(f"'{type(stmt).__name__}' is not a lox statement")

    def evaluate(self, expr, environment):
        """Returns the value of expr. environment is only read."""
        if isinstance(expr, Literal):
            return expr.value

        elif isinstance(expr, Grouping):
            return self.evaluate(expr.expression, environment)

        elif isinstance(expr, Unary):
            right = self.evaluate(expr.right, environment)
            return self.unary(expr.operator, right)

        elif isinstance(expr, Binary):
            left = self.evaluate(expr.left, environment)
            right = self.evaluate(expr.right, environment)
            return self.binary(expr.operator, left, right)

        elif isinstance(expr, Variable):
            return environment.get(expr.name)

        raise TypeError(f"'{type(expr).__name__}' is not a lox expression")

    @staticmethod
    def unary(op, right):
        if op.type is TokenType.MINUS:
            if is_number(right):
                return -right
            raise LoxRuntimeError("Operand must be a number.", line=op.line)

        if op.type is TokenType.BANG:
            if is_boolean(right):
                return not right
            raise LoxRuntimeError("Operand must be a boolean.", line=op.line)

        raise LoxRuntimeError("Invalid unary expression.", line=op.line)

    @staticmethod
    def binary(op, left, right):
        func = Interpreter.BINARY.get(op.type)
        if func is None or not is_number(left) or not is_number(right):
            raise LoxRuntimeError("Invalid binary expression.", line=op.line)
        return func(left, right)


def interpret(statements, environment, out=None):
    """Executes statements against environment, printing to out (default: stdout). Raises a LoxRuntimeError on the
    first runtime failure.
    """
    Interpreter(out).interpret(statements, environment)
