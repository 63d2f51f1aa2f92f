"""Abstract syntax tree for the lox language. Nodes are immutable and own their children exclusively, so every tree
built by the Parser is acyclic.

```
<expr> ::= Binary(left: <expr>, operator: Token, right: <expr>)
         | Grouping(expression: <expr>)
         | Literal(value: <value>)
         | Unary(operator: Token, right: <expr>)
         | Variable(name: Token)

<stmt> ::= Expression(expression: <expr>)
         | Print(expression: <expr>)
         | Var(name: Token, initializer: <expr>?)
```
"""

from dataclasses import dataclass
from typing import Any, Optional

from lox.pure.token import Token
from lox.pure.value import stringify


class Expr:
    """Superclass for expression nodes."""


class Stmt:
    """Superclass for statement nodes."""


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr


@dataclass(frozen=True)
class Literal(Expr):
    value: Any


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Variable(Expr):
    name: Token


@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Var(Stmt):
    name: Token
    initializer: Optional[Expr] = None


def display(node):
    """Parenthesized prefix rendering of node, ex: "print (1 + 2) * 3;" is displayed as

    (print (* (group (+ 1 2)) 3))
    """
    if isinstance(node, Binary):
        return f"({node.operator.lexeme} {display(node.left)} {display(node.right)})"
    elif isinstance(node, Grouping):
        return f"(group {display(node.expression)})"
    elif isinstance(node, Literal):
        if isinstance(node.value, str):
            return f"\"{node.value}\""
        return stringify(node.value)
    elif isinstance(node, Unary):
        return f"({node.operator.lexeme} {display(node.right)})"
    elif isinstance(node, Variable):
        return node.name.lexeme
    elif isinstance(node, Expression):
        return f"(; {display(node.expression)})"
    elif isinstance(node, Print):
        return f"(print {display(node.expression)})"
    elif isinstance(node, Var):
        if node.initializer is None:
            return f"(var {node.name.lexeme})"
        return f"(var {node.name.lexeme} = {display(node.initializer)})"

    raise TypeError(f"'{type(node).__name__}' is not a lox AST node")
