"""Recursive-descent parser for the lox language. Each precedence level is one method that parses the next-higher
level and then folds its own operators to the left:

```
<program>    ::= <statement>* EOF
<statement>  ::= "var" IDENTIFIER ( "=" <expression> )? ";"
               | "print" <expression> ";"
               | <expression> ";"
<expression> ::= <equality>
<equality>   ::= <comparison> ( ( "!=" | "==" ) <comparison> )*
<comparison> ::= <term> ( ( ">" | ">=" | "<" | "<=" ) <term> )*
<term>       ::= <factor> ( ( "-" | "+" ) <factor> )*
<factor>     ::= <unary> ( ( "/" | "*" ) <unary> )*
<unary>      ::= ( "!" | "-" ) <unary> | <primary>
<primary>    ::= NUMBER | STRING | "true" | "false" | "nil" | IDENTIFIER | "(" <expression> ")"
```

Parsing stops at the first syntax error.
"""

from lox.lang.error import CompileError
from lox.pure.ast import Binary, Expression, Grouping, Literal, Print, Unary, Var, Variable
from lox.pure.token import TokenType


class Parser:
    """Single-cursor parser over a Token list. The list must end with an EOF Token, which the cursor never passes."""
    EQUALITY = (TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)
    COMPARISON = (TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL)
    TERM = (TokenType.MINUS, TokenType.PLUS)
    FACTOR = (TokenType.SLASH, TokenType.STAR)
    UNARY = (TokenType.BANG, TokenType.MINUS)

    def __init__(self, tokens):
        if not tokens or tokens[-1].type is not TokenType.EOF:
            raise ValueError("token list must end with an EOF token")

        self.tokens = tokens
        self.current = 0

    def parse(self):
        """Returns the list of statements in self.tokens. Raises a CompileError on the first syntax error."""
        statements = []
        while not self.is_at_end():
            statements.append(self.statement())
        return statements

    # statements

    def statement(self):
        if self.match(TokenType.VAR):
            return self.var_declaration()
        if self.match(TokenType.PRINT):
            return self.print_statement()
        return self.expression_statement()

    def var_declaration(self):
        name = self.consume(TokenType.IDENTIFIER, "Expect variable name.")

        initializer = None  # nil is applied when the declaration runs
        if self.match(TokenType.EQUAL):
            initializer = self.expression()

        self.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return Var(name, initializer)

    def print_statement(self):
        value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return Print(value)

    def expression_statement(self):
        value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return Expression(value)

    # expressions, lowest to highest precedence

    def expression(self):
        return self.equality()

    def _binary(self, operand, operators):
        """Parses operand ( operator operand )*, folding left-associatively into Binary nodes."""
        expr = operand()
        while self.match(*operators):
            operator = self.previous()
            right = operand()
            expr = Binary(expr, operator, right)
        return expr

    def equality(self):
        return self._binary(self.comparison, Parser.EQUALITY)

    def comparison(self):
        return self._binary(self.term, Parser.COMPARISON)

    def term(self):
        return self._binary(self.factor, Parser.TERM)

    def factor(self):
        return self._binary(self.unary, Parser.FACTOR)

    def unary(self):
        if self.match(*Parser.UNARY):
            operator = self.previous()
            return Unary(operator, self.unary())
        return self.primary()

    def primary(self):
        if self.match(TokenType.FALSE):
            return Literal(False)
        if self.match(TokenType.TRUE):
            return Literal(True)
        if self.match(TokenType.NIL):
            return Literal(None)

        if self.match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self.previous().literal)

        if self.match(TokenType.IDENTIFIER):
            return Variable(self.previous())

        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        raise self.error(self.peek(), "Unrecongnized token during parsed.")

    # cursor helpers

    def match(self, *token_types):
        """Consumes the current token if it is any of token_types."""
        for token_type in token_types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def consume(self, token_type, message):
        if self.check(token_type):
            return self.advance()
        raise self.error(self.peek(), message)

    def check(self, token_type):
        if self.is_at_end():
            return False
        return self.peek().type is token_type

    def advance(self):
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self):
        return self.peek().type is TokenType.EOF

    def peek(self):
        return self.tokens[self.current]

    def previous(self):
        return self.tokens[max(self.current - 1, 0)]

    @staticmethod
    def error(token, message):
        """Returns (doesn't raise) a CompileError located at token."""
        where = "at end" if token.type is TokenType.EOF else f"at '{token.lexeme}'"
        return CompileError(message, line=token.line, where=where)


def parse(tokens):
    """Returns the statements in tokens. Raises a CompileError if tokens aren't syntactically valid."""
    return Parser(tokens).parse()
