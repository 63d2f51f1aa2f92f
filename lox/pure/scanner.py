"""Lexical analysis for the lox language. Converts source text into a list of Tokens in a single left-to-right pass,
always consuming the longest valid token at the current position.

```
<token>   ::= "(" | ")" | "{" | "}" | "," | "." | "-" | "+" | ";" | "/" | "*"
            | "!" | "!=" | "=" | "==" | ">" | ">=" | "<" | "<="
            | <string> | <number> | <identifier>
<string>  ::= '"' <char>* '"'                       ; may span lines, no escape sequences
<number>  ::= <digit>+ ( "." <digit>+ )?            ; a trailing "." is not part of the number
<ident>   ::= ( <alpha> | "_" ) ( <alnum> | "_" )*  ; keywords are identifiers found in KEYWORDS
<comment> ::= "//" <char>* "\n"
```
"""

from lox.lang.error import CompileError
from lox.pure.token import KEYWORDS, Token, TokenType


class Scanner:
    """Single-pass scanner. scan_tokens may be called repeatedly: state is reset on every call."""
    SINGLE = {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
        "*": TokenType.STAR,
    }
    # char: (type if followed by "=", type otherwise)
    DOUBLE = {
        "!": (TokenType.BANG_EQUAL, TokenType.BANG),
        "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
        "<": (TokenType.LESS_EQUAL, TokenType.LESS),
        ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
    }
    WHITESPACE = " \r\t"

    def __init__(self):
        self._reset("")

    def _reset(self, source, line=1):
        self.source = source
        self.tokens = []
        self.start = 0
        self.current = 0
        self.line = line

    def scan_tokens(self, source, line=1):
        """Returns the list of Tokens in source, ending with an EOF Token. line is the line source starts at. Raises a
        CompileError on the first character that can't start a token or on an unterminated string.
        """
        self._reset(source, line)

        while not self.is_at_end():
            self.start = self.current
            self.scan_token()

        self.tokens.append(Token.eof(self.line))
        return self.tokens

    def scan_token(self):
        char = self.advance()

        if char in Scanner.SINGLE:
            self.add_token(Scanner.SINGLE[char])
        elif char in Scanner.DOUBLE:
            matched, single = Scanner.DOUBLE[char]
            self.add_token(matched if self.match("=") else single)
        elif char == "/":
            if self.match("/"):
                while self.peek() != "\n" and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenType.SLASH)
        elif char in Scanner.WHITESPACE:
            pass
        elif char == "\n":
            self.line += 1
        elif char == "\"":
            self.string()
        elif Scanner.is_digit(char):
            self.number()
        elif Scanner.is_alpha(char):
            self.identifier()
        else:
            raise CompileError("Unexpected character.", line=self.line)

    def string(self):
        """Scans a string literal. The opening quote has already been consumed."""
        start_line = self.line
        while self.peek() != "\"" and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1
            self.advance()

        if self.is_at_end():
            raise CompileError("Unterminated string.", line=start_line)

        self.advance()  # closing "
        self.add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def number(self):
        while Scanner.is_digit(self.peek()):
            self.advance()

        # fractional part needs at least one digit after the "."
        if self.peek() == "." and Scanner.is_digit(self.peek_next()):
            self.advance()
            while Scanner.is_digit(self.peek()):
                self.advance()

        self.add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def identifier(self):
        while Scanner.is_alnum(self.peek()):
            self.advance()

        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    @staticmethod
    def is_digit(char):
        return "0" <= char <= "9"

    @staticmethod
    def is_alpha(char):
        return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"

    @staticmethod
    def is_alnum(char):
        return Scanner.is_alpha(char) or Scanner.is_digit(char)

    def is_at_end(self):
        return self.current >= len(self.source)

    def advance(self):
        char = self.source[self.current]
        self.current += 1
        return char

    def match(self, expected):
        """Consumes the current character only if it is expected."""
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self):
        """Current character, or "" at end of input. Never consumes."""
        if self.is_at_end():
            return ""
        return self.source[self.current]

    def peek_next(self):
        if self.current + 1 >= len(self.source):
            return ""
        return self.source[self.current + 1]

    def add_token(self, token_type, literal=None):
        self.tokens.append(Token(token_type, self.source[self.start:self.current], literal, self.line))


def scan(source, line=1):
    """Returns the Tokens in source, numbering lines from line. Raises a CompileError if source isn't lexically
    valid.
    """
    return Scanner().scan_tokens(source, line)
