import unittest

from lox.lang.error import CompileError
from lox.pure.ast import Binary, Expression, Grouping, Literal, Print, Unary, Var, Variable, display
from lox.pure.parser import Parser, parse
from lox.pure.scanner import scan
from lox.pure.token import Token, TokenType


def parse_source(source):
    return parse(scan(source))


def displayed(source):
    return [display(stmt) for stmt in parse_source(source)]


class ParserTestCase(unittest.TestCase):

    def test_statements(self):
        cases = {
            "var x = 10; print x;": ["(var x = 10)", "(print x)"],
            "var x;": ["(var x)"],
            "1 + 2;": ["(; (+ 1 2))"],
            "print \"hi\";": ["(print \"hi\")"],
            "print true; print false; print nil;": ["(print true)", "(print false)", "(print nil)"],
            "": [],
            "// only a comment": [],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, displayed(case), case)

    def test_precedence(self):
        cases = {
            "print (1 + 2) * 3;": "(print (* (group (+ 1 2)) 3))",
            "print 1 + 2 * 3;": "(print (+ 1 (* 2 3)))",
            "print 1 - 2 - 3;": "(print (- (- 1 2) 3))",
            "print 8 / 4 / 2;": "(print (/ (/ 8 4) 2))",
            "print 1 < 2 == 3 >= 4;": "(print (== (< 1 2) (>= 3 4)))",
            "print 1 != 2 == true;": "(print (== (!= 1 2) true))",
            "print -1 * -2;": "(print (* (- 1) (- 2)))",
            "print !!true;": "(print (! (! true)))",
            "print --x + y;": "(print (+ (- (- x)) y))",
            "print ((1));": "(print (group (group 1)))",
        }
        for case, expected in cases.items():
            self.assertEqual([expected], displayed(case), case)

    def test_nodes(self):
        var_stmt, print_stmt = parse_source("var a = 1.5;\nprint -a;")

        self.assertIsInstance(var_stmt, Var)
        self.assertEqual("a", var_stmt.name.lexeme)
        self.assertEqual(Literal(1.5), var_stmt.initializer)

        self.assertIsInstance(print_stmt, Print)
        self.assertIsInstance(print_stmt.expression, Unary)
        self.assertEqual(TokenType.MINUS, print_stmt.expression.operator.type)
        self.assertEqual(2, print_stmt.expression.operator.line)
        self.assertIsInstance(print_stmt.expression.right, Variable)

    def test_uninitialized_var(self):
        stmt, = parse_source("var x;")
        self.assertIsNone(stmt.initializer)

    def test_expression_statement(self):
        stmt, = parse_source("(x == 2);")
        self.assertIsInstance(stmt, Expression)
        self.assertIsInstance(stmt.expression, Grouping)
        self.assertIsInstance(stmt.expression.expression, Binary)

    def test_errors(self):
        should_fail = {
            "print 1": ("Expect ';' after value.", "at end", 1),
            "1 + 2\nprint 3;": ("Expect ';' after value.", "at 'print'", 2),
            "var = 1;": ("Expect variable name.", "at '='", 1),
            "var x = 1\n": ("Expect ';' after variable declaration.", "at end", 2),
            "var x 1;": ("Expect ';' after variable declaration.", "at '1'", 1),
            "print (1 + 2;": ("Expect ')' after expression.", "at ';'", 1),
            "print ;": ("Unrecongnized token during parsed.", "at ';'", 1),
            "print 1 +;": ("Unrecongnized token during parsed.", "at ';'", 1),
            "\n\n}": ("Unrecongnized token during parsed.", "at '}'", 3),
            "x = 1;": ("Expect ';' after value.", "at '='", 1),
        }
        for case, (msg, where, line) in should_fail.items():
            with self.assertRaises(CompileError, msg=case) as ctx:
                parse_source(case)
            self.assertEqual(msg, ctx.exception.msg, case)
            self.assertEqual(where, ctx.exception.where, case)
            self.assertEqual(line, ctx.exception.line, case)

    def test_first_error_only(self):
        with self.assertRaises(CompileError) as ctx:
            parse_source("print 1\nprint ;")
        self.assertEqual("Expect ';' after value.", ctx.exception.msg)

    def test_requires_eof(self):
        should_fail = [[], [Token(TokenType.NUMBER, "1", 1.0, 1)]]
        for case in should_fail:
            self.assertRaises(ValueError, Parser, case)

    def test_cursor_stays_on_eof(self):
        parser = Parser([Token.eof(1)])
        self.assertEqual(TokenType.EOF, parser.advance().type)
        self.assertEqual(TokenType.EOF, parser.advance().type)
        self.assertFalse(parser.check(TokenType.EOF))
        self.assertEqual([], parser.parse())


if __name__ == '__main__':
    unittest.main()
