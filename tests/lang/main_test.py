import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from lox.main import build_parser, main


@mock.patch.dict(os.environ, {"ANSI_COLORS_DISABLED": "1"})
class MainTestCase(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def script(self, source):
        path = os.path.join(self.tmp.name, "script.lox")
        with open(path, "w") as file:
            file.write(source)
        return path

    def run_main(self, argv):
        """Returns (exit code, stdout, stderr)."""
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            try:
                code = main(argv)
            except SystemExit as exc:
                code = exc.code
        return code, out.getvalue(), err.getvalue()

    def test_args(self):
        args = build_parser().parse_args([])
        self.assertIsNone(args.file)
        self.assertFalse(args.debug)
        self.assertFalse(args.isolate)

        args = build_parser().parse_args(["x.lox", "--debug"])
        self.assertEqual("x.lox", args.file)
        self.assertTrue(args.debug)

    def test_success(self):
        code, out, err = self.run_main([self.script("var x = 10;\nprint x;\nprint (1 + 2) * 3;\n")])
        self.assertEqual(0, code)
        self.assertEqual("10\n9\n", out)
        self.assertEqual("", err)

    def test_exit_codes(self):
        cases = {
            "print \"abc;": (65, "[line 1] Error: Unterminated string."),
            "print 1;\nprint 2": (65, "[line 2] Error at end: Expect ';' after value."),
            "print 1;\nprint -\"a\";": (70, "[line 2] Runtime error: Operand must be a number."),
        }
        for source, (expected_code, message) in cases.items():
            code, out, err = self.run_main([self.script(source)])
            self.assertEqual(expected_code, code, source)
            self.assertIn(message, err, source)

    def test_compile_error_prints_nothing(self):
        code, out, err = self.run_main([self.script("print 1;\nprint @;")])
        self.assertEqual(65, code)
        self.assertEqual("", out)

    def test_runtime_error_keeps_earlier_output(self):
        code, out, err = self.run_main([self.script("print 1;\nprint missing;\nprint 3;")])
        self.assertEqual(70, code)
        self.assertEqual("1\n", out)
        self.assertIn("Undefined variable 'missing'.", err)

    def test_missing_file(self):
        code, out, err = self.run_main([os.path.join(self.tmp.name, "nope.lox")])
        self.assertEqual(1, code)
        self.assertIn("could not be opened", err)

    def test_shell(self):
        with mock.patch("sys.stdin", io.StringIO("var a = 6;\nprint a / 4;\nprint b;\nexit\n")):
            code, out, err = self.run_main([])
        self.assertEqual(0, code)
        self.assertIn("1.5\n", out)
        self.assertIn("Undefined variable 'b'.", err)


if __name__ == '__main__':
    unittest.main()
