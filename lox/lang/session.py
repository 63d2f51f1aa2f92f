"""Session control for the lox language. Runs source through the scan -> parse -> interpret pipeline, either for a
whole script (file interpretation mode) or one line at a time (command-line mode).
"""

from lox.lang.error import GenericException
from lox.pure.ast import display
from lox.pure.environment import Environment
from lox.pure.evaluator import Interpreter
from lox.pure.parser import parse
from lox.pure.scanner import scan


class Session:
    """Governs a lox session. A session owns exactly one Environment, so bindings persist from one run to the next
    unless isolate is set or reset is called.
    """
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path=SH_FILE, cmd_line=False, debug=False, isolate=False, out=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)
        self.error_handler.verbose = debug

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.isolate = isolate    # whether or not every run gets a fresh Environment
        self.out = out            # where print writes, None for stdout

        self.environment = Environment()
        self.interpreter = Interpreter(out)

        if self.cmd_line:
            self.error_handler.fatal = False
        elif path == Session.SH_FILE:
            raise GenericException("'<in>' is a reserved filename")

    def load(self):
        """Returns the contents of self.path."""
        try:
            with open(self.path, "r") as file:
                return file.read()
        except OSError:
            raise GenericException("'{}' could not be opened", self.path) from None

    def run(self, source, line_num=1):
        """Scans, parses, and interprets source. line_num is the line of self.path that source starts at. Will raise
        any errors that are encountered: scan and parse errors abort before anything is executed.
        """
        if self.isolate:
            self.reset()

        self.error_handler.register_source(self.path, source, line_num)

        tokens = scan(source, line_num)
        self.error_handler.trace("tokens", " ".join(str(token) for token in tokens))

        statements = parse(tokens)
        for stmt in statements:
            self.error_handler.trace("ast", display(stmt))

        self.interpreter.interpret(statements, self.environment)

        self.error_handler.remove_source(self.path)  # error was not raised

    def run_file(self):
        """Loads and runs self.path."""
        self.run(self.load())

    def reset(self):
        """Discards every binding made so far."""
        self.environment = Environment()
