"""Error handling for the lox language. Scanning and parsing raise CompileErrors, evaluation raises LoxRuntimeErrors.
Both are GenericExceptions: if another type of error makes it all the way to ErrorHandler, it is assumed to be an
internal issue.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be used to throw a lox error. exprs fill the '{}' slots of msg."""
    exit_code = 1

    def __init__(self, msg, exprs=None, line=None, where="", internal=False):
        if exprs is None:
            exprs = []
        if isinstance(exprs, str):
            exprs = [exprs]

        self.template = msg
        self.exprs = list(exprs)
        self.msg = msg.format(*self.exprs)
        self.line = line
        self.where = where  # location of the error within its line, ex: "at 'x'"
        self.internal = internal

        super().__init__(self.msg)

    def styled(self):
        """Returns self.msg with expr snippets bolded."""
        return self.template.format(*(colored(expr, attrs=["bold"]) for expr in self.exprs))

    def report(self):
        """Human-readable one-line report. Subclasses define the exact format."""
        return self.msg


class CompileError(GenericException):
    """Lexical or syntactic failure. Only ever raised by the scanner and the parser."""
    exit_code = 65

    def report(self):
        where = f" {self.where}" if self.where else ""
        return f"[line {self.line}] Error{where}: {self.msg}"


class LoxRuntimeError(GenericException):
    """Type or binding failure. Only ever raised during evaluation."""
    exit_code = 70

    def report(self):
        if self.line is None:
            return f"[runtime error] {self.msg}"
        return f"[line {self.line}] Runtime error: {self.msg}"


class ErrorHandler:
    """Context manager that reports lox errors and optionally exits. Other Python errors are reported as internal."""
    ERROR = "red"
    TRACE = "cyan"

    def __init__(self, fatal=True, verbose=False, stream=None):
        self.fatal = fatal
        self.verbose = verbose
        self.stream = stream
        self.had_error = False
        self.traceback = {}

    @property
    def out(self):
        return self.stream if self.stream is not None else sys.stderr

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_source(self, path, source, first_line=1):
        """Registers source in traceback given path. Should be called prior to Session run. first_line is the line of
        path that source starts at (command-line mode feeds one line at a time). Error lines are lines of path.
        """
        self.traceback[path] = (source, first_line)

    def remove_source(self, path):
        """Removes source from traceback given path. Should be called after successful Session run."""
        self.traceback[path] = (None, None)

    @staticmethod
    def source_line(source, line):
        """Returns the stripped text of line (1-based) within source, or None if it can't be found."""
        if source is None or line is None:
            return None
        lines = source.splitlines()
        if 0 < line <= len(lines):
            return lines[line - 1].strip()
        return None

    def trace(self, stage, text):
        """Prints debug output for a pipeline stage. Only prints if self.verbose."""
        if self.verbose:
            print(colored(f"[{stage}]", ErrorHandler.TRACE, attrs=["bold"]), text, file=self.out)

    def throw(self, error):
        """Prints error using self.traceback. error must be a GenericException. Exits with error.exit_code if
        self.fatal.
        """
        self.had_error = True

        error_msg = ""
        lines = 0
        for file, (source, first_line) in self.traceback.items():  # assumes dict is insertion-ordered
            if source is None or error.line is None:
                continue
            text = ErrorHandler.source_line(source, error.line - first_line + 1)
            if text:
                error_msg += f"  File '{file}', line {error.line}:\n"
                error_msg += f"    {text}\n"
                lines += 1

        if lines > 1:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"])
        if isinstance(error, (CompileError, LoxRuntimeError)):
            error_msg += error.report().replace(error.msg, error.styled())
        else:
            error_msg += error.styled()
        print(error_msg, file=self.out)

        if self.fatal:
            sys.exit(error.exit_code)
        self.traceback = {file: (None, None) for file in self.traceback}

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("expression nested too deeply"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException("unknown error: '{}: {}'", (exc_type.__name__, str(exc_val)), internal=True))
            do_exit = True

        return not do_exit
