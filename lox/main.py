"""Runs the lox interpreter on a script, or in command-line mode if no script is given. Called from the lox console
script.

Exit codes (file interpretation mode): 0 on success, 65 on a compile error, 70 on a runtime error, 1 otherwise.
"""

import argparse
import sys

from lox.lang.error import ErrorHandler
from lox.lang.session import Session
from lox.lang.shell import Shell


def build_parser():
    parser = argparse.ArgumentParser(prog="lox", description="Tree-walking interpreter for a small subset of lox.")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--debug", action="store_true", help="trace tokens and syntax trees on stderr")
    parser.add_argument("--isolate", action="store_true",
                        help="command-line mode only: forget variables between lines")
    return parser


def main(argv=None):
    """Runs lox interpreter. Called from lox executable script."""
    assert sys.version_info >= (3, 7), "lox cannot be run with python < 3.7"

    args = build_parser().parse_args(argv)

    with ErrorHandler() as error_handler:
        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False, debug=args.debug)
            sess.run_file()

        else:
            sess = Session(error_handler, Session.SH_FILE, cmd_line=True, debug=args.debug, isolate=args.isolate)
            Shell(sess).cmdloop()

    return 0


if __name__ == "__main__":
    sys.exit(main())
