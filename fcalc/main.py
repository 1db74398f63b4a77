"""Runs fcalc programs from a file or stdin, or starts command-line mode. Also uses error handling context manager.
Called from the fcalc console script.
"""

import argparse
import sys

from fcalc.lang.error import ErrorHandler, GenericException
from fcalc.lang.session import Session
from fcalc.lang.shell import Shell

RECURSION_LIMIT = 10000  # Python frames available to recursive fcalc programs


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="fcalc", description="fcalc expression interpreter")
    parser.add_argument("file", help="program to run (if empty, reads stdin or goes to command-line mode)", nargs="?")
    parser.add_argument("--recursion-limit", type=int, default=RECURSION_LIMIT,
                        help=f"stack budget for recursive programs (default: {RECURSION_LIMIT})")
    return parser.parse_args(argv)


def main(argv=None):
    """Runs fcalc interpreter. Called from fcalc console script."""
    with ErrorHandler() as error_handler:
        args = parse_args(argv)
        sys.setrecursionlimit(max(args.recursion_limit, 100))

        if args.file is not None:
            sess = Session(error_handler, args.file)
            try:
                with open(args.file, "r") as file:
                    program = sess.read(file)
            except OSError:
                raise GenericException(f"'{args.file}' could not be opened", diagnosis=False)
            print(sess.run(program))

        elif not sys.stdin.isatty():
            sess = Session(error_handler, "<stdin>")
            print(sess.run(sess.read(sys.stdin)))

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()
