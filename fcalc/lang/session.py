"""Session control for fcalc. Drives the parser and evaluator over a whole program, either read from a file/stdin or
fed line by line from the interactive shell.

A program is a sequence of lines: every line but the last defines a function, and the last line is the expression
whose value is the program's result. Blank lines and `;;` comments are ignored.
"""

import re

from fcalc.core.cursor import Cursor
from fcalc.core.evaluator import evaluate
from fcalc.core.parser import expect_end, parse_expression, parse_function_definition
from fcalc.lang.error import EvalError, GenericException


class Session:
    """Governs an fcalc session: the functions defined so far and the source lines they came from."""
    SH_FILE = "<in>"  # command-line interpreter filename
    EXIT = "exit"     # line that ends a program read from a stream
    DEFINITION = re.compile(r"^[^\W\d_]+\([^)]*\)=\{")

    def __init__(self, error_handler, path=SH_FILE, cmd_line=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.arities = {}    # dict of Identifier: parameter count, threaded through parsing
        self.functions = {}  # dict of Identifier: FunctionDefinition, used by the evaluator
        self.source = {}     # dict of zero-based line index: definition line, used to locate runtime errors

        if self.cmd_line:
            self.error_handler.fatal = False

    @staticmethod
    def preprocess_line(line):
        """Removes comments and trailing whitespace."""
        if ";;" in line:
            line = line[:line.index(";;")]
        return line.rstrip()

    @staticmethod
    def is_definition(line):
        """Whether or not line has the shape of a function definition rather than an expression."""
        return Session.DEFINITION.match(line) is not None

    def read(self, stream):
        """Returns the (line_num, line) pairs of the program in stream, stopping at EOF or at an 'exit' line. Line
        numbers are 1-based and count every physical line, including skipped ones.
        """
        program = []
        ignored = 0
        stopped = False
        for line_num, raw in enumerate(stream, 1):
            line = Session.preprocess_line(raw)
            if stopped:
                ignored += bool(line)
            elif line == Session.EXIT:
                stopped = True
            elif line:
                program.append((line_num, line))

        if ignored:
            self.error_handler.warn(f"{ignored} line{'s' if ignored > 1 else ''} after '{Session.EXIT}' ignored")
        return program

    def add(self, line, line_num):
        """Parses line as a function definition and adds it to the session. Arities are only committed if the whole
        definition parses, so a failed definition leaves the session unchanged.
        """
        self.error_handler.register_line(self.path, line, line_num)  # in case error is raised

        arities = dict(self.arities)
        definition = parse_function_definition(Cursor(line, line_num - 1), arities)

        self.arities = arities
        self.functions[definition.name] = definition
        self.source[line_num - 1] = line

        self.error_handler.remove_line(self.path)  # error was not raised
        return definition

    def evaluate(self, line, line_num):
        """Parses line as an expression with no variables in scope, evaluates it and returns the result."""
        self.error_handler.register_line(self.path, line, line_num)

        cursor = Cursor(line, line_num - 1)
        expr = parse_expression(cursor, frozenset(), self.arities)
        expect_end(cursor)

        try:
            result = evaluate(expr, {}, self.functions)
        except EvalError as error:
            # the faulting operator may sit in the body of a function defined on another line
            error.expr = line if error.line == line_num - 1 else self.source.get(error.line, "")
            self.error_handler.register_line(self.path, error.expr, error.line + 1)
            raise

        self.error_handler.remove_line(self.path)
        return result

    def run(self, program):
        """Runs program, a list of (line_num, line) pairs: defines every function and returns the value of the last
        line. Raises any errors that are encountered.
        """
        if not program:
            raise GenericException("no expression to evaluate", diagnosis=False)

        *definitions, (line_num, expr) = program
        for def_num, definition in definitions:
            self.add(definition, def_num)
        return self.evaluate(expr, line_num)
