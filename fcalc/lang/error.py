"""Error handling for fcalc. Only GenericExceptions (ParseError, EvalError) are expected during a run: if another type
of error makes it all the way to ErrorHandler, it is assumed to be an internal issue. Running out of stack is reported
separately and always ends the run.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """User-facing fcalc error. expr is the source line the error points into, start/end delimit the offending
    characters within it and line is the zero-based index of that line (None if the error is not positional).
    """

    def __init__(self, msg, expr="", start=0, end=-1, line=None, diagnosis=True, internal=False):
        super().__init__(msg)
        self.msg = msg
        self.expr = expr
        self.start = start
        self.end = end if end != -1 else start + 1  # single offending character by default
        self.line = line

        self.diagnosis = diagnosis
        self.internal = internal

    @property
    def column(self):
        """1-based column of the offending character."""
        return self.start + 1

    @property
    def position(self):
        """1-based 'column:line', or None if the error has no line."""
        if self.line is None:
            return None
        return f"{self.column}:{self.line + 1}"

    def __str__(self):
        if self.position:
            return f"{self.msg} at {self.position}"
        return self.msg


class ParseError(GenericException):
    """Malformed syntax, unknown name, wrong argument list or duplicate definition. Aborts the whole parse."""


class EvalError(GenericException):
    """Arithmetic fault raised by a BinaryOp at runtime. pos/line are those recorded for the operator."""

    def __init__(self, pos, line, cause, expr=""):
        super().__init__(str(cause), expr, start=pos, end=pos + 1, line=line)
        self.cause = cause


class ErrorHandler:
    """Context manager that will silently suppress Python errors and print fcalc errors/warnings instead."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called before the line is parsed or evaluated."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called once the line was handled without error."""
        self.traceback[path] = (None, None)

    @staticmethod
    def diagnose(error, warning=False):
        """Returns error.expr with the offending part highlighted and underlined."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR
        end = max(error.end, error.start + 1)

        diagnosis = "  " + error.expr[:error.start]
        diagnosis += colored(error.expr[error.start:end], color, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), color, attrs=["bold"])

        return diagnosis

    def warn(self, *args, **kwargs):
        """Generates and prints a warning message based on args (see GenericException)."""
        error = GenericException(*args, **kwargs)

        file, (__, line_num) = next(iter(self.traceback.items()), ("<unknown>", (None, None)))
        location = f"{file}:{line_num}: " if line_num is not None else f"{file}: "

        warning_msg = colored(location, attrs=["bold"])
        warning_msg += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + str(error)
        print(warning_msg)

        if error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=True))

    def throw(self, error, fatal=None):
        """Prints error, a GenericException, using self.traceback (a dict of file: (line, line_num) representing the
        origin of the error). Exits if fatal (defaults to self.fatal).
        """
        error_msg = ""
        lines = 0
        for file, (line, line_num) in self.traceback.items():  # dicts are insertion-ordered
            if line:
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line}\n"
                lines += 1

        if lines:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        kind = "runtime error: " if isinstance(error, EvalError) else "error: "
        error_msg += colored(kind, ErrorHandler.ERROR, attrs=["bold"]) + str(error)
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error))

        if self.fatal if fatal is None else fatal:
            sys.exit(1)
        for path in self.traceback:  # if error was not fatal, forget the lines it came from
            self.remove_line(path)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt", diagnosis=False))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("maximum recursion depth exceeded", diagnosis=False), fatal=True)
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True), fatal=True)

        return not do_exit
