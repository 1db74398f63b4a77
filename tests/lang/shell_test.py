import io
import os
import unittest
from contextlib import redirect_stdout
from unittest import mock

from fcalc.lang.error import ErrorHandler
from fcalc.lang.session import Session
from fcalc.lang.shell import Shell


@mock.patch.dict(os.environ, {"ANSI_COLORS_DISABLED": "1"})
class ShellTestCase(unittest.TestCase):

    def setUp(self):
        self.output = io.StringIO()
        self.shell = Shell(Session(ErrorHandler(), Session.SH_FILE, cmd_line=True), stdout=self.output)

    def run_lines(self, *lines):
        with redirect_stdout(self.output):
            for line in lines:
                self.shell.onecmd(line)
        return self.output.getvalue()

    def test_define_and_evaluate(self):
        output = self.run_lines("f(x)={(x*x)}", "f(7)", "(f(2)+1)")
        self.assertEqual("49\n5\n", output)

    def test_errors_are_not_fatal(self):
        output = self.run_lines("abc", "(1/0)", "(1+1)")
        self.assertIn("error: unknown identifier 'abc' at 1:1", output)
        self.assertIn("runtime error: division by zero at 3:2", output)
        self.assertTrue(output.endswith("2\n"))

    def test_failed_definition(self):
        output = self.run_lines("g(x)={y}", "g(x)={x}", "g(3)")
        self.assertNotIn("duplicate", output)
        self.assertTrue(output.endswith("3\n"))

    def test_list(self):
        output = self.run_lines("f(x)={(x*x)}", "k()={1}", "list")
        self.assertEqual("f(x)={(x*x)}\nk()={1}\n", output)

    def test_comment(self):
        self.assertEqual("", self.run_lines(";; nothing"))

    def test_command_names(self):
        output = self.run_lines("exit(x)={(x+1)}", "help(x)={(x*2)}", "exit(1)", "help(4)")
        self.assertEqual("2\n8\n", output)

    def test_eof_function(self):
        with redirect_stdout(self.output):
            self.assertFalse(self.shell.onecmd("EOF(x)={(x+1)}"))
            self.assertFalse(self.shell.onecmd("EOF(1)"))
        self.assertEqual("2\n", self.output.getvalue())

    def test_exit(self):
        self.assertTrue(self.shell.onecmd("exit"))
        with redirect_stdout(self.output):
            self.assertTrue(self.shell.onecmd("EOF"))
        self.assertFalse(self.shell.onecmd(""))

    def test_help(self):
        self.assertIn("Welcome to the fcalc interpreter!", self.run_lines("help"))


if __name__ == '__main__':
    unittest.main()
