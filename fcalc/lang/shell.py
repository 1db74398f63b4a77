"""Handles interactive/command-line mode for fcalc interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """fcalc interpreter shell."""
    intro = "fcalc interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.line_num = 0

    def default(self, line):
        """Defines a function or evaluates an expression."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            line = self.sess.preprocess_line(line)
            if not line:
                return

            if self.sess.is_definition(line):
                self.sess.add(line, self.line_num)
            else:
                print(self.sess.evaluate(line, self.line_num), file=self.stdout)

    def _fallthrough(self, name, arg):
        """Lines like 'exit(1)' are calls to a function named like a command, not the command itself."""
        if arg.startswith("("):
            self.default(name + arg)
            return True
        return False

    def do_list(self, arg):
        """Lists defined functions."""
        if self._fallthrough("list", arg):
            return
        for definition in self.sess.functions.values():
            print(definition, file=self.stdout)

    def do_help(self, arg):
        """Prints a short intro rather than the command docs."""
        if self._fallthrough("help", arg):
            return
        print("Welcome to the fcalc interpreter!\n\n"
              "fcalc evaluates integer expressions built from fully parenthesized binary operations,\n"
              "conditionals and calls to functions you define. Whitespace is not allowed.\n\n"
              "Try it out by typing 'f(x)={[(x>1)]?((x*f((x-1)))):(1)}'. This defines a factorial\n"
              "function 'f'. Next, try typing 'f(5)', giving '120' as the result. 'list' shows the\n"
              "functions defined so far.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        if self._fallthrough("EOF", arg):
            return False
        print(file=self.stdout)
        return True

    def do_exit(self, arg):
        """Exits interpreter."""
        if self._fallthrough("exit", arg):
            return False
        return True
