"""Handles interactive/command-line mode for the lox interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Lox interpreter shell. Every line is run as its own source unit."""
    intro = "Lox interpreter :: Python backend\nType 'help' for more information, 'exit' to leave."
    prompt = "> "
    COMMANDS = ("help", "reset", "exit", "EOF")  # only commands when alone on their line

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.line_num = 0

    def onecmd(self, line):
        """Runs line as lox source unless the whole line is a shell command, so 'exit == 1;' is still lox."""
        line = line.strip()
        if not line:
            return self.emptyline()
        if line in Shell.COMMANDS:
            return super().onecmd(line)
        return self.default(line)

    def default(self, line):
        """Executes arbitrary lox source."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            self.sess.run(line, self.line_num)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the lox interpreter!\n\n"
              "This interpreter supports variable declarations, print statements and arithmetic/comparison \n"
              "expressions over numbers.\n\n"
              "Try it out by typing 'var x = 10;'. This will bind 10 to the name 'x'. Next, try typing \n"
              "'print x * 2;', which will print 20. Type 'reset' to forget every variable.", file=self.stdout)

    def do_reset(self, arg):
        """Discards every variable declared so far."""
        self.sess.reset()

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
