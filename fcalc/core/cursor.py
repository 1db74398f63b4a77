"""Character-level view over a single line of fcalc source."""


class Cursor:
    """Tracks the read position within one line. Created per line and discarded once the line is parsed."""
    EOL = ""  # end-of-line marker: not a digit, letter or grammar character

    def __init__(self, text, line=0):
        self.text = text
        self.line = line  # zero-based, only used for diagnostics
        self.pos = 0

    def peek(self):
        """Returns the current character without moving, or EOL at (or past) the end of the line."""
        if self.pos >= len(self.text):
            return Cursor.EOL
        return self.text[self.pos]

    def advance(self):
        """Returns the current character (or EOL) and moves forward by one, even past the end of the line."""
        char = self.peek()
        self.pos += 1
        return char

    @property
    def at_end(self):
        return self.peek() == Cursor.EOL

    def __repr__(self):
        return f"Cursor({self.text!r}, line={self.line}, pos={self.pos})"
