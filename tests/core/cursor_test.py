import unittest

from fcalc.core.cursor import Cursor


class CursorTestCase(unittest.TestCase):

    def test_peek(self):
        cursor = Cursor("ab", 3)
        self.assertEqual("a", cursor.peek())
        self.assertEqual("a", cursor.peek())
        self.assertEqual(0, cursor.pos)
        self.assertEqual(3, cursor.line)

    def test_advance(self):
        cursor = Cursor("ab")
        self.assertEqual(["a", "b", Cursor.EOL, Cursor.EOL], [cursor.advance() for __ in range(4)])
        self.assertEqual(4, cursor.pos)
        self.assertTrue(cursor.at_end)

    def test_eol(self):
        should_pass = ["", "x"]
        for case in should_pass:
            cursor = Cursor(case)
            cursor.pos = len(case)
            self.assertEqual(Cursor.EOL, cursor.peek(), case)
            self.assertTrue(cursor.at_end, case)

        self.assertFalse(Cursor.EOL.isalpha())
        self.assertFalse(Cursor.EOL.isdecimal())


if __name__ == '__main__':
    unittest.main()
