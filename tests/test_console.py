import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

import console


class TestConsole(unittest.TestCase):

    def _run(self, argv, answers=()):
        replies = iter(answers)
        out = io.StringIO()
        with redirect_stdout(out):
            code = console.main(argv, ask=lambda prompt: next(replies))
        return code, out.getvalue()

    def test_format_report(self):
        text = console.format_report([[0, 5], [5, 0]], [1, 2, 1], 10.0)
        self.assertIn("Input Summary", text)
        self.assertIn("Route: 1 -> 2 -> 1", text)
        self.assertIn("Location 2", text)
        self.assertIn("Minimum distance: 10.00 units", text)
        self.assertTrue(text.startswith("=" * 50))

    def test_interactive(self):
        code, out = self._run([], ["2", "0", "5", "5", "0", "1"])
        self.assertEqual(code, 0)
        self.assertIn("Route: 1 -> 2 -> 1", out)
        self.assertIn("Minimum distance: 10.00 units", out)

    def test_interactive_bad_number(self):
        code, out = self._run([], ["two"])
        self.assertEqual(code, 1)
        self.assertIn("Invalid input", out)

    def test_interactive_bad_start(self):
        code, out = self._run([], ["2", "0", "5", "5", "0", "3"])
        self.assertEqual(code, 1)
        self.assertIn("outside 1..2", out)

    def test_interactive_start_flag(self):
        dist = ["3", "0", "1", "100", "100", "0", "1", "1", "100", "0"]
        code, out = self._run(["--start", "2"], dist)
        self.assertEqual(code, 0)
        self.assertIn("Route: 2 -> 3 -> 1 -> 2", out)
        self.assertNotIn("Enter the starting location", out)

    def test_interactive_end_of_input(self):
        def ask(prompt):
            raise EOFError

        out = io.StringIO()
        with redirect_stdout(out):
            code = console.main([], ask=ask)
        self.assertEqual(code, 1)
        self.assertIn("Invalid input", out.getvalue())

    def test_csv(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "m.csv")
            with open(path, "w", encoding="utf-8") as f:
                f.write("0,10,15,20\n10,0,35,25\n15,35,0,30\n20,25,30,0\n")
            code, out = self._run(["--csv", path, "--start", "1"])
        self.assertEqual(code, 0)
        self.assertIn("Route: 1 -> 3 -> 4 -> 2 -> 1", out)
        self.assertIn("Minimum distance: 80.00 units", out)

    def test_csv_missing_file(self):
        code, out = self._run(["--csv", "/nonexistent/m.csv"])
        self.assertEqual(code, 1)


if __name__ == '__main__':
    unittest.main()
