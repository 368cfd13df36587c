import unittest
import sys
import os
import io
import argparse
from contextlib import redirect_stdout, redirect_stderr

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from prim_maze.main import main, parse_coord
from prim_maze.algo.prim import generate
from prim_maze.viz.ascii import to_text

class TestCli(unittest.TestCase):
    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            main(list(argv))
        return out.getvalue()

    def test_parse_coord(self):
        self.assertEqual(parse_coord("3,4"), (3, 4))
        with self.assertRaises(argparse.ArgumentTypeError):
            parse_coord("3")
        with self.assertRaises(argparse.ArgumentTypeError):
            parse_coord("a,b")

    def test_generate_prints_maze(self):
        text = self.run_cli("generate", "--width", "5", "--height", "4", "--seed", "9")
        self.assertEqual(text.rstrip("\n"), to_text(generate(5, 4, seed=9)))

    def test_generate_with_holes(self):
        text = self.run_cli("generate", "--width", "3", "--height", "3", "--seed", "1", "--hole", "1,1")
        lines = text.rstrip("\n").split("\n")
        self.assertEqual(len(lines), 9)
        self.assertEqual(lines[3][3:6], "XXX")
        self.assertEqual(lines[4][3:6], "X X")
        self.assertEqual(lines[5][3:6], "XXX")

    def test_invalid_dimension_exits(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            self.run_cli("generate", "--width", "0", "--height", "3")
        self.assertEqual(ctx.exception.code, 2)

    def test_hole_out_of_range_exits(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            self.run_cli("generate", "--width", "3", "--height", "3", "--hole", "5,5")
        self.assertEqual(ctx.exception.code, 2)

    def test_negative_hole_reports_range(self):
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            self.run_cli("generate", "--width", "3", "--height", "3", "--hole=-1,0")
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("out of bounds", err.getvalue())

    def test_hole_help_mentions_negative_form(self):
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit):
            main(["generate", "--help"])
        # help text may be wrapped across lines
        self.assertIn("--hole=-1,0", "".join(out.getvalue().split()))

    def test_no_command(self):
        text = self.run_cli()
        self.assertIn("generate", text)

if __name__ == '__main__':
    unittest.main()
