import argparse
import contextlib
import io
import os
import tempfile
import unittest
from unittest import mock

from lagrange import common
from lagrange import opts
from lagrange import rationals
from lagrange.logging import verbose
from lagrange.main import run

class TestMain(unittest.TestCase):

    def setUp(self):
        self.snapshot = opts.snapshot()
        self.paths = []

    def tearDown(self):
        opts.restore(self.snapshot)
        for path in self.paths:
            os.remove(path)

    def write_points(self, text):
        fd, path = tempfile.mkstemp(text=True)
        with os.fdopen(fd, "w") as f:
            f.write(text)
        self.paths.append(path)
        return path

    def run_main(self, *argv):
        out = io.StringIO()
        err = io.StringIO()
        code = 0
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            try:
                run(list(argv))
            except SystemExit as e:
                code = e.code
        return code, out.getvalue().splitlines(), err.getvalue()

    def test_interpolate_file(self):
        path = self.write_points("0 1\n1 2\n2 5\n3\n")
        code, lines, err = self.run_main(path)
        self.assertEqual(code, 0)
        self.assertEqual(lines[0], "ip ≡ [1, 0, 1]")
        self.assertEqual(lines[1], "ip(3) = 10")
        self.assertTrue(lines[2].startswith("Done in "))
        self.assertTrue(lines[2].endswith(" µs."))
        self.assertEqual(err, "")

    def test_rational_output(self):
        path = self.write_points("0 0\n2 1\n")
        code, lines, err = self.run_main("-r", path)
        self.assertEqual(code, 0)
        self.assertEqual(lines[0], "ip ≡ [0, 1/2]")
        self.assertEqual(len(lines), 2)

    def test_max_denominator(self):
        path = self.write_points("0 0\n1 3.14159265\n")
        code, lines, err = self.run_main("--rational", "--max-denominator", "7", path)
        self.assertEqual(code, 0)
        self.assertEqual(lines[0], "ip ≡ [0, 22/7]")
        self.assertEqual(rationals.max_denominator.value, rationals.DEFAULT_MAX_DENOMINATOR)

    def test_evaluate_at(self):
        path = self.write_points("0 1\n1 2\n2 5\n3\n")
        code, lines, err = self.run_main("--at", "4", "-x", "4", "-x", "-1", path)
        self.assertEqual(code, 0)
        self.assertEqual(lines[1:4], ["ip(4) = 17", "ip(-1) = 2", "ip(3) = 10"])

    def test_too_few_points(self):
        path = self.write_points("1 2\n")
        code, lines, err = self.run_main(path)
        self.assertEqual(code, 1)
        self.assertEqual(lines, [])
        self.assertIn("Error: At least two points are required", err)

    def test_duplicate_points(self):
        path = self.write_points("1 2\n1 3\n")
        code, lines, err = self.run_main(path)
        self.assertEqual(code, 1)
        self.assertIn("Error: Expected distinct x-coordinates", err)

    def test_missing_file(self):
        path = self.write_points("")
        os.remove(path)
        self.paths.remove(path)
        code, lines, err = self.run_main(path)
        self.assertEqual(code, 1)
        self.assertIn("could not be read", err)
        self.assertIn("file " + path, err)

    def test_undecodable_file(self):
        fd, path = tempfile.mkstemp()
        with os.fdopen(fd, "wb") as f:
            f.write(b"0 1\n1 2\n\xff\xfe 3\n")
        self.paths.append(path)
        code, lines, err = self.run_main(path)
        self.assertEqual(code, 1)
        self.assertEqual(lines, [])
        self.assertIn("Error: file " + path + " could not be read", err)

    def test_unreadable_stdin(self):
        with mock.patch.object(common, "open_maybe_stdin", side_effect=OSError("closed")):
            code, lines, err = self.run_main()
        self.assertEqual(code, 1)
        self.assertIn("Error: standard input could not be read (closed).", err)

    def test_options_restored_after_run(self):
        path = self.write_points("0 1\n1 2\n")
        self.run_main("--verbose", "--max-denominator", "9", path)
        self.assertFalse(verbose.value)
        self.assertEqual(rationals.max_denominator.value, rationals.DEFAULT_MAX_DENOMINATOR)
        self.run_main("--max-denominator", "0", path)
        self.assertEqual(rationals.max_denominator.value, rationals.DEFAULT_MAX_DENOMINATOR)

    def test_bad_max_denominator(self):
        path = self.write_points("0 1\n1 2\n")
        code, lines, err = self.run_main("--max-denominator", "0", path)
        self.assertEqual(code, 2)

    def test_verbose(self):
        path = self.write_points("0 1\n1 2\n")
        code, lines, err = self.run_main("--verbose", path)
        self.assertEqual(code, 0)
        self.assertFalse(verbose.value)
        self.assertIn("interpolate [points=2]...", err)
        self.assertIn("Finished interpolate", err)
        self.assertIn("solve / interpolate took ", err)
        self.assertIn("read points took ", err)

    def test_quiet_without_verbose(self):
        path = self.write_points("0 1\n1 2\n")
        code, lines, err = self.run_main(path)
        self.assertEqual(code, 0)
        self.assertEqual(err, "")

class TestOptions(unittest.TestCase):

    def setUp(self):
        self.snapshot = opts.snapshot()

    def tearDown(self):
        opts.restore(self.snapshot)

    def test_option_cannot_be_used_as_bool(self):
        with self.assertRaises(Exception):
            bool(verbose)

    def test_option_check(self):
        self.assertEqual(rationals.max_denominator.parse("12"), 12)
        with self.assertRaises(argparse.ArgumentTypeError):
            rationals.max_denominator.parse("0")
        with self.assertRaises(argparse.ArgumentTypeError):
            rationals.max_denominator.parse("ten")

    def test_snapshot_restore(self):
        snap = opts.snapshot()
        self.assertEqual(snap["max-denominator"], rationals.max_denominator.value)
        self.assertEqual(hash(snap), hash(opts.snapshot()))
        rationals.max_denominator.value = 12
        verbose.value = True
        opts.restore(snap)
        self.assertEqual(rationals.max_denominator.value, rationals.DEFAULT_MAX_DENOMINATOR)
        self.assertFalse(verbose.value)

if __name__ == '__main__':
    unittest.main()
