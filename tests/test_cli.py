import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

import prime_iter


def run(*argv):
    out = io.StringIO()
    with redirect_stdout(out):
        status = prime_iter.main(list(argv))
    return status, out.getvalue().splitlines()


class CommandLineTests(unittest.TestCase):
    def test_count(self):
        status, lines = run("--count", "5")
        self.assertEqual(0, status)
        self.assertEqual(["2", "3", "5", "7", "11"], lines)
    
    def test_limit(self):
        status, lines = run("--limit", "20")
        self.assertEqual(0, status)
        self.assertEqual(["2", "3", "5", "7", "11", "13", "17", "19"], lines)
    
    def test_stats_quiet(self):
        status, lines = run("--count", "10", "--quiet", "--stats")
        self.assertEqual(0, status)
        self.assertEqual("--- stats ---", lines[0])
        self.assertIn("primes emitted : 10", lines)
        self.assertIn("largest prime  : 29", lines)
        self.assertIn("candidates     : 14", lines)
        self.assertIn("divisions      : 26", lines)
    
    def test_empty_range_warns(self):
        status, lines = run("--count", "0")
        self.assertEqual(0, status)
        self.assertEqual(["[warn] no primes in the requested range."], lines)
    
    def test_rejects_bad_arguments(self):
        for argv in (["--count", "-3"], ["--limit", "ten"], [], ["--count", "1", "--limit", "5"]):
            with self.subTest(argv=argv):
                with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
                    prime_iter.main(argv)
                self.assertEqual(2, ctx.exception.code)


if __name__ == '__main__':
    unittest.main()
