import contextlib
import io
import math
import unittest

from lazycomb.enumeration_config import EnumerationConfig
from lazycomb.lazy_combinations import CombinationSequence
from lazycomb.main_enumerate import main, run


class TestEnumerationConfig(unittest.TestCase):
    def test_validate_rejects_negative_values(self):
        for cfg in (EnumerationConfig(-1, 2), EnumerationConfig(3, -1), EnumerationConfig(3, 2, limit=-5)):
            with self.assertRaises(ValueError):
                cfg.validate()

    def test_k_greater_than_n_is_valid(self):
        cfg = EnumerationConfig(3, 7)
        cfg.validate()
        self.assertEqual(cfg.to_sequence(), CombinationSequence(3, 7))


class TestMainEnumerate(unittest.TestCase):
    def _capture(self, fn, *args):
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            code = fn(*args)
        return code, buf.getvalue().splitlines()

    def test_prints_subsets_and_summary(self):
        code, lines = self._capture(main, ["4", "2"])
        self.assertEqual(code, 0)
        self.assertEqual(lines[0], "[Comb] n=4 k=2 -> 6 subsets")
        self.assertEqual(lines[1:7], ["0 1", "0 2", "0 3", "1 2", "1 3", "2 3"])
        self.assertEqual(lines[-1], "[Comb] printed 6 subsets")

    def test_quiet_with_limit(self):
        code, lines = self._capture(main, ["7", "4", "--limit", "2", "--quiet"])
        self.assertEqual(code, 0)
        self.assertEqual(lines, ["0 1 2 3", "0 1 2 4"])

    def test_limit_is_reported(self):
        _, lines = self._capture(run, EnumerationConfig(5, 1, limit=2))
        self.assertIn("[Comb] stopped after limit=2", lines)

    def test_limit_on_huge_sequence(self):
        code, lines = self._capture(main, ["100", "50", "--limit", "3"])
        self.assertEqual(code, 0)
        self.assertEqual(lines[0], f"[Comb] n=100 k=50 -> {math.comb(100, 50)} subsets")
        self.assertEqual(len(lines), 6)
        self.assertTrue(lines[3].endswith(" 48 51"))
        self.assertEqual(lines[-2:], ["[Comb] stopped after limit=3", "[Comb] printed 3 subsets"])

    def test_empty_sequence(self):
        code, lines = self._capture(main, ["3", "7", "--quiet"])
        self.assertEqual(code, 0)
        self.assertEqual(lines, [])

    def test_array_output(self):
        _, lines = self._capture(run, EnumerationConfig(3, 2, as_array=True, verbose=False))
        self.assertEqual(lines, ["[[0 1]", " [0 2]", " [1 2]]"])

    def test_negative_argument_exits(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["3", "-1"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main(verbosity=2)
