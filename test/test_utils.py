"""Unittests for simpletimer/utils.py"""
import unittest

from simpletimer.utils import TimerConfig, TimerConfigError, ContextError


# pylint: disable=missing-docstring
class TimerConfigTestCase(unittest.TestCase):

    def test_defaults(self):
        config = TimerConfig.build("T1", 3)
        self.assertEqual(config, TimerConfig("T1", 3, 1, True))

    def test_explicit_values(self):
        config = TimerConfig.build("T1", 2.5, tick_interval=0.5, auto_destroy=False)
        self.assertEqual(config.tick_interval, 0.5)
        self.assertIs(config.auto_destroy, False)

    def test_zero_tick_interval_defaults(self):
        self.assertEqual(TimerConfig.build("T1", 3, tick_interval=0).tick_interval, 1)

    def test_rejects_unusable_values(self):
        for args in [("T1", 0), ("T1", -1), ("T1", True), ("T1", None), ("T1", "3"),
                     ("T1", 3, -0.5), ("T1", 3, "1"), ("", 3), (3, 3)]:
            with self.subTest(args=args):
                self.assertRaises(TimerConfigError, TimerConfig.build, *args)

    def test_rejects_non_finite_values(self):
        for args in [("T1", float("nan")), ("T1", float("inf")), ("T1", float("-inf")),
                     ("T1", 3, float("nan")), ("T1", 3, float("inf"))]:
            with self.subTest(args=args):
                self.assertRaises(TimerConfigError, TimerConfig.build, *args)

    def test_config_error_is_value_error(self):
        self.assertTrue(issubclass(TimerConfigError, ValueError))
        self.assertFalse(issubclass(ContextError, ValueError))

    def test_from_dict(self):
        config = TimerConfig.from_dict({"name": "T1", "duration": 4, "auto_destroy": False})
        self.assertEqual(config, TimerConfig("T1", 4, 1, False))

    def test_from_dict_missing_name(self):
        self.assertRaises(TimerConfigError, TimerConfig.from_dict, {"duration": 4})


if __name__ == '__main__':
    unittest.main()
