"""Unittests for simpletimer/event.py"""
import unittest

from simpletimer.event import Signal, TimerEvent


# pylint: disable=missing-docstring
class SignalTestCase(unittest.TestCase):

    def setUp(self):
        self.signal = Signal(TimerEvent.TICK)
        self.received = []

    def test_fire_without_subscribers(self):
        self.signal.fire(3)
        self.assertEqual(len(self.signal), 0)

    def test_handlers_called_in_subscription_order(self):
        self.signal.connect(lambda value: self.received.append(("a", value)))
        self.signal.connect(lambda value: self.received.append(("b", value)))

        self.signal.fire(3)
        self.signal.fire(2)

        self.assertEqual(self.received, [("a", 3), ("b", 3), ("a", 2), ("b", 2)])

    def test_connect_as_decorator(self):
        @self.signal.connect
        def handler(value):
            self.received.append(value)

        self.signal.fire(1)
        self.assertEqual(self.received, [1])
        self.assertTrue(callable(handler))

    def test_handler_connected_during_fire_misses_it(self):
        def late(value):
            self.received.append(("late", value))

        def first(value):
            self.received.append(("first", value))
            self.signal.connect(late)

        self.signal.connect(first)
        self.signal.fire(1)
        self.assertEqual(self.received, [("first", 1)])

        self.signal.disconnect(first)
        self.signal.fire(2)
        self.assertEqual(self.received, [("first", 1), ("late", 2)])

    def test_disconnect(self):
        handler = self.signal.connect(self.received.append)
        self.signal.disconnect(handler)
        self.signal.disconnect(handler)

        self.signal.fire(1)
        self.assertEqual(self.received, [])

    def test_destroy_releases_subscribers(self):
        self.signal.connect(self.received.append)
        self.signal.destroy()

        self.assertTrue(self.signal.destroyed)
        self.assertEqual(len(self.signal), 0)

        self.signal.fire(1)
        self.signal.connect(self.received.append)
        self.signal.fire(2)
        self.assertEqual(self.received, [])
        self.assertEqual(len(self.signal), 0)

    def test_failing_handler_is_logged_and_others_still_run(self):
        def broken(value):
            raise RuntimeError("broken handler %s" % value)

        self.signal.connect(self.received.append)
        self.signal.connect(broken)
        self.signal.connect(lambda value: self.received.append(value * 10))

        with self.assertLogs("Signal", level="ERROR") as logs:
            self.signal.fire(1)
            self.signal.fire(2)

        self.assertEqual(self.received, [1, 10, 2, 20])
        self.assertEqual(len(logs.records), 2)
        self.assertIn("broken handler 1", logs.output[0])

    def test_fire_without_arguments(self):
        signal = Signal(TimerEvent.STATUS_CHANGED)
        signal.connect(lambda: self.received.append("changed"))
        signal.fire()
        self.assertEqual(self.received, ["changed"])


if __name__ == '__main__':
    unittest.main()
