"""Utility Functions"""
import logging
import math
import numbers
from collections import namedtuple  # pytype: disable=pyi-error


def get_logger(logname):
    """Create and return a logger object."""
    logger = logging.getLogger(logname)
    return logger


def log_method(method):
    """Generate method for logging"""

    def wrapped(self, *args, **kwargs):
        """Method that gets called for logging"""
        self.logger.info('Entering %s' % method.__name__)
        return method(self, *args, **kwargs)

    return wrapped


class ContextError(Exception):
    """Error for when a timer is created outside of the server context."""
    pass


class TimerConfigError(ValueError):
    """Error for when a timer configuration cannot be used."""
    pass


def _is_number(value):
    """True for finite real numbers, bools excluded"""
    return (isinstance(value, numbers.Real) and not isinstance(value, bool)
            and math.isfinite(value))


class TimerConfig(namedtuple('TimerConfig',
                             'name duration tick_interval auto_destroy')):
    """Validated creation parameters of a Timer"""

    DEFAULT_TICK_INTERVAL = 1
    DEFAULT_AUTO_DESTROY = True

    @classmethod
    def build(cls, name, duration, tick_interval=None, auto_destroy=None):
        """Apply defaults and reject values that would never complete.

        Args:
            name (str): registry key of the timer.
            duration (number): total countdown length in time units.
            tick_interval (number): time units per tick. None or 0 means 1.
            auto_destroy (bool): destroy on natural completion. None means True.
        Returns:
            TimerConfig
        Raises:
            TimerConfigError: if any value is unusable.
        """
        if not isinstance(name, str) or not name:
            raise TimerConfigError("timer name must be a non-empty string, got %r" % (name,))
        if not _is_number(duration) or duration <= 0:
            raise TimerConfigError(
                "timer %s: duration must be a positive finite number, got %r"
                % (name, duration))

        if tick_interval is None or tick_interval == 0:
            tick_interval = cls.DEFAULT_TICK_INTERVAL
        if not _is_number(tick_interval) or tick_interval < 0:
            raise TimerConfigError(
                "timer %s: tick interval must be a positive finite number, got %r"
                % (name, tick_interval))

        if auto_destroy is None:
            auto_destroy = cls.DEFAULT_AUTO_DESTROY

        return cls(name, duration, tick_interval, bool(auto_destroy))

    @classmethod
    def from_dict(cls, data):
        """Build a TimerConfig from a mapping with keys
        'name', 'duration', and optionally 'tick_interval' and 'auto_destroy'"""
        try:
            name = data['name']
            duration = data['duration']
        except KeyError as exception:
            raise TimerConfigError("timer config is missing %s" % exception) from exception
        return cls.build(name, duration,
                         tick_interval=data.get('tick_interval'),
                         auto_destroy=data.get('auto_destroy'))
