"""This module keeps track of the timers that can be looked up by name"""
from simpletimer.event import TimerEvent
from simpletimer.utils import get_logger


class TimerRegistry:
    """Mapping from timer name to Timer, keys are unique"""

    def __init__(self, log_prefix=None, link=None):
        """
        Args:
            log_prefix (String): the prefix used when outputting logs
            link (Link): discovery link to announce registrations on. Optional.
        """
        self.logger = get_logger(log_prefix or TimerRegistry.__name__)
        self.link = link
        self._timers = {}  # name : timer

    def register(self, name, timer):
        """Store timer under name. An existing timer with the same name is replaced
        and can no longer be looked up."""
        previous = self._timers.get(name, None)
        if previous is not None and previous is not timer:
            self.logger.warning("timer '%s' already registered, replacing %s with %s",
                                name, previous, timer)
        self._timers[name] = timer
        self._announce(TimerEvent.REGISTERED, name)

    def unregister(self, name, timer=None):
        """Remove the entry for name, no-op if there is none.

        Args:
            name (str): name to remove.
            timer (Timer): if given, only remove the entry when it is this timer.
        """
        current = self._timers.get(name, None)
        if current is None:
            return
        if timer is not None and current is not timer:
            self.logger.debug("not unregistering '%s', it now belongs to %s", name, current)
            return
        del self._timers[name]
        self._announce(TimerEvent.UNREGISTERED, name)

    def lookup(self, name):
        """Returns the timer registered under name, or None if not found"""
        return self._timers.get(name, None)

    def names(self):
        """Returns the names of all registered timers"""
        return list(self._timers)

    def _announce(self, event, name):
        if self.link is not None:
            self.link.fire(event, name)

    def __contains__(self, name):
        return name in self._timers

    def __len__(self):
        return len(self._timers)
