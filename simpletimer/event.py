"""Various Events used by SimpleTimer"""

from simpletimer.utils import get_logger

# pylint: disable=too-few-public-methods


class TimerEvent:
    """Names of the notifications a timer or the registry publishes"""
    TICK = "tick"
    STATUS_CHANGED = "status_changed"
    COMPLETED = "completed"
    REGISTERED = "registered"
    UNREGISTERED = "unregistered"


class Signal:
    """Publish point with synchronous, ordered delivery to its current subscribers."""

    def __init__(self, name, log_prefix=None):
        """
        Args:
            name (str): what is being published, e.g. TimerEvent.TICK
            log_prefix (str): the prefix used when outputting logs
        """
        self.name = name
        self.logger = get_logger(log_prefix or Signal.__name__)
        self._handlers = []
        self._destroyed = False

    @property
    def destroyed(self):
        """True once the signal has released its subscribers"""
        return self._destroyed

    def connect(self, handler):
        """Subscribe handler. Returns handler so this can be used as a decorator."""
        if self._destroyed:
            self.logger.debug("not connecting %s to destroyed signal %s", handler, self.name)
            return handler
        self._handlers.append(handler)
        return handler

    def disconnect(self, handler):
        """Unsubscribe handler, no-op if it is not subscribed"""
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass

    def fire(self, *args):
        """Call every handler subscribed when fire starts, in subscription order.
        A handler that raises is logged and the remaining handlers still run."""
        if self._destroyed:
            return
        for handler in list(self._handlers):
            try:
                handler(*args)
            except Exception as e:  # pylint: disable=broad-except
                self.logger.exception("handler %s of %s failed: %s", handler, self.name, e)

    def destroy(self):
        """Drop all subscribers. Later fire and connect calls do nothing."""
        self._handlers.clear()
        self._destroyed = True

    def __len__(self):
        return len(self._handlers)

    def __repr__(self):
        return "%s(\"%s\")" % (self.__class__.__name__, self.name)
