"""Entry point for creating and looking up named countdown timers"""
from simpletimer import context
from simpletimer.discovery import find_or_create_link
from simpletimer.task_scheduler import TaskScheduler
from simpletimer.timer import Timer, TimerStatus
from simpletimer.timer_registry import TimerRegistry
from simpletimer.utils import get_logger, ContextError, TimerConfig


class SimpleTimer:
    """Builds timers, keeps them in a registry and exposes the discovery link"""
    COPY_SUFFIX = "_copy"

    # pylint: disable=too-many-arguments
    def __init__(self, logger=None, registry=None, task_scheduler=None,
                 namespace=None, context_check=None):
        """
        Args:
            logger (Logger): parent logger, timers log below it.
            registry (TimerRegistry): where created timers are stored. Default a new one.
            task_scheduler (TaskScheduler): runs the tick loops. Default eventlet based.
            namespace (SharedNamespace): where the discovery link lives.
            context_check (callable): returns True when timers may be created.
                Default context.server_context
        """
        self.log_name = SimpleTimer.__name__
        if logger:
            self.log_name = logger.name + "." + SimpleTimer.__name__
        self.logger = get_logger(self.log_name)

        self.link = find_or_create_link(namespace)

        self.registry = registry
        if self.registry is None:
            self.registry = TimerRegistry("%s.TimerRegistry" % self.log_name, self.link)

        self.task_scheduler = task_scheduler
        if self.task_scheduler is None:
            self.task_scheduler = TaskScheduler(self.logger)

        self.context_check = context.server_context
        if context_check:
            self.context_check = context_check

    def create_timer(self, name, duration, tick_interval=None, auto_destroy=None):
        """Create and register a stopped timer.

        Args:
            name (str): registry key. Replaces any timer already registered under it.
            duration (number): countdown length in time units.
            tick_interval (number): time units per tick. Default 1
            auto_destroy (bool): destroy the timer once it completes. Default True
        Returns:
            Timer
        Raises:
            ContextError: if called outside of the server context.
            TimerConfigError: if the configuration is unusable.
        """
        return self.create_timer_from_config(
            TimerConfig.build(name, duration, tick_interval, auto_destroy))

    def create_timer_from_config(self, config):
        """Create and register a stopped timer from a TimerConfig or a dict"""
        if not self.context_check():
            raise ContextError("Timers have to be created on the server")
        if not isinstance(config, TimerConfig):
            config = TimerConfig.from_dict(config)

        timer = Timer(config, self.task_scheduler, self._timer_log_prefix(config.name),
                      registry=self.registry)
        self.registry.register(config.name, timer)
        self.logger.info("created timer %s: duration %s, tick %s, auto destroy %s",
                         config.name, config.duration, config.tick_interval,
                         config.auto_destroy)
        return timer

    def copy(self, timer):
        """Create an independent, unregistered timer from timer's configuration
        and progress. A running timer is copied as paused since the copy has no
        tick loop."""
        config = timer.config._replace(name=timer.name + self.COPY_SUFFIX)
        status = timer.status
        if status == TimerStatus.RUNNING:
            status = TimerStatus.PAUSED

        self.logger.info("copying timer %s to %s", timer.name, config.name)
        return Timer(config, self.task_scheduler, self._timer_log_prefix(config.name),
                     status=status, remaining_time=timer.remaining_time)

    def register(self, timer):
        """Register a timer that was not created here, e.g. a copy"""
        timer.registry = self.registry
        self.registry.register(timer.name, timer)
        return timer

    def get_timer(self, name):
        """Returns the timer registered under name, or None"""
        return self.registry.lookup(name)

    def wait(self):
        """Block until every tick loop has finished"""
        self.task_scheduler.waitall()

    def _timer_log_prefix(self, name):
        return "%s.Timer - %s" % (self.log_name, name)
