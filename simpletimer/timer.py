"""This Module provides the countdown Timer: a lifecycle State Machine driving a
cooperative tick loop"""

from transitions import State, Machine

from simpletimer.event import Signal, TimerEvent
from simpletimer.state_machines.abstract_state_machine import AbstractStateMachine
from simpletimer.utils import get_logger, log_method


class TimerStatus:
    """Values a Timer's status can take"""
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"

    ALL = (STOPPED, RUNNING, PAUSED, COMPLETED)


class Timer(AbstractStateMachine):
    """Counts down from a configured duration in fixed tick increments.

    The lifecycle triggers start(), pause(), resume(), stop() and destroy() are added
    to the instance by the state machine. Calls that do not apply to the current
    status are ignored.

    Notifications:
        on_tick(remaining_time): every tick, with the time left before the tick.
        on_status_changed(): after start, pause, resume, stop and completion. Read status.
        on_completed(): once the countdown runs out while running.
    """

    # pylint: disable=too-many-instance-attributes

    STOPPED = TimerStatus.STOPPED
    RUNNING = TimerStatus.RUNNING
    PAUSED = TimerStatus.PAUSED
    COMPLETED = TimerStatus.COMPLETED

    INITIAL_STATE = STOPPED
    IDLE_STATES = [
        State(STOPPED, "stopped_state"),
    ]
    PROGRESS_STATES = [
        State(RUNNING, "running_state"),
        State(PAUSED, "paused_state"),
    ]
    COMPLETION_STATES = [
        State(COMPLETED, "completed_state"),
    ]

    STATES = IDLE_STATES + PROGRESS_STATES + COMPLETION_STATES

    CORE_TRANSITIONS = [
        {
            "trigger": "start",
            "source": [STOPPED, PAUSED, COMPLETED],
            "dest": RUNNING,
            "unless": ["_is_destroyed"],
            "before": ["_cancel_task"],
            "after": ["_spawn_task", "_fire_status_changed"],
        },
        {
            "trigger": "pause",
            "source": RUNNING,
            "dest": PAUSED,
            "before": ["_cancel_task"],
            "after": ["_fire_status_changed"],
        },
        {
            "trigger": "resume",
            "source": PAUSED,
            "dest": RUNNING,
            "unless": ["_is_destroyed"],
            "before": ["_cancel_task"],
            "after": ["_spawn_task", "_fire_status_changed"],
        },
        {
            "trigger": "stop",
            "source": [RUNNING, PAUSED, COMPLETED],
            "dest": STOPPED,
            "before": ["_cancel_task", "_reset_remaining_time"],
            "after": ["_fire_status_changed"],
        },
        # Fired by the tick loop once the countdown runs out
        {
            "trigger": "complete",
            "source": RUNNING,
            "dest": COMPLETED,
            "after": ["_finish"],
        },
    ]
    TEARDOWN_TRANSITIONS = [
        {
            "trigger": "destroy",
            "source": "*",
            "dest": STOPPED,
            "before": ["_cancel_task"],
            "after": ["_release"],
        },
    ]
    TRANSITIONS = CORE_TRANSITIONS + TEARDOWN_TRANSITIONS
    MODEL_ATTRIBUTE = "status"

    status = None

    # pylint: disable=too-many-arguments
    def __init__(self, config, task_scheduler, log_prefix,
                 registry=None, status=None, remaining_time=None):
        """
        Args:
            config (TimerConfig): name, duration, tick interval and auto destroy policy.
            task_scheduler (TaskScheduler): spawns the tick loop and provides its sleep.
            log_prefix (String): the prefix used when outputting logs
            registry (TimerRegistry): registry to leave on destroy. None if unregistered.
            status (str): status to start in. Default TimerStatus.STOPPED
            remaining_time (number): time left on the countdown. Default config.duration
        """
        self.config = config
        self.task_scheduler = task_scheduler
        self.registry = registry
        self.logger = get_logger(log_prefix)

        self.remaining_time = config.duration
        if remaining_time is not None:
            self.remaining_time = remaining_time

        self.task = None  # TaskHandle
        self.destroyed = False

        self.on_tick = Signal(TimerEvent.TICK, log_prefix)
        self.on_status_changed = Signal(TimerEvent.STATUS_CHANGED, log_prefix)
        self.on_completed = Signal(TimerEvent.COMPLETED, log_prefix)

        self.machine = Machine(
            model=self,
            states=Timer.STATES,
            transitions=Timer.TRANSITIONS,
            queued=True,
            auto_transitions=False,
            ignore_invalid_triggers=True,
            model_attribute=Timer.MODEL_ATTRIBUTE,
            initial=status or Timer.INITIAL_STATE,
        )

    @property
    def name(self):
        """Registry key of the timer"""
        return self.config.name

    @property
    def duration(self):  # pylint: disable=missing-docstring
        return self.config.duration

    @property
    def tick_interval(self):  # pylint: disable=missing-docstring
        return self.config.tick_interval

    @property
    def auto_destroy(self):  # pylint: disable=missing-docstring
        return self.config.auto_destroy

    def __repr__(self):
        return "%s(\"%s\", status=%s, remaining_time=%s)" % (
            self.__class__.__name__, self.name, self.status, self.remaining_time)

    #
    # State Transition Helpers
    #
    def _is_destroyed(self):  # pylint: disable=missing-docstring
        return self.destroyed

    def _cancel_task(self):
        """Cancel the tick loop before the status moves on"""
        task, self.task = self.task, None
        if task is not None:
            task.cancel()

    def _spawn_task(self):
        self.task = self.task_scheduler.spawn(self._run)

    def _reset_remaining_time(self):
        self.remaining_time = self.duration

    def _fire_status_changed(self):
        self.on_status_changed.fire()

    def _finish(self):
        """Publish completion and apply the auto destroy policy"""
        self.logger.info("Timer %s completed", self.name)
        self.on_completed.fire()
        self.on_status_changed.fire()
        self.on_tick.fire(self.remaining_time)

        if self.auto_destroy:
            self.destroy()  # pylint: disable=no-member # pytype: disable=attribute-error

    def _release(self):
        """Release notification channels and leave the registry"""
        if self.destroyed:
            return
        self.destroyed = True

        self.on_tick.destroy()
        self.on_status_changed.destroy()
        self.on_completed.destroy()

        if self.registry is not None:
            self.registry.unregister(self.name, self)
        self.logger.info('Timer "%s" has been destroyed.', self.name)

    #
    # State Functionality
    #
    @log_method
    def stopped_state(self):  # pylint: disable=missing-docstring
        pass

    @log_method
    def running_state(self):  # pylint: disable=missing-docstring
        pass

    @log_method
    def paused_state(self):  # pylint: disable=missing-docstring
        pass

    @log_method
    def completed_state(self):  # pylint: disable=missing-docstring
        pass

    #
    # Tick Loop
    #
    def _run(self):
        """Count down while running. Spawned by start and resume."""
        task = self.task
        while self.remaining_time > 0 and self._is_looping(task):
            self.task_scheduler.sleep(self.tick_interval)

            # decremented before publishing so a stop() from a handler keeps its reset
            remaining_time = self.remaining_time
            self.remaining_time -= self.tick_interval
            self.on_tick.fire(remaining_time)

            if not self._is_looping(task):
                self.logger.debug("Timer %s left the tick loop in status %s",
                                  self.name, self.status)
                return

        if self.remaining_time <= 0 and self._is_looping(task):
            self.complete()  # pylint: disable=no-member # pytype: disable=attribute-error

    def _is_looping(self, task):
        """A loop keeps going only while running and not replaced by a newer one"""
        return self.status == self.RUNNING and self.task is task
