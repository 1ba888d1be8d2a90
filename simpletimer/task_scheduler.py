"""Cooperative units of work on top of eventlet green threads"""
import eventlet
from greenlet import GreenletExit, getcurrent


class TaskHandle:
    """Represents a unit of work spawned by TaskScheduler, similar api to asyncio.Task"""

    is_cancelled = False
    greenthread = None
    func = None

    def __init__(self, greenthread, func):
        self.greenthread = greenthread
        self.func = func

    def cancel(self):
        """Cancel the unit of work.

        The green thread is killed before this returns, so it cannot run any further.
        Killing switches through the eventlet hub, so other green threads that are
        already due may run before this returns.
        A unit of work cancelling itself is only marked cancelled, it has to return
        on its own.
        """
        if self.is_cancelled:
            return
        self.is_cancelled = True
        if self.greenthread is getcurrent():
            return
        self.greenthread.kill()

    def cancelled(self):
        """
        Returns:
            True if the unit of work was cancelled
        """
        return self.is_cancelled

    def done(self):
        """
        Returns:
            True if the unit of work has finished, was cancelled or raised
        """
        return self.greenthread.dead

    def wait(self):
        """Block until the unit of work finishes and return its result.
        A cancelled unit of work returns None."""
        try:
            return self.greenthread.wait()
        except GreenletExit:
            return None


class TaskScheduler:
    """spawns cancellable units of work and provides the 'wait N time units' primitive"""

    def __init__(self, logger, sleep=None, time_unit=1.0):
        """
        Args:
            logger (Logger): where to log job activity.
            sleep (callable): takes seconds and suspends the caller. Default eventlet.sleep
            time_unit (float): number of seconds in one time unit.
        """
        self.logger = logger
        self.time_unit = time_unit
        # unbounded, spawning never blocks however many timers are ticking
        self.greenthreads = set()

        self._sleep = eventlet.sleep
        if sleep:
            self._sleep = sleep

    def spawn(self, func, *args):
        """Run func(*args) as a new unit of work.

        Args:
            func: function to execute
            *args: arguments for func

        Returns:
            TaskHandle - can be used for cancelling the job
        """
        self.logger.debug("spawning job %s, args: %s", func.__name__, args)
        greenthread = eventlet.spawn(self._run_job, func, args)
        self.greenthreads.add(greenthread)
        greenthread.link(self._job_done)
        return TaskHandle(greenthread, func)

    def sleep(self, units):
        """Suspend the calling unit of work for units time units"""
        self._sleep(units * self.time_unit)

    def waitall(self):
        """Block until every spawned unit of work, including ones spawned meanwhile,
        has finished"""
        while self.greenthreads:
            greenthread = next(iter(self.greenthreads))
            try:
                greenthread.wait()
            except GreenletExit:
                pass
            self.greenthreads.discard(greenthread)

    def _job_done(self, greenthread):
        self.greenthreads.discard(greenthread)

    def _run_job(self, func, args):
        try:
            return func(*args)
        except Exception as e:  # pylint: disable=broad-except
            self.logger.exception(e)
        return None
