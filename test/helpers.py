"""Mock sleep for stepping tick loops
"""
import eventlet
from eventlet.queue import Queue


class FakeSleep:
    """Behaves like eventlet.sleep, but each call blocks until advance() releases it"""
    MAX_YIELDS = 10

    def __init__(self):
        self.calls = []
        self.waiting = 0
        self.releases = Queue()

    def __call__(self, seconds):
        """Clones eventlet.sleep()"""
        self.calls.append(seconds)
        self.waiting += 1
        try:
            self.releases.get()
        finally:
            self.waiting -= 1

    def advance(self, ticks=1):
        """Let up to ticks sleeps return, running the sleepers until they block again"""
        for _ in range(ticks):
            # let freshly spawned green threads reach their sleep
            for _attempt in range(self.MAX_YIELDS):
                if self.waiting:
                    break
                eventlet.sleep(0)
            if not self.waiting:
                return
            self.releases.put(None)
            while self.releases.qsize():
                eventlet.sleep(0)
        eventlet.sleep(0)


class Recorder:
    """Collects notifications from a timer in the order they are fired"""
    def __init__(self, timer=None):
        self.events = []
        if timer is not None:
            self.watch(timer)

    def watch(self, timer):
        """Subscribe to all of timer's notifications"""
        timer.on_tick.connect(lambda remaining_time: self.events.append(("tick", remaining_time)))
        timer.on_status_changed.connect(lambda: self.events.append(("status", timer.status)))
        timer.on_completed.connect(lambda: self.events.append(("completed",)))

    def ticks(self):
        """remaining_time of every tick"""
        return [event[1] for event in self.events if event[0] == "tick"]

    def statuses(self):
        """status of every status change"""
        return [event[1] for event in self.events if event[0] == "status"]

    def completions(self):  # pylint: disable=missing-docstring
        return len([event for event in self.events if event[0] == "completed"])
