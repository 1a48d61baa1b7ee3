"""Timing utilities used to profile the conversion of each output branch."""

import time
from dataclasses import dataclass

__all__ = ["Time", "Stopwatch", "StopwatchManager"]


@dataclass
class Time:
    """Simple dataclass to hold time information.

    Attributes
    ----------
    wall : float, optional
         Wall time
    cpu : float, optional
         CPU time
    """

    wall: float = None
    cpu: float = None

    def __add__(self, other):
        return Time(wall=self.wall + other.wall, cpu=self.cpu + other.cpu)

    def __sub__(self, other):
        return Time(wall=self.wall - other.wall, cpu=self.cpu - other.cpu)

    @classmethod
    def current(cls):
        """Simple function which returns the current time (wall and cpu).

        Returns
        -------
        Time
           Current time
        """
        return cls(time.time(), time.process_time())


class Stopwatch:
    """Simple class to hold timing information for a specific process."""

    def __init__(self):
        """Give default values to the underlying class attributes."""
        self._start = None
        self._time = None
        self._total = Time(0.0, 0.0)
        self._count = 0

    @property
    def running(self):
        """Whether the stopwatch is currently running."""
        return self._start is not None

    def start(self):
        """Starts the watch."""
        if self.running:
            raise ValueError("Cannot restart a watch that has not been stopped.")

        self._start = Time.current()

    def stop(self):
        """Stops the watch, records the elapsed time."""
        if not self.running:
            raise ValueError("Cannot stop a watch that has not been started.")

        self._time = Time.current() - self._start
        self._total += self._time
        self._count += 1
        self._start = None

    @property
    def time(self):
        """Time between the last start and the last stop."""
        if self._time is None:
            raise ValueError("Cannot get time of watch that has not been stopped.")

        return self._time

    @property
    def time_sum(self):
        """Sum of times between all watch starts and stops."""
        return self._total

    @property
    def count(self):
        """Number of completed start/stop cycles."""
        return self._count


class StopwatchManager:
    """Simple class to organize various time measurements."""

    def __init__(self):
        """Initalize the basic private stopwatch attributes."""
        self._watch = {}

    def keys(self):
        """List of all initialized stopwatch tags."""
        return self._watch.keys()

    def items(self):
        """List of (key, stopwatch) pairs."""
        return self._watch.items()

    def initialize(self, key):
        """Initialize one stopwatch. If it's already been initialized,
        reset the global counters to 0.

        Parameters
        ----------
        key : Union[str, List[str]]
            Key or list of keys to initialize a `Stopwatch` for
        """
        keys = [key] if isinstance(key, str) else key
        for k in keys:
            self._watch[k] = Stopwatch()

    def __getitem__(self, key):
        """Fetches one stopwatch.

        Parameters
        ----------
        key : str
            Name of the stopwatch

        Returns
        -------
        Stopwatch
            Stopwatch registered under that name
        """
        if key not in self._watch:
            raise KeyError(f"No stopwatch initialized under the name: {key}")

        return self._watch[key]

    def start(self, key):
        """Starts a stopwatch for a unique key."""
        self[key].start()

    def stop(self, key):
        """Stops a stopwatch for a unique key."""
        self[key].stop()

    def time(self, key):
        """Returns the time recorded between the last start/stop pair."""
        return self[key].time

    def time_sum(self, key):
        """Returns the sum of times recorded between each start/stop pairs."""
        return self[key].time_sum

    def times_sum(self):
        """Returns the total time of each of the stopwatches as a dictionary.

        Returns
        -------
        Dict[str, Time]
            Execution time of all iterations of each process so far
        """
        return {key: value.time_sum for key, value in self.items()}
