"""Shared state of the dining table: forks, philosophers and the monitor."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from .clock import now_ms
from .config import Config

_POLL_SECONDS = 0.0001
_MONITOR_PERIOD = 0.001

FORK_MESSAGE = "has taken a fork 🍴"
DIED_MESSAGE = "died 💀"


@dataclass(eq=False)
class Fork:
    """A fork on the table, guarded by its own lock."""

    id: int
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


@dataclass(eq=False)
class Philosopher:
    """One diner; its meal bookkeeping is guarded by its own lock."""

    id: int
    left: Fork
    right: Fork
    last_meal: int
    meals_required: int | None = None
    meals_eaten: int = 0
    is_eating: bool = False
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def fork_order(self) -> tuple[Fork, Fork]:
        """Return the forks in the order this philosopher picks them up."""
        if self.id % 2 == 0:
            return self.right, self.left
        return self.left, self.right

    def done_eating(self) -> bool:
        """Tell whether the required number of meals has been eaten."""
        if self.meals_required is None:
            return False
        with self.lock:
            return self.meals_eaten >= self.meals_required

    def start_meal(self) -> None:
        """Mark the philosopher as eating and record when the meal began."""
        with self.lock:
            self.is_eating = True
            self.last_meal = now_ms()

    def finish_meal(self) -> None:
        """Mark the meal as finished and count it."""
        with self.lock:
            self.is_eating = False
            self.meals_eaten += 1


class Table:
    """Forks, philosophers and the shared stop and start flags."""

    def __init__(self, config: Config, out: TextIO | None = None) -> None:
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.start_time = now_ms()
        self.forks = [Fork(index) for index in range(config.n_philo)]
        self.philosophers = [
            Philosopher(
                id=index + 1,
                right=self.forks[index],
                left=self.forks[(index + 1) % config.n_philo],
                last_meal=self.start_time,
                meals_required=config.meals_required,
            )
            for index in range(config.n_philo)
        ]
        self._state = threading.Lock()
        self._print = threading.Lock()
        self._stopped = False
        self._ready = False

    @property
    def stopped(self) -> bool:
        """Whether the simulation has been stopped."""
        with self._state:
            return self._stopped

    @property
    def ready(self) -> bool:
        """Whether all threads have been released to start."""
        with self._state:
            return self._ready

    def stop(self) -> None:
        """Stop the simulation."""
        with self._state:
            self._stopped = True

    def _timestamp(self, at: int | None = None) -> int:
        return (now_ms() if at is None else at) - self.start_time

    def announce(self, philosopher: Philosopher, message: str) -> bool:
        """Print a state line for a philosopher unless the simulation stopped.

        Returns whether the line was printed.
        """
        if self.stopped:
            return False
        timestamp = self._timestamp()
        with self._print:
            print(f"{timestamp} {philosopher.id} {message}", file=self.out, flush=True)
        return True

    def sleep(self, ms: int) -> bool:
        """Sleep ``ms`` milliseconds; return False if stopped meanwhile."""
        start = now_ms()
        while now_ms() - start < ms:
            if self.stopped:
                return False
            time.sleep(_POLL_SECONDS)
        return True

    def mark_ready(self) -> None:
        """Release every thread waiting in wait_ready."""
        with self._state:
            self._ready = True

    def wait_ready(self) -> None:
        """Block until mark_ready has been called."""
        while not self.ready:
            time.sleep(_POLL_SECONDS)

    def take_forks(self, philosopher: Philosopher) -> bool:
        """Pick up both forks of a philosopher.

        On success both fork locks are held and the caller must release
        them. On failure no fork is held.
        """
        first, second = philosopher.fork_order()
        first.lock.acquire()
        if self.stopped:
            first.lock.release()
            return False
        self.announce(philosopher, FORK_MESSAGE)
        if self.config.n_philo == 1:
            first.lock.release()
            self.sleep(self.config.time_to_die)
            return False
        second.lock.acquire()
        if self.stopped:
            first.lock.release()
            second.lock.release()
            return False
        self.announce(philosopher, FORK_MESSAGE)
        return True

    def check_death(self, philosopher: Philosopher) -> bool:
        """Stop the simulation and report it if the philosopher has starved."""
        with philosopher.lock:
            moment = now_ms()
            dead = (
                not philosopher.is_eating
                and moment - philosopher.last_meal >= self.config.time_to_die
            )
        if not dead:
            return False
        self.stop()
        with self._print:
            print(
                f"{self._timestamp(moment)} {philosopher.id} {DIED_MESSAGE}",
                file=self.out,
                flush=True,
            )
        return True

    def check_all_death(self) -> bool:
        """Check every philosopher in turn; stop at the first death."""
        return any(self.check_death(philosopher) for philosopher in self.philosophers)

    def all_done_eating(self) -> bool:
        """Tell whether every philosopher has eaten the required meals."""
        return all(philosopher.done_eating() for philosopher in self.philosophers)

    def monitor(self) -> None:
        """Watch the table until someone dies or everyone has eaten enough."""
        self.wait_ready()
        while True:
            if self.config.meals_required is not None and self.all_done_eating():
                with self._print:
                    self.stop()
                return
            if self.check_all_death():
                return
            time.sleep(_MONITOR_PERIOD)