"""Philosopher routine and the command that runs a whole simulation."""

from __future__ import annotations

import sys
import threading
import time
from typing import Sequence, TextIO

from .config import Config, InputError, parse_args
from .table import Philosopher, Table

EAT_MESSAGE = "is eating 🍝"
THINK_MESSAGE = "is thinking 🤔"
SLEEP_MESSAGE = "is sleeping 💤"

_THINK_PAUSE_SECONDS = 0.001
_ODD_START_DELAY_SECONDS = 0.0005


def eat(table: Table, philosopher: Philosopher) -> bool:
    """Take both forks, eat for the configured time and put the forks back.

    Returns False if the simulation stopped before or during the meal.
    """
    if table.stopped:
        return False
    if not table.take_forks(philosopher):
        return False
    first, second = philosopher.fork_order()
    try:
        philosopher.start_meal()
        table.announce(philosopher, EAT_MESSAGE)
        finished = table.sleep(table.config.time_to_eat)
        philosopher.finish_meal()
    finally:
        first.lock.release()
        second.lock.release()
    return finished


def think(table: Table, philosopher: Philosopher) -> bool:
    """Announce thinking and pause briefly; False if the simulation stopped."""
    if table.stopped:
        return False
    table.announce(philosopher, THINK_MESSAGE)
    time.sleep(_THINK_PAUSE_SECONDS)
    return True


def rest(table: Table, philosopher: Philosopher) -> bool:
    """Announce sleeping and sleep; False if the simulation stopped."""
    if table.stopped:
        return False
    table.announce(philosopher, SLEEP_MESSAGE)
    return table.sleep(table.config.time_to_sleep)


def philosopher_routine(table: Table, philosopher: Philosopher) -> None:
    """Eat, sleep and think until stopped or enough meals have been eaten."""
    table.wait_ready()
    if philosopher.id % 2:
        time.sleep(_ODD_START_DELAY_SECONDS)
    while not table.stopped and not philosopher.done_eating():
        if not eat(table, philosopher):
            break
        if not rest(table, philosopher):
            break
        if not think(table, philosopher):
            break


def run(config: Config, out: TextIO | None = None) -> Table:
    """Run a complete simulation, writing state lines to ``out``.

    Returns the table once every thread has finished.
    """
    table = Table(config, out)
    workers = [
        threading.Thread(
            target=philosopher_routine,
            args=(table, philosopher),
            name=f"philosopher-{philosopher.id}",
        )
        for philosopher in table.philosophers
    ]
    started: list[threading.Thread] = []
    try:
        for worker in workers:
            worker.start()
            started.append(worker)
        table.mark_ready()
        watcher = threading.Thread(target=table.monitor, name="monitor")
        watcher.start()
        started.append(watcher)
    except RuntimeError:
        table.stop()
        table.mark_ready()
        for thread in started:
            thread.join()
        raise
    for thread in started:
        thread.join()
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_args(args)
    except InputError as error:
        print(error, file=sys.stderr)
        return 1
    try:
        run(config)
    except RuntimeError:
        return 1
    return 0