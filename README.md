# philosophers

A simulation of the dining philosophers problem. Philosophers sit around a
round table with one fork between each pair of neighbours. Each philosopher
runs in its own thread. It takes two forks, eats, sleeps and thinks, and then
starts again. A monitor thread checks for a philosopher who has starved. If
a meal count is given, the monitor also stops the simulation once every
philosopher has eaten that many meals.

## Installation

```
pip install .
```

## Usage

```
philosophers number_of_philosophers time_to_die time_to_eat time_to_sleep [meals_required]
```

Give all times in milliseconds. Every argument must be a positive integer.
Leading whitespace and one sign are accepted, and anything after the digits
is ignored. Each line of output has the form
`<timestamp_ms> <philosopher> <action>`. The timestamp counts from the
moment the table was set up. Philosophers are numbered from 1:

```
0 1 has taken a fork 🍴
0 1 has taken a fork 🍴
0 1 is eating 🍝
200 1 is sleeping 💤
400 1 is thinking 🤔
...
```

The simulation ends in one of two ways:

- a philosopher who is not eating goes `time_to_die` milliseconds or more
  since the start of their last meal (or since the start of the simulation).
  The monitor prints `<timestamp> <philosopher> died 💀` and stops everyone.
- `meals_required` is given and every philosopher has eaten that many meals.

A lone philosopher has only one fork. That philosopher takes it, waits, and
dies.

If the arguments are wrong, the program prints `Invalid Input` to standard
error and exits with status 1. Otherwise it exits with status 0.

## Library use

```python
import sys
from philosophers.config import parse_args
from philosophers.simulation import run

config = parse_args(["4", "410", "200", "200", "3"])
table = run(config, sys.stdout)
print([p.meals_eaten for p in table.philosophers], table.stopped)
```

- `philosophers.config`: `parse_args(args)` builds a `Config` from the
  arguments that follow the program name and raises `InputError` if they are
  invalid. `parse_int(text)` holds the lenient integer reading.
- `philosophers.clock`: `now_ms()` and `sleep_ms(ms)` work in whole
  milliseconds.
- `philosophers.table`: `Fork`, `Philosopher` and `Table` hold the shared
  state, the fork-taking logic and the `Table.monitor` loop.
- `philosophers.simulation`: `eat`, `rest`, `think` and
  `philosopher_routine` make up each philosopher's loop. `run(config, out)`
  runs a whole simulation and returns the finished `Table`. `main(argv)` is
  the command-line entry point and returns the exit status.

## Tests

```
pip install .[test]
pytest
```