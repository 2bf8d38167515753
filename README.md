# philosim

Sets the table for the dining philosophers. It checks the command-line
arguments, seats one philosopher per place with the two forks within reach,
and starts one thread for each philosopher. The package also holds small
helpers for text splitting and searching, C-style number parsing, a minimal
`printf`, and a chunked line reader.

## Command line

```
philosim NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [NUMBER_OF_MEALS]
```

- `NUMBER_OF_PHILOSOPHERS` must be between 1 and 200.
- `TIME_TO_DIE`, `TIME_TO_EAT` and `TIME_TO_SLEEP` must each be at least 60
  and at most 2147483647.
- `NUMBER_OF_MEALS` is optional. If you give it, it must not be zero.

Every argument must consist of digits only, at most 10 of them. When the
arguments are rejected, the program prints the error message on standard
error and exits with status 255.

```
philosim 5 800 200 200
philosim 4 410 200 200 7
```

On success it prints `N is running`, followed by one `Thread I is running`
line from each philosopher's thread. It exits with status 0 when every
thread has been joined.

## What it does not do

The simulation goes no further than starting and joining the threads. The
philosophers do not pick up forks, eat, sleep or die. The times and the meal
count are validated and stored on each `Philosopher`, but nothing uses them
after that. Each seat has a `threading.Lock` as its fork, and no thread ever
takes one.

## Library

```python
from philosim.config import parse_settings, InputError
from philosim.simulation import Table, build_philosophers

settings = parse_settings(["3", "800", "200", "200"])
for philosopher in build_philosophers(settings):
    print(philosopher.id, philosopher.left_fork, philosopher.right_fork)

Table(settings).run()
```

### `philosim.config`

- `parse_settings(argv)` takes the arguments without the program name. It
  validates them and returns a frozen `Settings`. In that object
  `number_of_meals` is `None` when no meal count was given.
- `validate(argv)` runs all the checks. `check_args(argv)` checks only the
  argument count and the form of each argument.
- Both raise `InputError`, a `ValueError`. Its `kind` is an `ErrorKind`
  member whose value is the message, and its `exit_status` is 255.

### `philosim.simulation`

- `build_philosophers(settings)` returns a list of frozen `Philosopher`
  records. Each one has an `id`, the times, `number_of_meals`, a
  `left_fork` equal to its seat, and a `right_fork` equal to the next seat
  round the table.
- `Table(settings, out=None)` holds the forks, a print lock and the
  philosophers. It writes to `out`, or to standard output when `out` is
  `None`. `Table.run()` starts one thread per philosopher, joins them all,
  and returns the philosophers.
- `main(argv=None)` is what the `philosim` command runs. It returns the exit
  status.

### `philosim.textutils`

`split`, `split_any`, `trim`, `prefix_before`, `prefix_before_any`,
`find_any`, `rfind_any`, `find_substring`, `substring`. The search functions
return an index, or `None` when nothing matches.

### `philosim.numbers`

`atoi` and `atoi_long` parse a leading decimal number, wrapping to 32 or 64
bits. `hex_digit` and `hex_to_int` treat characters that are not hex digits
as 0. `power` raises to a non-negative exponent, wrapped to 32 bits.

### `philosim.printf`

`render(fmt, *args)` returns the output as a list of `Chunk(fd, text)`
pieces, where `fd` is 1 for standard output and 2 for standard error.
`printf(fmt, *args)` writes those pieces and returns the number of
characters written. The supported conversions are
`%c %s %d %i %u %p %x %X %%`. `%2` sends everything after it to standard
error. An unknown conversion or a trailing `%` produces nothing. The module
also provides `to_hex(value, upper=False)` and `format_pointer(value)`, which
gives `(nil)` for 0.

### `philosim.linereader`

`LineReader(stream, buffer_size=8)` reads from a text or binary stream in
chunks of `buffer_size`. `read_line()` returns the next line with its
newline, or `None` at the end of the stream. Iterating over the reader
yields every remaining line.

## Tests

```
pip install -e .[test]
pytest
```