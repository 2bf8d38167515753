"""Set up a table of philosophers and run one thread per philosopher."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from philosim.config import InputError, Settings, parse_settings
from philosim.printf import printf

__all__ = ["Philosopher", "Table", "build_philosophers", "main"]

_FAILURE_STATUS = 255


@dataclass(frozen=True)
class Philosopher:
    """One seat at the table and the two forks within its reach."""

    id: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    number_of_meals: Optional[int]
    left_fork: int
    right_fork: int


def build_philosophers(settings: Settings) -> list[Philosopher]:
    """Seat ``settings.number_of_philosophers`` philosophers round the table."""
    count = settings.number_of_philosophers
    return [
        Philosopher(
            id=seat,
            time_to_die=settings.time_to_die,
            time_to_eat=settings.time_to_eat,
            time_to_sleep=settings.time_to_sleep,
            number_of_meals=settings.number_of_meals,
            left_fork=seat,
            right_fork=(seat + 1) % count,
        )
        for seat in range(count)
    ]


class Table:
    """Forks, a print lock and the philosophers who share them."""

    def __init__(self, settings: Settings, out: Optional[TextIO] = None):
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.forks = [threading.Lock() for _ in range(settings.number_of_philosophers)]
        self.print_lock = threading.Lock()
        self.philosophers = build_philosophers(settings)

    def _say(self, text: str) -> None:
        with self.print_lock:
            self.out.write(text)
            self.out.flush()

    def _live(self, philosopher: Philosopher) -> None:
        self._say(f"Thread {philosopher.id} is running\n")

    def run(self) -> list[Philosopher]:
        """Start every philosopher's thread, wait for all, and return them."""
        self._say(f"{self.settings.number_of_philosophers} is running\n")
        threads = [
            threading.Thread(target=self._live, args=(philosopher,))
            for philosopher in self.philosophers
        ]
        started = []
        try:
            for thread in threads:
                thread.start()
                started.append(thread)
        finally:
            for thread in started:
                thread.join()
        return self.philosophers


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation from command-line arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
    except InputError as error:
        printf("%2%s\n", str(error))
        return error.exit_status
    try:
        Table(settings).run()
    except RuntimeError:
        printf("%2Failed to allocate memory for philosophers")
        return _FAILURE_STATUS
    return 0


if __name__ == "__main__":
    sys.exit(main())