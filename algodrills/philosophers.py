"""Dining philosophers sharing forks guarded by non-blocking locks."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from typing import Callable, Iterable, Optional, Sequence, TextIO

NUM_PHILOSOPHERS = 5


class DiningTable:
    """A round table where each seat shares a fork with each neighbour.

    A philosopher eats when both forks can be taken at once, and otherwise
    thinks. Thinking costs energy, eating restores it, and a philosopher
    leaves once their energy reaches their appetite.
    """

    def __init__(
        self,
        seats: int = NUM_PHILOSOPHERS,
        appetites: Optional[Iterable[int]] = None,
        rng: Optional[random.Random] = None,
        pause: Callable[[float], None] = time.sleep,
        out: Optional[TextIO] = None,
    ) -> None:
        if seats < 2:
            raise ValueError(f"a table needs at least 2 seats, got {seats}")
        self.seats = seats
        self._rng = rng if rng is not None else random.Random()
        self._rng_lock = threading.Lock()
        if appetites is None:
            self.appetites = [max(5, self._rng.randrange(20)) for _ in range(seats)]
        else:
            self.appetites = list(appetites)
            if len(self.appetites) != seats:
                raise ValueError(
                    f"expected {seats} appetites, got {len(self.appetites)}"
                )
            if any(appetite < 0 for appetite in self.appetites):
                raise ValueError("appetites must not be negative")
        self.energy = [0] * seats
        self.energy_decrease = 1
        self.energy_increase = 1
        self._forks = [threading.Lock() for _ in range(seats)]
        self._pause = pause
        self._out = out
        self._out_lock = threading.Lock()

    def _say(self, seat: int, message: str) -> None:
        stream = sys.stdout if self._out is None else self._out
        with self._out_lock:
            print(f"[{seat}] {message}", file=stream, flush=True)

    def _nap(self) -> None:
        with self._rng_lock:
            millis = self._rng.randrange(1000)
        self._pause(millis / 1000)

    def _fork_pair(self, seat: int) -> tuple[threading.Lock, threading.Lock]:
        return self._forks[seat], self._forks[(seat + 1) % self.seats]

    def try_grab_forks(self, seat: int) -> bool:
        """Take both forks of ``seat`` without waiting; return whether it worked."""
        first, second = self._fork_pair(seat)
        got_first = first.acquire(blocking=False)
        got_second = second.acquire(blocking=False)
        if got_first and got_second:
            self._say(seat, "Grabbed forks")
            return True
        if got_first:
            first.release()
        elif got_second:
            second.release()
        return False

    def release_forks(self, seat: int) -> None:
        """Put down both forks held by ``seat``."""
        first, second = self._fork_pair(seat)
        first.release()
        second.release()
        self._say(seat, "Released forks")

    def think(self, seat: int) -> None:
        """Spend a while thinking, losing energy down to zero."""
        self._say(seat, "Thinking")
        self._nap()
        self.energy[seat] = max(0, self.energy[seat] - self.energy_decrease)

    def eat(self, seat: int) -> None:
        """Spend a while eating, gaining energy up to the seat's appetite."""
        self._say(seat, "Eating")
        self._nap()
        self.energy[seat] = min(
            self.appetites[seat], self.energy[seat] + self.energy_increase
        )

    def is_full(self, seat: int) -> bool:
        """Return whether ``seat`` has eaten its fill."""
        return self.energy[seat] >= self.appetites[seat]

    def is_starving(self, seat: int) -> bool:
        """Return whether ``seat`` has no energy left."""
        return self.energy[seat] == 0

    def dine(self, seat: int) -> None:
        """Alternate eating and thinking until ``seat`` is full."""
        while not self.is_full(seat):
            if self.try_grab_forks(seat):
                self.eat(seat)
                self.release_forks(seat)
            else:
                self.think(seat)
                if self.is_starving(seat):
                    self._say(seat, "I'm Starving")
        self._say(seat, "I'm Full")

    def run(self) -> None:
        """Seat every philosopher on a thread and wait until all are full."""
        threads = [
            threading.Thread(target=self.dine, args=(seat,), name=f"philosopher-{seat}")
            for seat in range(self.seats)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a dinner and print what every philosopher does."""
    parser = argparse.ArgumentParser(description="Simulate the dining philosophers.")
    parser.add_argument("--seats", type=int, default=NUM_PHILOSOPHERS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    DiningTable(seats=args.seats, rng=random.Random(args.seed)).run()
    return 0