"""Injectable source of randomness, identifiers and wall-clock time.

Everything non-deterministic in the triage core (acknowledgment phrase
selection, conversation ids, report numbers, timestamps) goes through a
``RandomSource`` so tests can pin it with a seeded ``random.Random`` and a
fixed clock.
"""

from __future__ import annotations

import random
import string
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import TypeVar

T = TypeVar("T")

_BASE36_ALPHABET = string.digits + string.ascii_lowercase


def _utc_now() -> datetime:
    return datetime.now(UTC)


class RandomSource:
    """Randomness and identity provider.

    Parameters:
        rng: Random generator to draw from. Defaults to a fresh,
            OS-seeded ``random.Random``.
        clock: Zero-argument callable returning the current time.
            Defaults to ``datetime.now(UTC)``.
    """

    __slots__ = ("_clock", "_rng")

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else _utc_now

    def now(self) -> datetime:
        return self._clock()

    def choice(self, options: Sequence[T]) -> T:
        return self._rng.choice(options)

    def conversation_id(self) -> str:
        """``coach-<epoch ms>-<9 base36 chars>``."""
        suffix = "".join(self._rng.choice(_BASE36_ALPHABET) for _ in range(9))
        return f"coach-{self._epoch_millis()}-{suffix}"

    def report_number(self) -> str:
        """``FIR-<epoch ms>-<0..999>``. Best-effort unique, not a semantic key."""
        return f"FIR-{self._epoch_millis()}-{self._rng.randrange(1000)}"

    def _epoch_millis(self) -> int:
        return int(self.now().timestamp() * 1000)
