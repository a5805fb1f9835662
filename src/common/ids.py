"""Record identifier generation."""

import itertools
import random
from datetime import datetime, timezone

BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


class RecordIdGenerator:
    """Generate record IDs of the form ``<epoch_ms>-<sequence>-<suffix>``.

    The sequence is shared by every ID drawn from one generator, so two IDs
    from the same generator never collide even within the same millisecond.
    The random suffix keeps IDs from separate processes apart.
    """

    def __init__(self, rng: random.Random | None = None, suffix_length: int = 8):
        self._rng = rng or random.SystemRandom()
        self._sequence = itertools.count()
        self._suffix_length = suffix_length

    def __call__(self, now: datetime) -> str:
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        millis = int(now.timestamp() * 1000)
        sequence = next(self._sequence)
        suffix = "".join(self._rng.choice(BASE36_ALPHABET) for _ in range(self._suffix_length))
        return f"{millis}-{sequence:x}-{suffix}"
