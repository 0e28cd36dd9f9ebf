"""Random source used by the draw engine.

The engine draws every random number through an object matching:

    def random(self) -> float: ...   # uniform in [0, 1)

The `random` module itself, `random.Random` and `random.SystemRandom` all
satisfy the protocol, and the module is the default. Tests inject
ScriptedRandom to make draws exact.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


# ---------------------------------------------------------------------------
# Protocol: every random source must match this signature
# ---------------------------------------------------------------------------

class RandomSource(Protocol):
    def random(self) -> float: ...


def pick_index(rng: RandomSource, length: int) -> int:
    """Return a uniformly random index in [0, length)."""
    if length <= 0:
        raise ValueError("cannot pick from an empty sequence")
    return min(int(rng.random() * length), length - 1)


# ---------------------------------------------------------------------------
# ScriptedRandom: replays fixed values; useful for exact test scenarios
# ---------------------------------------------------------------------------

class ScriptedRandom:
    """Returns the given floats in order, cycling when they run out.

    ScriptedRandom([0.0]) always picks the first candidate, so a draw with
    it is fully determined by catalog order.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("ScriptedRandom needs at least one value")
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"scripted value {value!r} is outside [0, 1)")
        self._pos = 0

    def random(self) -> float:
        value = self._values[self._pos]
        self._pos = (self._pos + 1) % len(self._values)
        return value
