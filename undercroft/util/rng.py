"""Seeded random streams for dungeon generation.

A generation run builds one ``RNGProvider`` from its seed and hands the
``"map.dungeon"`` stream to every stage. Room placement, water sampling and
pond growth all draw from that one stream in pipeline order, so the same seed
and settings reproduce the same layout. Callers outside the pipeline (the
benchmark, tests) ask for a domain of their own and never shift the dungeon
draws.

    provider = RNGProvider("burrito1")
    stream = provider.get("map.dungeon")
    width = stream.randint(3, 8)
"""

from __future__ import annotations

import zlib
from random import Random
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from undercroft.types import RandomSeed


def derive_seed(master_seed: RandomSeed, domain: str) -> int | None:
    """Per-domain seed for ``master_seed``, or None (system entropy) if unseeded.

    Uses crc32 since ``hash()`` of a str is salted per interpreter process.
    """
    if master_seed is None:
        return None
    return zlib.crc32(f"{master_seed}:{domain}".encode())


class RNGStream:
    """The draws the generation stages make, backed by one seeded ``Random``."""

    __slots__ = ("_random", "domain")

    def __init__(self, domain: str, seed: int | None) -> None:
        self.domain = domain
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Integer in ``[a, b]``, both ends inclusive."""
        return self._random.randint(a, b)

    def randrange(self, stop: int) -> int:
        """Index in ``[0, stop)``, for picking from a list."""
        return self._random.randrange(stop)

    def getrandbits(self, k: int) -> int:
        return self._random.getrandbits(k)

    def __repr__(self) -> str:
        return f"RNGStream({self.domain!r})"


# Generators accept a plain Random too, which is handy in tests.
RNG: TypeAlias = Random | RNGStream


class RNGProvider:
    """Hands out one stream per domain, all derived from ``master_seed``.

    Asking twice for the same domain returns the same stream object, so two
    stages sharing a domain also share its position in the sequence.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self.master_seed = master_seed
        self._streams: dict[str, RNGStream] = {}

    def get(self, domain: str) -> RNGStream:
        stream = self._streams.get(domain)
        if stream is None:
            stream = RNGStream(domain, derive_seed(self.master_seed, domain))
            self._streams[domain] = stream
        return stream
