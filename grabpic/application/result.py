from __future__ import annotations

import random
from typing import Iterable, Iterator, List, Tuple


class GrabPictureResult:
    """Read-only view over the photo URLs of one search, in API order.

    The URLs are frozen into a tuple at construction; ``all()`` hands out a
    fresh list every time so callers cannot reach the internal state.
    """

    __slots__ = ("_urls",)

    def __init__(self, urls: Iterable[str]) -> None:
        self._urls: Tuple[str, ...] = tuple(urls)

    def get(self, index: int, default: str = "") -> str:
        """URL at 0-based ``index``, or ``default`` when out of range.

        Negative indexes are out of range.
        """
        if 0 <= index < len(self._urls):
            return self._urls[index]
        return default

    def one(self) -> str:
        return self.get(0)

    def two(self) -> str:
        return self.get(1)

    def three(self) -> str:
        return self.get(2)

    def four(self) -> str:
        return self.get(3)

    def five(self) -> str:
        return self.get(4)

    def all(self) -> List[str]:
        return list(self._urls)

    def random(self) -> str:
        """Uniformly pick one URL; empty string if there are none."""
        if not self._urls:
            return ""
        return random.choice(self._urls)

    def __len__(self) -> int:
        return len(self._urls)

    def __iter__(self) -> Iterator[str]:
        return iter(self._urls)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GrabPictureResult):
            return NotImplemented
        return self._urls == other._urls

    def __hash__(self) -> int:
        return hash(self._urls)

    def __repr__(self) -> str:
        return f"GrabPictureResult({list(self._urls)!r})"
