"""Suspect directory: chained hash table from clue text to suspect name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from ..models.case import SuspectFact

DEFAULT_BUCKET_COUNT = 101

_HASH_MASK = 0xFFFFFFFFFFFFFFFF


def djb2(text: str) -> int:
    """djb2 string hash over the UTF-8 bytes, wrapping at 64 bits."""
    value = 5381
    for byte in text.encode("utf-8"):
        value = (value * 33 + byte) & _HASH_MASK
    return value


@dataclass
class _Entry:
    clue: str
    suspect: str


class SuspectDirectory:
    """嫌疑人目录 - 线索文本 -> 嫌疑人姓名"""

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT):
        if bucket_count < 1:
            raise ValueError("bucket_count must be positive")
        self.bucket_count = bucket_count
        self._buckets: List[List[_Entry]] = [[] for _ in range(bucket_count)]
        self._size = 0

    def bucket_of(self, clue: str) -> int:
        return djb2(clue) % self.bucket_count

    def set(self, clue: Optional[str], suspect: Optional[str]) -> None:
        """Bind ``clue`` to ``suspect``; a clue set twice keeps the last suspect."""
        if clue is None or suspect is None:
            return

        bucket = self._buckets[self.bucket_of(clue)]
        for entry in bucket:
            if entry.clue == clue:
                entry.suspect = suspect
                return

        # 新条目放在链表头部
        bucket.insert(0, _Entry(clue, suspect))
        self._size += 1

    def get(self, clue: Optional[str]) -> Optional[str]:
        """Exact, case-sensitive lookup. None means no suspect is bound."""
        if clue is None:
            return None
        for entry in self._buckets[self.bucket_of(clue)]:
            if entry.clue == clue:
                return entry.suspect
        return None

    def load(self, facts: Iterable[SuspectFact]) -> None:
        for fact in facts:
            self.set(fact.clue, fact.suspect)

    def items(self) -> Iterator[Tuple[str, str]]:
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.clue, entry.suspect

    def suspects(self) -> List[str]:
        return sorted({suspect for _, suspect in self.items() if suspect})

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.get(clue) is not None

    def __len__(self) -> int:
        return self._size
