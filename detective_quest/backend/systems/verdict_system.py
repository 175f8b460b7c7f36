"""Verdict system: cross-references collected clues with the suspect directory."""

from __future__ import annotations

from typing import Dict, List

from ..models.outcome import AccusationResult, Verdict
from .clue_index import ClueIndex
from .suspect_directory import SuspectDirectory

DEFAULT_THRESHOLD = 2


class VerdictSystem:
    """审判系统 - 统计有多少条已收集线索指向被指控者"""

    def __init__(self, threshold: int = DEFAULT_THRESHOLD):
        self.threshold = threshold

    def tally(self, clue_index: ClueIndex, directory: SuspectDirectory, accused: str) -> int:
        return len(self.supporting_clues(clue_index, directory, accused))

    def supporting_clues(
        self,
        clue_index: ClueIndex,
        directory: SuspectDirectory,
        accused: str,
    ) -> List[str]:
        """Collected clues whose suspect is exactly ``accused``, in clue order."""
        return [
            clue for clue in clue_index.in_order()
            if directory.get(clue) == accused
        ]

    def tally_all(self, clue_index: ClueIndex, directory: SuspectDirectory) -> Dict[str, int]:
        """Count collected clues per suspect; clues without a suspect are skipped."""
        counts: Dict[str, int] = {}
        for clue in clue_index.in_order():
            suspect = directory.get(clue)
            if suspect is not None:
                counts[suspect] = counts.get(suspect, 0) + 1
        return counts

    def judge(
        self,
        clue_index: ClueIndex,
        directory: SuspectDirectory,
        accused: str,
    ) -> AccusationResult:
        """
        对被指控者作出判决

        No clues at all is insufficient regardless of the name. A blank name
        is rejected without tallying.
        """
        if clue_index.is_empty:
            return AccusationResult(
                accused=(accused or "").strip(),
                count=0,
                verdict=Verdict.INSUFFICIENT,
                threshold=self.threshold,
                message="You collected no clues. There is no evidence to accuse anyone.",
            )

        name = (accused or "").strip()
        if not name:
            return AccusationResult(
                accused="",
                count=0,
                verdict=Verdict.REJECTED,
                threshold=self.threshold,
                message="Invalid name. Accusation rejected.",
            )

        clues = self.supporting_clues(clue_index, directory, name)
        count = len(clues)
        if count >= self.threshold:
            return AccusationResult(
                accused=name,
                count=count,
                verdict=Verdict.SUFFICIENT,
                threshold=self.threshold,
                supporting_clues=clues,
                message=f"Sufficient evidence ({count} clues). {name} is the culprit!",
            )

        return AccusationResult(
            accused=name,
            count=count,
            verdict=Verdict.INSUFFICIENT,
            threshold=self.threshold,
            supporting_clues=clues,
            message=(
                f"Insufficient evidence. Only {count} clue(s) point to {name}. "
                "The culprit was not proven."
            ),
        )
