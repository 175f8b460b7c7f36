"""Tests for tallying clues against an accusation."""

import pytest

from detective_quest.backend.models import Verdict
from detective_quest.backend.systems import ClueIndex, SuspectDirectory, VerdictSystem


@pytest.fixture
def directory():
    directory = SuspectDirectory()
    directory.set("A", "Carlos")
    directory.set("B", "Ana")
    directory.set("C", "Carlos")
    return directory


@pytest.fixture
def index():
    index = ClueIndex()
    for clue in ["A", "B", "C"]:
        index.insert(clue)
    return index


def test_tally_counts_matching_clues(index, directory):
    verdicts = VerdictSystem()
    assert verdicts.tally(index, directory, "Carlos") == 2
    assert verdicts.tally(index, directory, "Ana") == 1
    assert verdicts.tally(index, directory, "Ricardo") == 0


def test_sufficient_evidence(index, directory):
    result = VerdictSystem().judge(index, directory, "Carlos")
    assert result.verdict is Verdict.SUFFICIENT
    assert result.sufficient
    assert result.count == 2
    assert result.supporting_clues == ["A", "C"]


def test_insufficient_evidence(index, directory):
    result = VerdictSystem().judge(index, directory, "Ana")
    assert result.verdict is Verdict.INSUFFICIENT
    assert result.count == 1


def test_match_is_exact(index, directory):
    verdicts = VerdictSystem()
    assert verdicts.tally(index, directory, "carlos") == 0
    assert verdicts.judge(index, directory, "carlos").verdict is Verdict.INSUFFICIENT


def test_accused_name_is_trimmed(index, directory):
    result = VerdictSystem().judge(index, directory, "  Carlos \n")
    assert result.accused == "Carlos"
    assert result.count == 2


def test_empty_index_is_insufficient(directory):
    result = VerdictSystem().judge(ClueIndex(), directory, "Carlos")
    assert result.verdict is Verdict.INSUFFICIENT
    assert result.count == 0
    assert VerdictSystem().tally(ClueIndex(), directory, "Carlos") == 0


def test_empty_index_ignores_blank_name(directory):
    result = VerdictSystem().judge(ClueIndex(), directory, "   ")
    assert result.verdict is Verdict.INSUFFICIENT


def test_blank_name_is_rejected(index, directory):
    result = VerdictSystem().judge(index, directory, "   ")
    assert result.verdict is Verdict.REJECTED
    assert result.count == 0
    assert result.supporting_clues == []


def test_unbound_clues_count_for_nobody(directory):
    index = ClueIndex()
    index.insert("A")
    index.insert("unexplained stain")
    verdicts = VerdictSystem()
    assert verdicts.tally_all(index, directory) == {"Carlos": 1}


def test_tally_all(index, directory):
    assert VerdictSystem().tally_all(index, directory) == {"Carlos": 2, "Ana": 1}


def test_custom_threshold(index, directory):
    verdicts = VerdictSystem(threshold=1)
    assert verdicts.judge(index, directory, "Ana").verdict is Verdict.SUFFICIENT
    assert verdicts.judge(index, directory, "Ana").threshold == 1
