"""Tests for the ordered clue index."""

from detective_quest.backend.systems import ClueIndex


def test_new_index_is_empty():
    index = ClueIndex()
    assert index.is_empty
    assert len(index) == 0
    assert list(index.in_order()) == []


def test_in_order_is_sorted():
    index = ClueIndex()
    for clue in ["torn letter", "muddy footprint", "wet footprints", "blond hair", "missing book"]:
        index.insert(clue)
    assert list(index.in_order()) == [
        "blond hair",
        "missing book",
        "muddy footprint",
        "torn letter",
        "wet footprints",
    ]


def test_duplicate_insert_is_noop():
    once = ClueIndex()
    once.insert("torn letter")
    once.insert("muddy footprint")

    many = ClueIndex()
    for _ in range(5):
        many.insert("torn letter")
        many.insert("muddy footprint")

    assert list(many.in_order()) == list(once.in_order())
    assert len(many) == 2


def test_empty_text_is_ignored():
    index = ClueIndex()
    index.insert("")
    index.insert(None)
    assert index.is_empty


def test_comparison_is_case_sensitive():
    index = ClueIndex()
    index.insert("Knife")
    index.insert("knife")
    # 大写字母排在小写字母之前
    assert list(index) == ["Knife", "knife"]


def test_in_order_is_restartable():
    index = ClueIndex()
    for clue in ["b", "a", "c"]:
        index.insert(clue)
    first = index.in_order()
    assert next(first) == "a"
    assert list(index.in_order()) == ["a", "b", "c"]
    assert list(first) == ["b", "c"]


def test_contains():
    index = ClueIndex()
    index.insert("torn letter")
    assert "torn letter" in index
    assert "torn" not in index
    assert 42 not in index


def test_sorted_insertions_form_a_chain():
    index = ClueIndex()
    for clue in ["a", "b", "c", "d"]:
        index.insert(clue)
    assert index.root.text == "a"
    assert index.root.left is None
    assert index.root.right.right.right.text == "d"
