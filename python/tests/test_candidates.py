"""Ordered candidate set used by generation."""

from __future__ import annotations

from backend.models.candidates import Candidate, CandidateSet


def test_entries_are_kept_in_key_order() -> None:
    cs = CandidateSet()
    for entry in [(2, 0, 1), (0, 1, 8), (0, 1, 2), (1, 5, 4)]:
        cs.add(*entry)
    assert list(cs) == [(0, 1, 2), (0, 1, 8), (1, 5, 4), (2, 0, 1)]
    assert len(cs) == 4


def test_duplicates_are_ignored() -> None:
    cs = CandidateSet()
    assert cs.add(1, 1, 2)
    assert not cs.add(1, 1, 2)
    assert len(cs) == 1


def test_find_and_remove_by_key() -> None:
    cs = CandidateSet()
    cs.add(3, 4, 8)
    cs.add(0, 0, 1)
    assert cs.find(3, 4, 8) == Candidate(3, 4, 8)
    assert Candidate(3, 4, 8) in cs
    assert cs.find(3, 4, 1) is None

    assert cs.remove(3, 4, 8)
    assert not cs.remove(3, 4, 8)
    assert list(cs) == [(0, 0, 1)]


def test_pop_at_index() -> None:
    cs = CandidateSet()
    for x in range(5):
        cs.add(x, 0, 1)
    assert cs.pop_at(2) == Candidate(2, 0, 1)
    assert cs.pop_at(0) == Candidate(0, 0, 1)
    assert [c.x for c in cs] == [1, 3, 4]
    assert Candidate(2, 0, 1) not in cs


def test_clear() -> None:
    cs = CandidateSet()
    cs.add(0, 0, 1)
    cs.clear()
    assert len(cs) == 0
    assert cs.find(0, 0, 1) is None
