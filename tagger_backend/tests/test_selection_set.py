# tests/test_selection_set.py
# Purpose:
# Toggle semantics and the 4-tuple uniqueness invariant.
import pytest

from tagger_backend.app.services.selection import SelectionEntry, SelectionSet, UnknownTagGroupError

A = SelectionEntry(name="Retail", category="Industry", filter="Industries", path="")
B = SelectionEntry(name="Storage", category="Product", filter="Products", path="Cloud/")

def test_toggle_adds_then_removes():
    s = SelectionSet()
    first = s.toggle(A)
    assert first.selected and first.size == 1 and s.contains(A)
    second = s.toggle(A)
    assert not second.selected and second.size == 0 and not s.contains(A)

def test_double_toggle_restores_previous_state():
    s = SelectionSet()
    s.toggle(A)
    s.toggle(B)
    before = s.entries
    s.toggle(A)
    s.toggle(A)
    # A moves to the end (activation order) but membership is unchanged.
    assert set(s.entries) == set(before)
    assert len(s) == 2

def test_no_duplicates_after_any_toggle_sequence():
    s = SelectionSet()
    for e in [A, B, B, B, A, A]:
        s.toggle(e)
    assert len(s.entries) == len(set(s.entries))
    assert s.entries == [B, A]

def test_tuples_differing_only_in_path_are_distinct():
    s = SelectionSet()
    other = SelectionEntry(name="Storage", category="Product", filter="Products", path="")
    s.toggle(B)
    s.toggle(other)
    assert s.entries == [B, other]

def test_activation_order_is_kept():
    s = SelectionSet()
    s.toggle(B)
    s.toggle(A)
    assert s.entries == [B, A]

def test_entries_are_immutable():
    with pytest.raises(Exception):
        A.name = "Other"  # type: ignore[misc]

def test_unknown_category_or_filter_rejected_with_taxonomy(taxonomy):
    s = SelectionSet(taxonomy)
    with pytest.raises(UnknownTagGroupError):
        s.toggle(SelectionEntry(name="X", category="Nope", filter="Industries"))
    with pytest.raises(UnknownTagGroupError):
        s.toggle(SelectionEntry(name="X", category="Industry", filter="Nope"))
    assert len(s) == 0
    s.toggle(A)
    assert s.contains(A)
