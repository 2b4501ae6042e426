# tests/test_export_grouper.py
# Purpose:
# Ordered selection -> {category: [names]} and the copy-ready strings.
from tagger_backend.app.services.selection import (
    SelectionEntry,
    export_strings,
    group_by_category,
    order_selection,
)
from tagger_backend.app.taxonomy import Taxonomy

def test_group_after_ordering_end_to_end():
    tx = Taxonomy("en", filters={"X": []}, categories={"Industry": {}, "Language": {}}, tags=[])
    selection = [
        SelectionEntry(name="Retail", category="Industry", filter="X"),
        SelectionEntry(name="Healthcare", category="Industry", filter="X"),
        SelectionEntry(name="EN", category="Language", filter="X"),
    ]
    groups = group_by_category(order_selection(selection, tx))
    assert groups == {"Industry": ["Healthcare", "Retail"], "Language": ["EN"]}

def test_category_order_is_first_occurrence():
    ordered = [
        SelectionEntry(name="EN", category="Language", filter="X"),
        SelectionEntry(name="Retail", category="Industry", filter="X"),
        SelectionEntry(name="DE", category="Language", filter="X"),
    ]
    groups = group_by_category(ordered)
    assert list(groups) == ["Language", "Industry"]
    assert groups["Language"] == ["EN", "DE"]

def test_export_strings_join_with_delimiter():
    groups = {"Industry": ["Healthcare", "Retail"], "Language": ["EN"]}
    assert export_strings(groups) == {"Industry": "Healthcare, Retail", "Language": "EN"}
    assert export_strings(groups, delimiter="|")["Industry"] == "Healthcare|Retail"

def test_empty_selection_groups_to_nothing():
    assert group_by_category([]) == {}
