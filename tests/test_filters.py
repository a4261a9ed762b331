"""Unit tests for smart_notes.filters — filter engine and tag index."""

from __future__ import annotations

import pytest

from smart_notes.filters import apply_filters, distinct_tags
from smart_notes.keywords import Color
from smart_notes.models import FilterSpec, Note

from conftest import make_note


class TestApplyFilters:
    def test_no_filters_returns_everything_in_order(self, sample_notes: list[Note]) -> None:
        assert apply_filters(FilterSpec(), sample_notes) == sample_notes

    def test_color_filter(self, sample_notes: list[Note]) -> None:
        result = apply_filters(FilterSpec(color_filter=Color.RED), sample_notes)
        assert [n.id for n in result] == ["n4", "n1"]

    def test_color_filter_from_string(self, sample_notes: list[Note]) -> None:
        result = apply_filters(FilterSpec(color_filter="green"), sample_notes)
        assert [n.id for n in result] == ["n2"]

    def test_tag_filter_exact(self, sample_notes: list[Note]) -> None:
        result = apply_filters(FilterSpec(tag_filter="Trabajo"), sample_notes)
        assert [n.id for n in result] == ["n4", "n3"]

    def test_tag_filter_case_sensitive(self, sample_notes: list[Note]) -> None:
        assert apply_filters(FilterSpec(tag_filter="trabajo"), sample_notes) == []

    def test_search_title_content_and_tags(self, sample_notes: list[Note]) -> None:
        assert [n.id for n in apply_filters(FilterSpec(search_text="DOCTOR"), sample_notes)] == ["n1"]
        assert [n.id for n in apply_filters(FilterSpec(search_text="leche"), sample_notes)] == ["n2"]
        assert [n.id for n in apply_filters(FilterSpec(search_text="proy"), sample_notes)] == ["n3"]

    def test_search_no_match(self, sample_notes: list[Note]) -> None:
        assert apply_filters(FilterSpec(search_text="zzzz"), sample_notes) == []

    def test_all_filters_combined(self, sample_notes: list[Note]) -> None:
        spec = FilterSpec(color_filter=Color.RED, tag_filter="Trabajo", search_text="informe")
        assert [n.id for n in apply_filters(spec, sample_notes)] == ["n4"]

    def test_color_then_tag_equals_both(self, sample_notes: list[Note]) -> None:
        by_color = apply_filters(FilterSpec(color_filter=Color.RED), sample_notes)
        chained = apply_filters(FilterSpec(tag_filter="Salud"), by_color)
        both = apply_filters(FilterSpec(color_filter=Color.RED, tag_filter="Salud"), sample_notes)
        assert chained == both

    def test_never_reorders(self) -> None:
        notes = [make_note(f"nota {i}", note_id=str(i), minutes=i) for i in range(5)]
        result = apply_filters(FilterSpec(search_text="nota"), notes)
        assert result == notes

    def test_invalid_color_rejected(self) -> None:
        spec = FilterSpec()
        with pytest.raises(ValueError):
            spec.color_filter = "purple"


class TestDistinctTags:
    def test_union_sorted(self) -> None:
        notes = [make_note(tags=("A", "B")), make_note(tags=("B", "C"))]
        assert distinct_tags(notes) == ["A", "B", "C"]

    def test_independent_of_note_order(self, sample_notes: list[Note]) -> None:
        assert distinct_tags(sample_notes) == distinct_tags(reversed(sample_notes))
        assert distinct_tags(sample_notes) == ["General", "Proyecto", "Salud", "Trabajo"]

    def test_empty(self) -> None:
        assert distinct_tags([]) == []
