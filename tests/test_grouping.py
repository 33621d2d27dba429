"""Tests for sector grouping."""

import pytest
from hypothesis import given, settings, strategies as st

from src.grouping import MISSING_LABEL, OTHER_SECTOR, group_by_sector, sector_label
from src.notes import ResearchNote


def _note(topic: str, sector=None) -> ResearchNote:
    return ResearchNote(topic=topic, notes="", analyst="Person 1", date="2025-05-25", sector=sector)


class TestGroupBySector:
    """Test sector bucketing."""

    def test_one_bucket_per_sector_in_first_seen_order(self, sample_notes) -> None:
        groups = group_by_sector(sample_notes)
        assert list(groups) == ["Pharmaceuticals", "Logistics", "Automobile"]
        assert all(len(items) == 1 for items in groups.values())

    def test_repeated_sector_keeps_first_position(self) -> None:
        notes = [_note("a", "Banks"), _note("b", "Energy"), _note("c", "Banks")]
        groups = group_by_sector(notes)
        assert list(groups) == ["Banks", "Energy"]
        assert [note.topic for note in groups["Banks"]] == ["a", "c"]

    def test_missing_sector_goes_to_other(self) -> None:
        groups = group_by_sector([_note("a"), _note("b", ""), _note("c", "Banks")])
        assert list(groups) == [OTHER_SECTOR, "Banks"]
        assert [note.topic for note in groups[OTHER_SECTOR]] == ["a", "b"]

    def test_empty_input(self) -> None:
        assert group_by_sector([]) == {}


def test_sector_label_falls_back_to_na() -> None:
    assert sector_label(_note("a")) == MISSING_LABEL
    assert sector_label(_note("a", "Banks")) == "Banks"


@pytest.mark.hypothesis
@given(sectors=st.lists(st.one_of(st.none(), st.sampled_from(["Banks", "Energy", "IT", "Other"])), max_size=20))
@settings(max_examples=100, deadline=None)
def test_grouping_partitions_input(sectors) -> None:
    notes = [_note(str(i), sector) for i, sector in enumerate(sectors)]
    groups = group_by_sector(notes)
    assert sum(len(items) for items in groups.values()) == len(notes)
    assert set(groups) == {sector or OTHER_SECTOR for sector in sectors}
