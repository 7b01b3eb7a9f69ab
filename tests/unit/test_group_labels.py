"""
Unit tests for transient group labels.

Both implementations are run through the same scenarios; the carver relies on
them answering every query identically.
"""

import pytest

from maze_routes.geometry.mazes.group_labels import (
    DisjointSetGroupLabels,
    GroupTracking,
    RescanGroupLabels,
    create_group_labels,
)


@pytest.fixture(params=[GroupTracking.RESCAN, GroupTracking.DISJOINT_SET])
def labels(request):
    """Empty 4x3 label table for each implementation."""
    return create_group_labels(request.param, 4, 3)


class TestGroupLabels:
    """Behaviour shared by every implementation."""

    def test_starts_unlabelled(self, labels):
        assert not labels.is_labelled(0, 0)
        assert labels.group(0, 0) == 0

    def test_assign_and_group(self, labels):
        labels.assign(1, 0, 7)

        assert labels.is_labelled(1, 0)
        assert labels.group(1, 0) == 7

    def test_single_member_is_alone(self, labels):
        labels.assign(0, 0, 1)
        assert labels.is_alone(1)

        labels.assign(0, 1, 1)
        assert not labels.is_alone(1)

    def test_merge_joins_groups(self, labels):
        for x in range(4):
            labels.assign(x, 0, x + 1)

        labels.merge(1, 2)
        labels.merge(3, 4)

        assert labels.same_group(0, 0, 1, 0)
        assert labels.same_group(2, 0, 3, 0)
        assert not labels.same_group(1, 0, 2, 0)
        assert labels.row_count(labels.group(0, 0), 0) == 2

    def test_chained_merges(self, labels):
        for x in range(4):
            labels.assign(x, 0, x + 1)

        labels.merge(1, 2)
        labels.merge(labels.group(1, 0), 3)
        labels.merge(4, labels.group(0, 0))

        group = labels.group(0, 0)
        assert all(labels.group(x, 0) == group for x in range(4))
        assert labels.row_count(group, 0) == 4

    def test_row_count_is_per_row(self, labels):
        labels.assign(0, 0, 5)
        labels.assign(1, 0, 5)
        labels.assign(1, 1, 5)

        assert labels.row_count(5, 0) == 2
        assert labels.row_count(5, 1) == 1

    def test_clear_row(self, labels):
        labels.assign(0, 0, 1)
        labels.assign(1, 0, 1)
        labels.assign(1, 1, 1)

        labels.clear_row(0)

        assert not labels.is_labelled(0, 0)
        assert not labels.is_labelled(1, 0)
        assert labels.is_labelled(1, 1)
        assert labels.is_alone(labels.group(1, 1))

    def test_merge_with_unlabelled_is_noop(self, labels):
        labels.assign(0, 0, 1)

        labels.merge(1, 0)

        assert labels.group(0, 0) == 1


class TestImplementations:
    """Implementation-specific details."""

    def test_factory(self):
        assert isinstance(create_group_labels("rescan", 2, 2), RescanGroupLabels)
        assert isinstance(create_group_labels("disjoint_set", 2, 2), DisjointSetGroupLabels)

    def test_rescan_relabels_absorbed_cells(self):
        labels = RescanGroupLabels(3, 1)
        labels.assign(0, 0, 1)
        labels.assign(1, 0, 2)

        labels.merge(1, 2)

        assert labels.labels[1, 0] == 1

    def test_disjoint_set_tracks_members(self):
        labels = DisjointSetGroupLabels(3, 2)
        labels.assign(0, 0, 1)
        labels.assign(1, 0, 2)
        labels.assign(2, 0, 3)

        labels.merge(1, 2)
        labels.merge(2, 3)

        root = labels.find(1)
        assert labels.find(2) == root
        assert labels.find(3) == root
        assert labels.members[root] == 3

        labels.clear_row(0)
        assert labels.members[root] == 0
