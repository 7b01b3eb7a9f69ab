"""
Transient group labels for row-by-row maze carving.

While a row is carved, every cell carries a group id: two cells share an id
exactly when the passages carved so far connect them. The carver only asks
four questions of the labels (are two cells in the same group, how many row
cells belong to a group, is a group down to a single labelled cell, what is a
cell's id) so any structure that answers them identically yields the same
maze for the same seed.

Two implementations:
- RescanGroupLabels: merges relabel every cell of the absorbed group by a
  full scan of the label table. Simple and obviously correct.
- DisjointSetGroupLabels: union-find with path compression and union by rank,
  plus live member counts, so merges are near constant time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

import numpy as np


class GroupTracking(Enum):
    """Available group-label implementations."""

    RESCAN = "rescan"
    DISJOINT_SET = "disjoint_set"


class GroupLabels(ABC):
    """Group ids for a width x length grid; 0 means unlabelled."""

    def __init__(self, width: int, length: int):
        self.width = width
        self.length = length
        self.labels = np.zeros((width, length), dtype=np.int64)

    @abstractmethod
    def group(self, x: int, y: int) -> int:
        """Group id of the cell at (x, y), or 0 if unlabelled."""

    @abstractmethod
    def assign(self, x: int, y: int, group: int) -> None:
        """Put the cell at (x, y) into ``group`` (a fresh id or an existing one)."""

    @abstractmethod
    def merge(self, keep: int, absorb: int) -> None:
        """Join every member of group ``absorb`` to group ``keep``."""

    @abstractmethod
    def row_count(self, group: int, y: int) -> int:
        """Number of cells in row ``y`` that belong to ``group``."""

    @abstractmethod
    def is_alone(self, group: int) -> bool:
        """True when at most one labelled cell belongs to ``group``."""

    @abstractmethod
    def clear_row(self, y: int) -> None:
        """Drop the labels of every cell in row ``y``."""

    def is_labelled(self, x: int, y: int) -> bool:
        return self.labels[x, y] != 0

    def same_group(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        return self.group(x1, y1) == self.group(x2, y2)


class RescanGroupLabels(GroupLabels):
    """Group labels stored directly in the table; merges rescan the whole table."""

    def group(self, x: int, y: int) -> int:
        return int(self.labels[x, y])

    def assign(self, x: int, y: int, group: int) -> None:
        self.labels[x, y] = group

    def merge(self, keep: int, absorb: int) -> None:
        if keep == 0 or absorb == 0:
            return
        self.labels[self.labels == absorb] = keep

    def row_count(self, group: int, y: int) -> int:
        return int(np.count_nonzero(self.labels[:, y] == group))

    def is_alone(self, group: int) -> bool:
        return int(np.count_nonzero(self.labels == group)) < 2

    def clear_row(self, y: int) -> None:
        self.labels[:, y] = 0


class DisjointSetGroupLabels(GroupLabels):
    """
    Union-find group labels.

    The table stores the id a cell was labelled with; the cell's group is the
    root of that id. ``members`` counts the labelled cells under each root.
    """

    def __init__(self, width: int, length: int):
        super().__init__(width, length)
        self.parent: dict[int, int] = {}
        self.rank: dict[int, int] = {}
        self.members: dict[int, int] = {}

    def find(self, label: int) -> int:
        if label not in self.parent:
            self.parent[label] = label
            self.rank[label] = 0
            self.members[label] = 0
            return label

        root = label
        while self.parent[root] != root:
            root = self.parent[root]
        # Path compression
        while self.parent[label] != root:
            self.parent[label], label = root, self.parent[label]
        return root

    def group(self, x: int, y: int) -> int:
        label = int(self.labels[x, y])
        return self.find(label) if label else 0

    def assign(self, x: int, y: int, group: int) -> None:
        previous = int(self.labels[x, y])
        if previous:
            self.members[self.find(previous)] -= 1
        self.labels[x, y] = group
        self.members[self.find(group)] += 1

    def merge(self, keep: int, absorb: int) -> None:
        if keep == 0 or absorb == 0:
            return
        root_a, root_b = self.find(keep), self.find(absorb)
        if root_a == root_b:
            return
        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        self.members[root_a] += self.members.pop(root_b)
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1

    def row_count(self, group: int, y: int) -> int:
        root = self.find(group)
        return sum(1 for x in range(self.width) if self.labels[x, y] and self.find(int(self.labels[x, y])) == root)

    def is_alone(self, group: int) -> bool:
        return self.members.get(self.find(group), 0) < 2

    def clear_row(self, y: int) -> None:
        for x in range(self.width):
            label = int(self.labels[x, y])
            if label:
                self.members[self.find(label)] -= 1
        self.labels[:, y] = 0


def create_group_labels(tracking: GroupTracking | str, width: int, length: int) -> GroupLabels:
    """Create the group-label implementation named by ``tracking``."""
    tracking = GroupTracking(tracking)
    if tracking == GroupTracking.DISJOINT_SET:
        return DisjointSetGroupLabels(width, length)
    return RescanGroupLabels(width, length)
