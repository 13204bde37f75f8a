from typing import Dict, FrozenSet, List, Set

class DisjointSetRegistry:
    """
    Tracks which cells are already connected.

    Set ids are small ints handed out by next_id(), starting at 1.
    0 is reserved for "not in any set". Cells are plain int keys: Eller
    uses the x coordinate within one row, Kruskal the flat cell index.
    """
    UNASSIGNED = 0

    __slots__ = ('current', 'all_sets', 'cell_set')

    def __init__(self):
        self.current = 1
        self.all_sets: Dict[int, Set[int]] = {}
        # Reverse lookup x -> set id
        self.cell_set: Dict[int, int] = {}

    def next_id(self) -> int:
        set_id = self.current
        self.current += 1
        return set_id

    def add(self, x: int, set_id: int):
        owner = self.cell_set.get(x, self.UNASSIGNED)
        assert owner in (self.UNASSIGNED, set_id), f"Cell {x} already belongs to set {owner}"
        self.all_sets.setdefault(set_id, set()).add(x)
        self.cell_set[x] = set_id

    def remove(self, x: int, set_id: int):
        members = self.all_sets.get(set_id)
        assert members is not None and x in members, f"Cell {x} is not in set {set_id}"
        members.remove(x)
        del self.cell_set[x]
        if not members:
            del self.all_sets[set_id]

    def set_for_cell(self, x: int) -> int:
        return self.cell_set.get(x, self.UNASSIGNED)

    def members(self, set_id: int) -> FrozenSet[int]:
        return frozenset(self.all_sets.get(set_id, ()))

    def set_size(self, set_id: int) -> int:
        return len(self.all_sets.get(set_id, ()))

    def merge(self, keep_x: int, absorb_x: int) -> int:
        """
        Moves every member of absorb_x's set into keep_x's set.
        Returns the surviving set id.
        """
        new_set = self.set_for_cell(keep_x)
        old_set = self.set_for_cell(absorb_x)
        assert new_set != self.UNASSIGNED and old_set != self.UNASSIGNED, \
            f"Cannot merge unassigned cells {keep_x}, {absorb_x}"
        if new_set == old_set:
            return new_set

        for x in list(self.all_sets[old_set]):
            self.remove(x, old_set)
            self.add(x, new_set)
        return new_set

    def clear(self) -> Dict[int, List[int]]:
        """Empties the registry and returns the {set_id: members} it held."""
        snapshot = {set_id: sorted(members) for set_id, members in self.all_sets.items()}
        self.all_sets = {}
        self.cell_set = {}
        return snapshot

    def reset(self):
        self.clear()
        self.current = 1

    @property
    def cell_count(self) -> int:
        """Number of cells currently assigned to a set."""
        return len(self.cell_set)

    def __len__(self) -> int:
        return len(self.all_sets)

    def __contains__(self, x: int) -> bool:
        return x in self.cell_set
