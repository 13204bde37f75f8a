import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.core.sets import DisjointSetRegistry

class TestDisjointSetRegistry(unittest.TestCase):
    def setUp(self):
        self.sets = DisjointSetRegistry()
        for x in range(4):
            self.sets.add(x, self.sets.next_id())

    def test_ids_start_at_one(self):
        self.assertEqual([self.sets.set_for_cell(x) for x in range(4)], [1, 2, 3, 4])
        self.assertEqual(self.sets.set_for_cell(9), DisjointSetRegistry.UNASSIGNED)
        self.assertEqual(len(self.sets), 4)

    def test_merge_moves_members(self):
        survivor = self.sets.merge(1, 2)
        self.assertEqual(survivor, 2)
        self.assertEqual(self.sets.members(2), frozenset({1, 2}))
        self.assertEqual(self.sets.members(3), frozenset())
        self.assertEqual(len(self.sets), 3)

        # Merging a whole set in, not just one cell
        self.sets.merge(0, 1)
        self.assertEqual(self.sets.members(1), frozenset({0, 1, 2}))
        self.assertEqual(self.sets.set_for_cell(2), 1)

    def test_merge_same_set_is_noop(self):
        self.sets.merge(0, 1)
        self.assertEqual(self.sets.merge(1, 0), 1)
        self.assertEqual(self.sets.members(1), frozenset({0, 1}))

    def test_partition(self):
        self.sets.merge(0, 1)
        self.sets.merge(2, 3)
        cells = []
        for set_id in list(self.sets.all_sets):
            cells.extend(self.sets.members(set_id))
        self.assertEqual(sorted(cells), [0, 1, 2, 3])

    def test_clear_returns_snapshot(self):
        self.sets.merge(2, 3)
        snapshot = self.sets.clear()
        self.assertEqual(snapshot, {1: [0], 2: [1], 3: [2, 3]})
        self.assertEqual(len(self.sets), 0)
        self.assertNotIn(0, self.sets)
        # Ids keep counting after a clear
        self.assertEqual(self.sets.next_id(), 5)

    def test_reset_restarts_ids(self):
        self.sets.reset()
        self.assertEqual(self.sets.next_id(), 1)

    def test_cell_count(self):
        self.sets.merge(0, 1)
        self.assertEqual(self.sets.cell_count, 4)
        self.assertEqual(len(self.sets), 3)
        self.assertEqual(self.sets.set_size(1), 2)
        self.sets.remove(3, 4)
        self.assertEqual(self.sets.cell_count, 3)
        self.assertEqual(self.sets.set_size(4), 0)

    def test_remove_drops_empty_set(self):
        self.sets.remove(0, 1)
        self.assertNotIn(0, self.sets)
        self.assertNotIn(1, self.sets.all_sets)

    def test_invariant_violations(self):
        with self.assertRaises(AssertionError):
            self.sets.remove(0, 2)
        with self.assertRaises(AssertionError):
            self.sets.add(0, 2)
        with self.assertRaises(AssertionError):
            self.sets.merge(0, 7)

if __name__ == '__main__':
    unittest.main()
