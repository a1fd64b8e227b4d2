import unittest

from crossmaker.core.constants import Direction, Guard, GridKind
from crossmaker.core.exceptions import InvalidGridOperation
from crossmaker.engine.grid import Grid, GridConfig


class GridPlacementTests(unittest.TestCase):
    def test_new_grids_are_empty(self) -> None:
        letters = Grid.letters(4, 3)
        guards = Grid.guards(4, 3)
        self.assertEqual(letters.kind, GridKind.LETTERS)
        self.assertEqual(guards.kind, GridKind.GUARDS)
        for x in range(4):
            for y in range(3):
                self.assertIsNone(letters.cell(x, y))
                self.assertEqual(guards.cell(x, y), frozenset())
                self.assertTrue(letters.is_empty(x, y))
                self.assertTrue(guards.is_empty(x, y))

    def test_from_config_uses_dimensions(self) -> None:
        grid = Grid.from_config(GridConfig(size_x=6, size_y=2))
        self.assertEqual((grid.size_x, grid.size_y), (6, 2))
        self.assertEqual(GridConfig().bounds().cells, 121)

    def test_place_across_writes_letters(self) -> None:
        grid = Grid.letters(5, 5)
        self.assertTrue(grid.place_across(1, 2, "cat"))
        self.assertEqual([grid.cell(x, 2) for x in range(5)], [None, "c", "a", "t", None])

    def test_place_across_may_end_on_last_column(self) -> None:
        grid = Grid.letters(5, 5)
        self.assertTrue(grid.place_across(2, 0, "cat"))
        self.assertEqual(grid.cell(4, 0), "t")

    def test_place_across_rejects_overflow_without_mutation(self) -> None:
        grid = Grid.letters(5, 5)
        self.assertFalse(grid.place_across(3, 0, "cat"))
        self.assertEqual(grid.filled_count(), 0)

    def test_place_down_is_symmetric(self) -> None:
        grid = Grid.letters(5, 5)
        self.assertTrue(grid.place_down(4, 2, "dog"))
        self.assertEqual([grid.cell(4, y) for y in range(2, 5)], ["d", "o", "g"])
        self.assertFalse(grid.place_down(0, 3, "dog"))
        self.assertEqual(grid.filled_count(), 3)

    def test_place_dispatches_on_direction(self) -> None:
        grid = Grid.letters(3, 3)
        grid.place(0, 0, "ab", Direction.DOWN)
        self.assertEqual(grid.cell(0, 1), "b")

    def test_clone_is_independent(self) -> None:
        grid = Grid.letters(4, 4)
        grid.place_across(0, 0, "abc")
        twin = grid.clone()
        self.assertEqual(twin, grid)
        twin.place_down(3, 0, "xyz")
        self.assertIsNone(grid.cell(3, 0))
        self.assertNotEqual(twin, grid)

    def test_occupied_lists_cells_in_row_major_order(self) -> None:
        grid = Grid.letters(3, 3)
        grid.place_down(1, 0, "ab")
        grid.place_across(0, 2, "cd")
        self.assertEqual(
            list(grid.occupied()),
            [(1, 0, "a"), (1, 1, "b"), (0, 2, "c"), (1, 2, "d")],
        )

    def test_to_jsonable_rows(self) -> None:
        grid = Grid.letters(2, 2)
        grid.place_across(0, 1, "hi")
        self.assertEqual(grid.to_jsonable(), [[None, None], ["h", "i"]])


class GridGuardTests(unittest.TestCase):
    def test_across_guard_pattern(self) -> None:
        guards = Grid.guards(7, 5)
        self.assertTrue(guards.mark_across_guard(2, 2, "bli"))

        for x in (2, 3, 4):
            self.assertEqual(guards.cell(x, 2), frozenset({Guard.HORIZONTAL}))
            self.assertEqual(guards.cell(x, 1), frozenset({Guard.BOUNDARY}))
            self.assertEqual(guards.cell(x, 3), frozenset({Guard.BOUNDARY}))
        self.assertEqual(guards.cell(1, 2), frozenset({Guard.NO_ORIENT}))
        self.assertEqual(guards.cell(5, 2), frozenset({Guard.NO_ORIENT}))
        # Flank corners stay clear.
        for x, y in ((1, 1), (5, 1), (1, 3), (5, 3), (0, 2), (6, 2)):
            self.assertEqual(guards.cell(x, y), frozenset())

    def test_down_guard_pattern(self) -> None:
        guards = Grid.guards(5, 7)
        self.assertTrue(guards.mark_down_guard(2, 2, "bli"))

        for y in (2, 3, 4):
            self.assertEqual(guards.cell(2, y), frozenset({Guard.VERTICAL}))
            self.assertEqual(guards.cell(1, y), frozenset({Guard.BOUNDARY}))
            self.assertEqual(guards.cell(3, y), frozenset({Guard.BOUNDARY}))
        self.assertEqual(guards.cell(2, 1), frozenset({Guard.NO_ORIENT}))
        self.assertEqual(guards.cell(2, 5), frozenset({Guard.NO_ORIENT}))
        self.assertEqual(guards.cell(1, 1), frozenset())
        self.assertEqual(guards.cell(3, 5), frozenset())

    def test_guard_targets_outside_grid_are_skipped(self) -> None:
        guards = Grid.guards(3, 3)
        self.assertTrue(guards.mark_across_guard(0, 0, "abc"))
        self.assertEqual(
            [guards.cell(x, 0) for x in range(3)],
            [frozenset({Guard.HORIZONTAL})] * 3,
        )
        self.assertEqual(
            [guards.cell(x, 1) for x in range(3)],
            [frozenset({Guard.BOUNDARY})] * 3,
        )
        self.assertEqual(guards.filled_count(), 6)

    def test_guard_rejects_word_that_does_not_fit(self) -> None:
        guards = Grid.guards(4, 4)
        self.assertFalse(guards.mark_down_guard(0, 2, "abc"))
        self.assertEqual(guards.filled_count(), 0)

    def test_guard_markers_accumulate(self) -> None:
        guards = Grid.guards(5, 5)
        guards.mark_across_guard(0, 0, "ab")
        guards.mark_across_guard(2, 1, "cd")
        self.assertEqual(guards.cell(2, 0), frozenset({Guard.NO_ORIENT, Guard.BOUNDARY}))
        self.assertTrue(guards.has_guard(2, 0, Guard.NO_ORIENT))
        self.assertTrue(guards.has_guard(2, 0, Guard.BOUNDARY))
        self.assertFalse(guards.has_guard(2, 0, Guard.HORIZONTAL))

    def test_guard_to_jsonable_lists_marker_codes(self) -> None:
        guards = Grid.guards(3, 1)
        guards.mark_across_guard(1, 0, "a")
        self.assertEqual(guards.to_jsonable(), [[["O"], ["H"], ["O"]]])


class GridMisuseTests(unittest.TestCase):
    def test_marking_letter_grid_is_rejected(self) -> None:
        with self.assertRaises(InvalidGridOperation):
            Grid.letters(5, 5).mark_across_guard(0, 0, "abc")
        with self.assertRaises(InvalidGridOperation):
            Grid.letters(5, 5).mark_down_guard(0, 0, "abc")

    def test_placing_letters_on_guard_grid_is_rejected(self) -> None:
        with self.assertRaises(InvalidGridOperation):
            Grid.guards(5, 5).place_across(0, 0, "abc")

    def test_out_of_bounds_cell_access_is_rejected(self) -> None:
        grid = Grid.letters(3, 3)
        with self.assertRaises(InvalidGridOperation):
            grid.set_letter(3, 0, "a")
        with self.assertRaises(InvalidGridOperation):
            grid.set_letter(0, -1, "a")
        with self.assertRaises(InvalidGridOperation):
            grid.cell(0, 3)

    def test_set_letter_requires_single_character(self) -> None:
        grid = Grid.letters(3, 3)
        grid.set_letter(1, 1, "q")
        self.assertEqual(grid.cell(1, 1), "q")
        with self.assertRaises(InvalidGridOperation):
            grid.set_letter(0, 0, "ab")
        with self.assertRaises(InvalidGridOperation):
            Grid.guards(3, 3).set_letter(0, 0, "a")

    def test_dimensions_must_be_positive(self) -> None:
        with self.assertRaises(InvalidGridOperation):
            Grid(0, 3)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
