import unittest

import numpy as np

from mazebook.errors import DimensionError, InvalidCoordinate, SettingsError
from mazebook.maze.grid import BOTTOM, LEFT, RIGHT, TOP, Grid, build_grid


def _columns_zero_and_two(x, y, width, height):
    return x in (0, 2)


class GridBuilderTests(unittest.TestCase):
    def test_square_grid_is_fully_walled(self) -> None:
        grid = build_grid(4, 3)
        self.assertEqual((grid.width, grid.height), (4, 3))
        self.assertEqual(len(grid.rows), 3)
        self.assertTrue(all(len(row) == 4 for row in grid.rows))
        self.assertEqual(grid.cell_count, 12)
        for cell in grid.cells():
            self.assertEqual(cell.walls, [True, True, True, True])
        self.assertEqual(grid.open_wall_count(), 0)

    def test_every_shape_starts_fully_walled(self) -> None:
        for shape in ("square", "circle", "triangle", "star"):
            grid = build_grid(11, 9, shape)
            self.assertTrue(all(all(cell.walls) for cell in grid.cells()), shape)

    def test_circle_mask_leaves_holes_in_corners(self) -> None:
        grid = build_grid(10, 10, "circle")
        for corner in ((0, 0), (9, 0), (0, 9), (9, 9)):
            self.assertTrue(grid.is_hole(*corner), corner)
        self.assertFalse(grid.is_hole(5, 5))
        mask = grid.mask_array()
        self.assertEqual(mask.shape, (10, 10))
        self.assertEqual(int(mask.sum()), grid.cell_count)

    def test_non_positive_dimensions_are_rejected(self) -> None:
        for width, height in ((0, 5), (5, 0), (-1, 3), (2.5, 3), (True, 3)):
            with self.assertRaises(DimensionError):
                build_grid(width, height)

    def test_unknown_shape_name_is_a_settings_error(self) -> None:
        with self.assertRaises(SettingsError):
            build_grid(5, 5, "hexagon")

    def test_mask_rejecting_everything_gives_all_holes(self) -> None:
        grid = build_grid(3, 3, lambda x, y, w, h: False)
        self.assertEqual(grid.cell_count, 0)
        self.assertIsNone(grid.first_cell())
        self.assertFalse(grid.mask_array().any())


class GridWallTests(unittest.TestCase):
    def test_open_wall_updates_both_sides(self) -> None:
        grid = build_grid(3, 3)
        self.assertTrue(grid.open_wall(1, 1, RIGHT))
        self.assertFalse(grid.cell(1, 1).walls[RIGHT])
        self.assertFalse(grid.cell(2, 1).walls[LEFT])
        self.assertTrue(grid.is_open((1, 1), (2, 1)))
        self.assertTrue(grid.is_open((2, 1), (1, 1)))
        # already open
        self.assertFalse(grid.open_wall(2, 1, LEFT))
        self.assertEqual(grid.open_wall_count(), 1)

    def test_open_wall_ignores_edges_and_holes(self) -> None:
        grid = build_grid(3, 2, _columns_zero_and_two)
        self.assertFalse(grid.open_wall(0, 0, TOP))
        self.assertFalse(grid.open_wall(0, 0, RIGHT))
        self.assertTrue(grid.cell(0, 0).walls[RIGHT])
        self.assertTrue(grid.open_wall(0, 0, BOTTOM))

    def test_is_open_requires_adjacent_cells(self) -> None:
        grid = build_grid(3, 3)
        grid.open_wall(0, 0, RIGHT)
        self.assertFalse(grid.is_open((0, 0), (2, 0)))
        self.assertFalse(grid.is_open((0, 0), (0, 0)))
        self.assertFalse(grid.is_open((0, 0), (-1, 0)))

    def test_wall_pairs_cover_each_boundary_once(self) -> None:
        grid = build_grid(3, 2)
        pairs = list(grid.wall_pairs())
        # 2 rows * 2 horizontal boundaries + 3 vertical boundaries
        self.assertEqual(len(pairs), 7)

    def test_wall_array_leaves_holes_empty(self) -> None:
        grid = build_grid(3, 2, _columns_zero_and_two)
        walls = grid.wall_array()
        self.assertEqual(walls.shape, (2, 3, 4))
        self.assertFalse(walls[:, 1].any())
        self.assertTrue(walls[:, 0].all())

    def test_from_arrays_restores_topology(self) -> None:
        grid = build_grid(4, 4, "circle")
        grid.open_wall(1, 1, RIGHT)
        restored = Grid.from_arrays(grid.mask_array().tolist(), grid.wall_array().tolist())
        np.testing.assert_array_equal(restored.mask_array(), grid.mask_array())
        np.testing.assert_array_equal(restored.wall_array(), grid.wall_array())
        self.assertTrue(restored.is_open((1, 1), (2, 1)))

    def test_from_arrays_rejects_mismatched_shapes(self) -> None:
        with self.assertRaises(ValueError):
            Grid.from_arrays(np.ones((2, 2)), np.ones((2, 3, 4)))


class GridLookupTests(unittest.TestCase):
    def test_require_cell_rejects_out_of_bounds_and_holes(self) -> None:
        grid = build_grid(3, 2, _columns_zero_and_two)
        self.assertEqual(grid.require_cell((2, 1)).coord, (2, 1))
        for coord in ((3, 0), (0, 2), (-1, 0), (1, 0)):
            with self.assertRaises(InvalidCoordinate) as ctx:
                grid.require_cell(coord)
            self.assertEqual(ctx.exception.coord, coord)

    def test_require_cell_rejects_non_integer_coordinates(self) -> None:
        grid = build_grid(3, 2)
        for coord in ((0.9, 0), (1, 1.0), (True, 0), ("1", 0)):
            with self.assertRaises(InvalidCoordinate):
                grid.require_cell(coord)
        self.assertEqual(grid.require_cell((np.int64(1), np.int64(1))).coord, (1, 1))

    def test_neighbors_skip_holes(self) -> None:
        grid = build_grid(3, 2, _columns_zero_and_two)
        self.assertEqual([cell.coord for _, cell in grid.neighbors(0, 0)], [(0, 1)])
        self.assertEqual(grid.open_neighbors(0, 0), [])
        self.assertEqual(grid.open_neighbors(1, 0), [])


if __name__ == "__main__":
    unittest.main()
