import json
import tempfile
import unittest
from pathlib import Path

from mazebook.maze.evaluator import MazeEvaluator
from mazebook.maze.generator import MazeBookGenerator
from mazebook.maze.settings import BookSettings


class MazeEvaluatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.output_dir = Path(self.tmp.name) / "book"
        settings = BookSettings(difficulty="easy", show_solution=True, shape="circle")
        self.generator = MazeBookGenerator(self.output_dir, settings=settings, seed=123)
        self.record = self.generator.generate_book()[0]
        self.evaluator = MazeEvaluator(self.generator.metadata_path)

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_stored_solution_is_valid(self) -> None:
        result = self.evaluator.evaluate(self.record.id, self.record.solution)
        self.assertTrue(result.is_valid_solution, result.message)
        self.assertEqual(result.steps, len(self.record.solution) - 1)

    def test_jumping_path_is_not_connected(self) -> None:
        result = self.evaluator.evaluate(self.record.id, [self.record.start, self.record.end])
        self.assertFalse(result.connected)
        self.assertTrue(result.touches_goal)
        self.assertFalse(result.is_valid_solution)

    def test_path_through_wall_is_flagged(self) -> None:
        walls = self.record.walls
        mask = self.record.mask
        pair = None
        for y in range(self.record.height):
            for x in range(self.record.width - 1):
                if mask[y][x] and mask[y][x + 1] and walls[y][x][1]:
                    pair = [(x, y), (x + 1, y)]
                    break
            if pair:
                break
        self.assertIsNotNone(pair)
        result = self.evaluator.evaluate(self.record.id, pair)
        self.assertTrue(result.crosses_walls)
        self.assertFalse(result.is_valid_solution)

    def test_empty_path(self) -> None:
        result = self.evaluator.evaluate(self.record.id, [])
        self.assertFalse(result.connected)
        self.assertEqual(result.steps, 0)
        self.assertEqual(result.message, "Candidate path is empty.")

    def test_unknown_id_and_missing_metadata(self) -> None:
        with self.assertRaises(KeyError):
            self.evaluator.evaluate("missing", [])
        with self.assertRaises(FileNotFoundError):
            MazeEvaluator(Path(self.tmp.name) / "nope.json")

    def test_records_without_id_are_rejected(self) -> None:
        path = Path(self.tmp.name) / "broken.json"
        path.write_text(json.dumps([{"width": 1}]), encoding="utf-8")
        with self.assertRaises(ValueError):
            MazeEvaluator(path)


if __name__ == "__main__":
    unittest.main()
