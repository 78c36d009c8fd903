"""
Tests for move directions: token parsing, the direction transforms and legal move detection.
"""

from unittest import TestCase, main

import numpy as np

from web2048.core.gamemove import Direction, legal_directions, shift


class TestDirection(TestCase):
    def test_parse_tokens(self):
        self.assertIs(Direction.parse('up'), Direction.UP)
        self.assertIs(Direction.parse(' Left '), Direction.LEFT)
        self.assertIs(Direction.parse(Direction.DOWN), Direction.DOWN)

    def test_parse_unknown_token(self):
        with self.assertRaises(ValueError):
            Direction.parse('sideways')


class TestShift(TestCase):
    """Every direction is a left slide between a pre- and a post-transform."""

    board = np.array([[2, 0, 2, 0], [0, 4, 0, 4], [2, 0, 0, 0], [2, 0, 0, 8]])

    def test_left(self):
        result, gained, changed = shift(self.board, Direction.LEFT)
        expected = np.array([[4, 0, 0, 0], [8, 0, 0, 0], [2, 0, 0, 0], [2, 8, 0, 0]])
        np.testing.assert_array_equal(result, expected)
        self.assertEqual(gained, 12)
        self.assertTrue(changed)

    def test_right(self):
        result, gained, _ = shift(self.board, Direction.RIGHT)
        expected = np.array([[0, 0, 0, 4], [0, 0, 0, 8], [0, 0, 0, 2], [0, 0, 2, 8]])
        np.testing.assert_array_equal(result, expected)
        self.assertEqual(gained, 12)

    def test_up(self):
        result, gained, _ = shift(self.board, Direction.UP)
        expected = np.array([[4, 4, 2, 4], [2, 0, 0, 8], [0, 0, 0, 0], [0, 0, 0, 0]])
        np.testing.assert_array_equal(result, expected)
        self.assertEqual(gained, 4)

    def test_down(self):
        result, gained, _ = shift(self.board, Direction.DOWN)
        expected = np.array([[0, 0, 0, 0], [0, 0, 0, 0], [2, 0, 0, 4], [4, 4, 2, 8]])
        np.testing.assert_array_equal(result, expected)
        self.assertEqual(gained, 4)

    def test_input_not_modified(self):
        original = self.board.copy()
        for direction in Direction:
            shift(self.board, direction)
        np.testing.assert_array_equal(self.board, original)

    def test_second_move_without_merges_is_idempotent(self):
        """Repeating a move that produced no equal neighbours changes nothing."""
        board = np.array([[0, 2, 0, 4], [8, 0, 8, 2], [0, 0, 0, 16], [32, 0, 0, 0]])
        once, _, changed = shift(board, Direction.LEFT)
        self.assertTrue(changed)
        twice, gained, changed = shift(once, Direction.LEFT)
        self.assertFalse(changed)
        self.assertEqual(gained, 0)
        np.testing.assert_array_equal(once, twice)

    def test_second_move_never_slides(self):
        """After a move there is no gap left, so repeating it can only change the board by merging."""
        rng = np.random.default_rng(7)
        for _ in range(50):
            board = rng.choice([0, 2, 4, 8, 16], size=(4, 4))
            for direction in Direction:
                once, _, _ = shift(board, direction)
                _, gained, changed = shift(once, direction)
                self.assertEqual(changed, gained > 0)


class TestLegalDirections(TestCase):
    def test_single_column(self):
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(legal_directions(board), [Direction.UP, Direction.DOWN, Direction.RIGHT])

    def test_terminal_board_has_none(self):
        board = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertEqual(legal_directions(board), [])

    def test_matches_shift(self):
        """A direction is legal exactly when shifting changes the board."""
        rng = np.random.default_rng(11)
        for _ in range(50):
            board = rng.choice([0, 2, 4, 8], size=(4, 4))
            expected = [direction for direction in Direction if shift(board, direction)[2]]
            self.assertEqual(legal_directions(board), expected)


if __name__ == '__main__':
    main()
