import unittest

from arena_piece import Player, create_piece
from arena_board import (create_matrix, clear, collide, merge, detect_full_rows,
                         remove_rows, score_for_rows)


class CreateTests(unittest.TestCase):
    def test_dimensions(self):
        m = create_matrix(10, 20)
        self.assertEqual(len(m), 20)
        self.assertTrue(all(r == [0] * 10 for r in m))

    def test_rows_are_independent(self):
        m = create_matrix(3, 3)
        m[0][0] = 1
        self.assertEqual(m[1][0], 0)

    def test_clear_zeroes_in_place(self):
        m = create_matrix(4, 4)
        m[2][:] = [1, 2, 3, 4]
        row = m[2]
        clear(m)
        self.assertTrue(all(v == 0 for r in m for v in r))
        self.assertIs(m[2], row)


class CollideTests(unittest.TestCase):
    def setUp(self):
        self.board = create_matrix(10, 20)

    def test_free_space(self):
        self.assertFalse(collide(self.board, Player(create_piece("T"), 3, 5)))

    def test_occupied_cell(self):
        self.board[6][4] = 3
        self.assertTrue(collide(self.board, Player(create_piece("T"), 3, 5)))

    def test_empty_shape_cells_ignore_board(self):
        # T row 0 is empty, so a locked cell under it does not matter
        self.board[5][3] = 3
        self.assertFalse(collide(self.board, Player(create_piece("T"), 3, 5)))

    def test_left_wall(self):
        self.assertFalse(collide(self.board, Player(create_piece("O"), 0, 0)))
        self.assertTrue(collide(self.board, Player(create_piece("O"), -1, 0)))

    def test_right_wall(self):
        self.assertFalse(collide(self.board, Player(create_piece("O"), 8, 0)))
        self.assertTrue(collide(self.board, Player(create_piece("O"), 9, 0)))

    def test_floor(self):
        self.assertFalse(collide(self.board, Player(create_piece("O"), 4, 18)))
        self.assertTrue(collide(self.board, Player(create_piece("O"), 4, 19)))

    def test_above_top(self):
        self.assertTrue(collide(self.board, Player(create_piece("O"), 4, -1)))

    def test_empty_column_may_hang_off_the_edge(self):
        # I piece only fills column 1
        self.assertFalse(collide(self.board, Player(create_piece("I"), -1, 0)))
        self.assertTrue(collide(self.board, Player(create_piece("I"), -2, 0)))


class MergeTests(unittest.TestCase):
    def test_writes_nonzero_cells_only(self):
        board = create_matrix(10, 20)
        board[18][3] = 7
        merge(board, Player(create_piece("T"), 3, 17))
        self.assertEqual(board[18][3:6], [1, 1, 1])
        self.assertEqual(board[19][3:6], [0, 1, 0])
        self.assertEqual(board[17], [0] * 10)


class FullRowTests(unittest.TestCase):
    def test_two_bottom_rows(self):
        board = create_matrix(10, 20)
        board[19] = [1] * 10
        board[18] = [2] * 10
        self.assertEqual(detect_full_rows(board), [18, 19])

    def test_ascending_and_skips_partial(self):
        board = create_matrix(4, 6)
        board[5] = [1, 1, 1, 1]
        board[4] = [1, 0, 1, 1]
        board[2] = [3, 3, 3, 3]
        self.assertEqual(detect_full_rows(board), [2, 5])

    def test_top_row_never_reported(self):
        board = create_matrix(10, 20)
        board[0] = [4] * 10
        self.assertEqual(detect_full_rows(board), [])

    def test_empty_board(self):
        self.assertEqual(detect_full_rows(create_matrix(10, 20)), [])


class RemoveRowsTests(unittest.TestCase):
    def make_board(self):
        return [[1, 0, 0],
                [2, 2, 2],
                [0, 3, 0],
                [4, 4, 4],
                [0, 0, 5]]

    def test_removes_and_shifts_down(self):
        board = self.make_board()
        remove_rows(board, [1, 3])
        self.assertEqual(board, [[0, 0, 0],
                                 [0, 0, 0],
                                 [1, 0, 0],
                                 [0, 3, 0],
                                 [0, 0, 5]])

    def test_caller_order_does_not_matter(self):
        board = self.make_board()
        remove_rows(board, [3, 1])
        expected = self.make_board()
        remove_rows(expected, [1, 3])
        self.assertEqual(board, expected)

    def test_descending_one_by_one_would_differ(self):
        ascending = self.make_board()
        remove_rows(ascending, [1, 3])
        descending = self.make_board()
        remove_rows(descending, [3])
        remove_rows(descending, [1])
        self.assertNotEqual(ascending, descending)

    def test_height_is_preserved(self):
        board = self.make_board()
        remove_rows(board, [1, 3])
        self.assertEqual(len(board), 5)


class ScoreTests(unittest.TestCase):
    def test_doubling_multiplier(self):
        self.assertEqual([score_for_rows(n) for n in range(5)], [0, 10, 30, 70, 150])


if __name__ == "__main__":
    unittest.main()
