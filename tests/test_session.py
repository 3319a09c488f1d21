import copy
import random
import unittest

from tetris_piece import ActivePiece, COLS, KINDS, ROWS
from tetris_rng import UniformRandom
from tetris_session import GameSession

GREY = "#888888"


class Scripted:
    """Hands out the named kinds in order, repeating the last one."""
    def __init__(self, *names):
        self.names = list(names)

    def next_piece(self):
        if len(self.names) > 1:
            return KINDS[self.names.pop(0)]
        return KINDS[self.names[0]]


def fill_rows_except(board, rows, gap_cols):
    for y in rows:
        board[y] = [None if x in gap_cols else GREY for x in range(COLS)]


class SessionStartTests(unittest.TestCase):
    def test_fresh_session(self):
        s = GameSession(Scripted("O"))
        self.assertEqual((s.score, s.lines, s.drop_interval, s.game_over), (0, 0, 1000, False))
        self.assertEqual((s.piece.kind.name, s.piece.x, s.piece.y, s.piece.rotation), ("O", 4, -1, 0))
        self.assertTrue(all(c is None for row in s.board for c in row))


class MoveTests(unittest.TestCase):
    def test_move_both_ways(self):
        s = GameSession(Scripted("T"))
        x = s.piece.x
        self.assertTrue(s.move(-1))
        self.assertEqual(s.piece.x, x - 1)
        self.assertTrue(s.move(1))
        self.assertEqual(s.piece.x, x)

    def test_wall_blocks_without_locking(self):
        s = GameSession(Scripted("O"))
        for _ in range(4):
            self.assertTrue(s.move(-1))
        y = s.piece.y
        self.assertFalse(s.move(-1))
        self.assertEqual((s.piece.x, s.piece.y), (0, y))
        self.assertTrue(all(c is None for row in s.board for c in row))

    def test_other_directions_ignored(self):
        s = GameSession(Scripted("O"))
        self.assertFalse(s.move(0))
        self.assertFalse(s.move(2))
        self.assertEqual(s.piece.x, 4)


class RotateTests(unittest.TestCase):
    def test_rotate_in_open_space(self):
        s = GameSession(Scripted("T"))
        s.piece.y = 5
        x = s.piece.x
        self.assertTrue(s.rotate())
        self.assertEqual((s.piece.rotation, s.piece.x), (1, x))

    def test_full_cycle_returns_to_spawn_state(self):
        s = GameSession(Scripted("J"))
        s.piece.y = 5
        for _ in range(4):
            s.rotate()
        self.assertEqual(s.piece.rotation, 0)

    def test_kick_off_right_wall(self):
        s = GameSession(Scripted("I"))
        s.piece = ActivePiece(KINDS["I"], 1, 7, 5)
        self.assertTrue(s.rotate())
        self.assertEqual((s.piece.rotation, s.piece.x), (0, 6))

    def test_kick_off_left_wall(self):
        s = GameSession(Scripted("I"))
        # vertical I in column 0
        s.piece = ActivePiece(KINDS["I"], 1, -2, 5)
        self.assertTrue(s.rotate())
        self.assertEqual((s.piece.rotation, s.piece.x), (0, 0))

    def test_prefers_left_kick(self):
        s = GameSession(Scripted("T"))
        s.piece = ActivePiece(KINDS["T"], 0, 4, 5)
        # only the unkicked rotation needs this cell
        s.board[7][5] = GREY
        self.assertTrue(s.rotate())
        self.assertEqual((s.piece.rotation, s.piece.x), (1, 3))

    def test_rotation_fails_when_every_kick_collides(self):
        s = GameSession(Scripted("I"))
        s.piece = ActivePiece(KINDS["I"], 0, 3, 5)
        s.board[7] = [GREY] * COLS
        before = copy.deepcopy(s.piece)
        self.assertFalse(s.rotate())
        self.assertEqual(s.piece, before)

    def test_o_piece_rotation_is_identity(self):
        s = GameSession(Scripted("O"))
        self.assertTrue(s.rotate())
        self.assertEqual((s.piece.rotation, s.piece.x), (0, 4))


class StepTests(unittest.TestCase):
    def test_step_falls_one_row(self):
        s = GameSession(Scripted("T"))
        self.assertTrue(s.step())
        self.assertEqual(s.piece.y, 0)

    def test_step_locks_on_floor(self):
        s = GameSession(Scripted("O", "T"))
        s.piece.y = 18
        self.assertFalse(s.step())
        self.assertEqual(s.board[19][4], KINDS["O"].color)
        self.assertEqual(s.board[18][5], KINDS["O"].color)
        self.assertEqual((s.piece.kind.name, s.piece.y), ("T", -1))
        self.assertEqual(s.score, 0)


class HardDropTests(unittest.TestCase):
    def test_o_piece_on_empty_board(self):
        s = GameSession(Scripted("O"))
        self.assertEqual(s.hard_drop(), 19)
        color = KINDS["O"].color
        for y in (18, 19):
            for x in (4, 5):
                self.assertEqual(s.board[y][x], color)
        self.assertEqual(sum(1 for row in s.board for c in row if c), 4)
        self.assertEqual((s.score, s.lines), (0, 0))
        self.assertEqual((s.piece.x, s.piece.y), (4, -1))

    def test_two_line_clear_scores_100(self):
        s = GameSession(Scripted("O"))
        fill_rows_except(s.board, (18, 19), {4, 5})
        s.hard_drop()
        self.assertEqual((s.score, s.lines), (100, 2))
        self.assertTrue(all(c is None for row in s.board for c in row))

    def test_four_line_clear_scores_1200(self):
        s = GameSession(Scripted("I"))
        fill_rows_except(s.board, range(16, 20), {9})
        s.piece = ActivePiece(KINDS["I"], 1, 7, -1)
        s.hard_drop()
        self.assertEqual((s.score, s.lines), (1200, 4))

    def test_partial_rows_survive_clear(self):
        s = GameSession(Scripted("O"))
        fill_rows_except(s.board, (19,), {4, 5})
        fill_rows_except(s.board, (18,), {4, 5, 0})
        s.hard_drop()
        self.assertEqual((s.score, s.lines), (40, 1))
        self.assertIsNone(s.board[19][0])
        self.assertEqual(s.board[19][4], KINDS["O"].color)
        self.assertEqual(s.board[18], [None] * COLS)


class ClearLinesTests(unittest.TestCase):
    def test_no_full_rows(self):
        s = GameSession(Scripted("O"))
        s.score, s.lines = 140, 3
        fill_rows_except(s.board, (19,), {0})
        before = copy.deepcopy(s.board)
        self.assertEqual(s.clear_lines(), 0)
        self.assertEqual(s.board, before)
        self.assertEqual((s.score, s.lines, s.drop_interval), (140, 3, 1000))

    def test_speed_up_at_ten_lines(self):
        s = GameSession(Scripted("O"))
        s.lines = 8
        fill_rows_except(s.board, (18, 19), {4, 5})
        s.hard_drop()
        self.assertEqual((s.lines, s.drop_interval), (10, 900))

    def test_skipping_past_a_multiple_does_not_speed_up(self):
        s = GameSession(Scripted("O"))
        s.lines = 9
        fill_rows_except(s.board, (18, 19), {4, 5})
        s.hard_drop()
        self.assertEqual((s.lines, s.drop_interval), (11, 1000))

    def test_interval_floor(self):
        s = GameSession(Scripted("O"))
        s.lines, s.drop_interval = 18, 300
        fill_rows_except(s.board, (18, 19), {4, 5})
        s.hard_drop()
        self.assertEqual(s.drop_interval, 200)

        s.lines = 28
        fill_rows_except(s.board, (18, 19), {4, 5})
        s.hard_drop()
        self.assertEqual((s.lines, s.drop_interval), (30, 200))


class GameOverTests(unittest.TestCase):
    def test_blocked_spawn_ends_game_without_touching_board(self):
        s = GameSession(Scripted("O"))
        s.board[0][4] = GREY
        before = copy.deepcopy(s.board)
        s.spawn()
        self.assertTrue(s.game_over)
        self.assertEqual(s.board, before)

    def test_lock_into_full_column_ends_game(self):
        s = GameSession(Scripted("O"))
        for y in range(1, ROWS):
            s.board[y][4] = s.board[y][5] = GREY
        self.assertFalse(s.step())
        self.assertTrue(s.game_over)
        self.assertEqual(s.board[0][4], KINDS["O"].color)

    def test_terminal_session_rejects_everything(self):
        s = GameSession(Scripted("O"))
        s.board[0][4] = GREY
        s.spawn()
        board, piece = copy.deepcopy(s.board), copy.deepcopy(s.piece)
        self.assertFalse(s.move(-1))
        self.assertFalse(s.rotate())
        self.assertFalse(s.step())
        self.assertEqual(s.hard_drop(), 0)
        self.assertEqual(s.board, board)
        self.assertEqual(s.piece, piece)


class RandomPlayTests(unittest.TestCase):
    def test_piece_stays_inside_board(self):
        s = GameSession(UniformRandom(seed=7))
        rnd = random.Random(3)
        ops = [lambda: s.move(-1), lambda: s.move(1), s.rotate, s.step, s.step, s.hard_drop]
        intervals = [s.drop_interval]
        for _ in range(3000):
            if s.game_over:
                break
            rnd.choice(ops)()
            if not s.game_over:
                for x, y in s.piece_cells():
                    self.assertTrue(0 <= x < COLS)
                    self.assertLess(y, ROWS)
            intervals.append(s.drop_interval)
        self.assertEqual(intervals, sorted(intervals, reverse=True))
        self.assertTrue(all(len(row) == COLS for row in s.board))
        self.assertEqual(len(s.board), ROWS)


if __name__ == "__main__":
    unittest.main()
