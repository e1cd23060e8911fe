'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr:

'''
import unittest

from cubetrainer.notation import (
    ALL_MOVES,
    SCRAMBLE_MOVES,
    InvalidMoveToken,
    MoveToken,
    describe_move,
    invert_move,
    invert_sequence,
    is_sequence_literal,
    parse_move,
    split_sequence,
)


class TestGrammar(unittest.TestCase):

    def test_alphabets(self):
        self.assertEqual(len(ALL_MOVES), 27)
        self.assertEqual(len(SCRAMBLE_MOVES), 12)
        self.assertEqual(set(SCRAMBLE_MOVES),
                         {"U", "U'", "D", "D'", "F", "F'", "B", "B'", "L", "L'", "R", "R'"})

    def test_parse_valid(self):
        for tok in ALL_MOVES:
            move = parse_move(tok)
            self.assertEqual(str(move), tok)
        self.assertEqual(parse_move("R'"), MoveToken("R", "'"))
        self.assertEqual(parse_move("M2"), MoveToken("M", "2"))

    def test_parse_invalid(self):
        for bad in ["", "X", "r", "R3", "R''", "RU", "2R", "'", "U2'", None, 3]:
            with self.assertRaises(InvalidMoveToken):
                parse_move(bad)

    def test_invalid_token_names_the_token(self):
        with self.assertRaises(InvalidMoveToken) as ctx:
            parse_move("Q")
        self.assertEqual(ctx.exception.token, "Q")
        self.assertIn("'Q'", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ValueError)

    def test_invert_move(self):
        self.assertEqual(invert_move("R"), "R'")
        self.assertEqual(invert_move("R'"), "R")
        self.assertEqual(invert_move("R2"), "R2")
        self.assertEqual(invert_move("M"), "M'")
        for tok in ALL_MOVES:
            self.assertEqual(invert_move(invert_move(tok)), tok)

    def test_invert_sequence(self):
        self.assertEqual(invert_sequence(["R", "U", "R'", "U2"]), ["U2", "R", "U'", "R'"])
        self.assertEqual(invert_sequence([]), [])

    def test_sequence_literal(self):
        self.assertTrue(is_sequence_literal("R U"))
        self.assertTrue(is_sequence_literal("R\tU"))
        self.assertFalse(is_sequence_literal("R"))
        self.assertFalse(is_sequence_literal(" R' "))
        self.assertEqual(split_sequence("R  U'\nF2"), ["R", "U'", "F2"])
        with self.assertRaises(InvalidMoveToken):
            split_sequence("R U X")


class TestExpansion(unittest.TestCase):

    def test_face_turns(self):
        self.assertEqual(parse_move("R").face_turns(), [("R", True)])
        self.assertEqual(parse_move("R'").face_turns(), [("R", False)])
        self.assertEqual(parse_move("R2").face_turns(), [("R", True), ("R", True)])

    def test_slice_turns(self):
        self.assertEqual(parse_move("M").face_turns(), [("R", True), ("L", False)])
        self.assertEqual(parse_move("M'").face_turns(), [("R", False), ("L", True)])
        self.assertEqual(parse_move("E").face_turns(), [("U", True), ("D", False)])
        self.assertEqual(parse_move("S'").face_turns(), [("F", False), ("B", True)])
        self.assertEqual(parse_move("S2").face_turns(), [("F", True), ("B", False)] * 2)

    def test_describe(self):
        self.assertEqual(describe_move("R'"), "Right face counter-clockwise")
        self.assertEqual(describe_move("U"), "Up face clockwise")
        self.assertEqual(describe_move("M2"), "Middle slice half turn")


if __name__ == "__main__":
    unittest.main()
