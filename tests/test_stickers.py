'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: The strip table checked against 3D geometry: a clockwise turn is a
-90 degree rotation about the face's outward normal.

'''
import unittest

import numpy as np

from cubetrainer.stickers import (
    ADJACENT_STRIPS,
    CORNER_CUBIES,
    CUBIE_FACELETS,
    EDGE_CUBIES,
    FACE_COLORS,
    FACE_NORMALS,
    FACE_ORDER,
    facelet_position,
    sticker_neighbours,
)


def _rotate_cw(v, normal) -> tuple:
    v = np.array(v)
    n = np.array(normal)
    out = -np.cross(n, v) + n * np.dot(n, v)
    return tuple(int(x) for x in out)


def _locate(position, normal) -> tuple:
    face = next(f for f, n in FACE_NORMALS.items() if n == normal)
    for r in range(3):
        for c in range(3):
            if facelet_position(face, r, c) == position:
                return face, (r, c)
    raise AssertionError(f"no sticker at {position} on {face}")


class TestStripTable(unittest.TestCase):

    def test_every_face_has_four_strips_of_three(self):
        for face in FACE_ORDER:
            strips = ADJACENT_STRIPS[face]
            self.assertEqual(len(strips), 4)
            neighbours = {f for f, _ in strips}
            self.assertEqual(len(neighbours), 4)
            self.assertNotIn(face, neighbours)
            for _, cells in strips:
                self.assertEqual(len(cells), 3)

    def test_strip_cells_lie_in_the_turning_layer(self):
        for face in FACE_ORDER:
            normal = np.array(FACE_NORMALS[face])
            for nb, cells in ADJACENT_STRIPS[face]:
                for r, c in cells:
                    self.assertEqual(int(np.dot(normal, facelet_position(nb, r, c))), 1, (face, nb, r, c))

    def test_strips_follow_clockwise_rotation(self):
        for face in FACE_ORDER:
            normal = FACE_NORMALS[face]
            strips = ADJACENT_STRIPS[face]
            for k, (nb, cells) in enumerate(strips):
                dest_face, dest_cells = strips[(k + 1) % 4]
                for i, (r, c) in enumerate(cells):
                    pos = _rotate_cw(facelet_position(nb, r, c), normal)
                    sticker_normal = _rotate_cw(FACE_NORMALS[nb], normal)
                    landed = _locate(pos, sticker_normal)
                    self.assertEqual(landed, (dest_face, dest_cells[i]), f"{face}: {nb}{(r, c)}")

    def test_face_grid_rotation_matches_geometry(self):
        # clockwise: output (i, j) comes from input (2-j, i), so input (r, c) lands on (c, 2-r)
        for face in FACE_ORDER:
            normal = FACE_NORMALS[face]
            for r in range(3):
                for c in range(3):
                    pos = _rotate_cw(facelet_position(face, r, c), normal)
                    self.assertEqual(_locate(pos, normal), (face, (c, 2 - r)))


class TestCubies(unittest.TestCase):

    def test_piece_counts(self):
        self.assertEqual(len(CUBIE_FACELETS), 26)
        self.assertEqual(len(EDGE_CUBIES), 12)
        self.assertEqual(len(CORNER_CUBIES), 8)

    def test_neighbours(self):
        self.assertEqual(sticker_neighbours("U", 1, 1), [])
        self.assertEqual(sticker_neighbours("U", 2, 1), [("F", 0, 1)])
        self.assertEqual(sticker_neighbours("U", 0, 1), [("B", 0, 1)])
        self.assertEqual(sticker_neighbours("F", 1, 2), [("R", 1, 0)])
        self.assertEqual(sorted(sticker_neighbours("U", 0, 0)), [("B", 0, 2), ("L", 0, 0)])
        self.assertEqual(sorted(sticker_neighbours("D", 0, 0)), [("F", 2, 0), ("L", 2, 2)])

    def test_solved_color_mapping(self):
        self.assertEqual(FACE_COLORS, {"U": "W", "D": "Y", "F": "G", "B": "B", "L": "O", "R": "R"})


if __name__ == "__main__":
    unittest.main()
