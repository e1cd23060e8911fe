'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Plot helpers, rendered off-screen.

'''
import unittest

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from cubetrainer.cube import solved_grid
from cubetrainer.visualisation.net import net_rows, plot_net, sticker_quad, to_plot_coords
from tests.test_functions import make_scrambled, make_solved


class TestGeometry(unittest.TestCase):

    def test_sticker_quad_lies_on_its_face(self):
        quad = sticker_quad("U", 1, 1)
        self.assertEqual(quad.shape, (4, 3))
        self.assertTrue(np.allclose(quad[:, 1], 1.5))
        self.assertTrue(np.allclose(quad.mean(axis=0), [0, 1.5, 0]))

        quad = sticker_quad("F", 0, 2)
        self.assertTrue(np.allclose(quad[:, 2], 1.5))
        self.assertTrue(np.allclose(quad.mean(axis=0), [1, 1, 1.5]))

    def test_plot_coords_put_up_on_z(self):
        self.assertTrue(np.allclose(to_plot_coords(np.array([1.0, 2.0, 3.0])), [[1.0, -3.0, 2.0]]))

    def test_net_rows(self):
        rows = net_rows(solved_grid())
        self.assertEqual(len(rows), 9)
        self.assertTrue(all(len(r) == 12 for r in rows))
        self.assertEqual(sum(v is not None for r in rows for v in r), 54)
        self.assertIsNone(rows[0][0])


class TestPlots(unittest.TestCase):

    def tearDown(self):
        plt.close("all")

    def test_plot_net(self):
        ax = plot_net(make_scrambled(seed=1).grid)
        self.assertEqual(len(ax.patches), 54)
        self.assertEqual(len(ax.texts), 6)

    def test_plot_3d(self):
        fig = plt.figure()
        ax = fig.add_subplot(111, projection="3d")
        out = make_solved().plot_3d(ax=ax)
        self.assertIs(out, ax)
        self.assertEqual(len(ax.collections), 54)


if __name__ == "__main__":
    unittest.main()
