"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Geometry and matplotlib helpers for drawing a sticker grid, either as
the unfolded 2D net or as 3D squares.

"""
from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from cubetrainer.stickers import (
    COLOR_HEX,
    COLOR_ORDER,
    FACE_INDEX,
    FACE_NAMES,
    FACE_NORMALS,
    FACE_ORDER,
    facelet_position,
)

# face -> (row, col) of its 3x3 block in the unfolded net
NET_LAYOUT: Dict[str, Tuple[int, int]] = {
    "U": (0, 1),
    "L": (1, 0),
    "F": (1, 1),
    "R": (1, 2),
    "B": (1, 3),
    "D": (2, 1),
}


def _in_plane_axes(face: str) -> Tuple[np.ndarray, np.ndarray]:
    """
    Unit vectors along increasing column and increasing row of ``face``,
    derived from the facelet positions so they can never disagree with them.
    """
    origin = np.array(facelet_position(face, 0, 0))
    along_col = np.array(facelet_position(face, 0, 1)) - origin
    along_row = np.array(facelet_position(face, 1, 0)) - origin
    return along_col, along_row


def sticker_quad(face: str, row: int, col: int, size: float = 0.92) -> np.ndarray:
    """
    The 4x3 array of corners of sticker ``face[row][col]`` in cube
    coordinates (+x = R, +y = U, +z = F), cube spanning [-1.5, 1.5].
    """
    center = np.array(facelet_position(face, row, col), dtype=float)
    center += 0.5 * np.array(FACE_NORMALS[face], dtype=float)
    du, dv = _in_plane_axes(face)
    h = size / 2.0
    return np.array([
        center - h * du - h * dv,
        center + h * du - h * dv,
        center + h * du + h * dv,
        center - h * du + h * dv,
    ])


def to_plot_coords(points: np.ndarray) -> np.ndarray:
    """Cube coordinates (y up) -> matplotlib 3D coordinates (z up, front toward -y)."""
    points = np.atleast_2d(points)
    return np.stack([points[:, 0], -points[:, 2], points[:, 1]], axis=1)


def plot_net(grid: np.ndarray, ax: plt.Axes | None = None, show_labels: bool = True) -> plt.Axes:
    """
    Draw the (6, 3, 3) color-index grid as the unfolded net.

    Args:
        grid: Color indices in FACE_ORDER x row x col.
        ax: Optional axes to draw on; a new figure is created if None.
        show_labels: Write the face name above each block.

    Returns:
        The axes drawn on.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))

    for face, (block_row, block_col) in NET_LAYOUT.items():
        f = FACE_INDEX[face]
        for r in range(3):
            for c in range(3):
                x = block_col * 3 + c
                y = -(block_row * 3 + r)
                color = COLOR_HEX[COLOR_ORDER[int(grid[f, r, c])]]
                ax.add_patch(Rectangle((x, y - 1), 1, 1, facecolor=color, edgecolor="k"))
        if show_labels:
            ax.text(block_col * 3 + 1.5, -block_row * 3 + 0.2, FACE_NAMES[face],
                    ha="center", va="bottom", fontsize=8)

    ax.set_xlim(-0.5, 12.5)
    ax.set_ylim(-9.5, 1.0)
    ax.set_aspect("equal")
    ax.set_axis_off()
    return ax


def net_rows(grid: np.ndarray) -> List[List[int | None]]:
    """Lay the grid out as a 9x12 table of color indices (None where the net is empty)."""
    rows: List[List[int | None]] = [[None] * 12 for _ in range(9)]
    for face in FACE_ORDER:
        block_row, block_col = NET_LAYOUT[face]
        f = FACE_INDEX[face]
        for r in range(3):
            for c in range(3):
                rows[block_row * 3 + r][block_col * 3 + c] = int(grid[f, r, c])
    return rows
