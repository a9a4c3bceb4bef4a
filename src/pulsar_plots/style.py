"""Translate theme.py constants into matplotlib rcParams."""

import matplotlib.pyplot as plt

from .theme import COLORS, LAYOUT

# matplotlib rcParams dict, applied by charts.figure()
STYLE: dict = {
    # Figure
    "figure.figsize": LAYOUT["figsize"],
    "figure.dpi": LAYOUT["dpi"],
    "figure.facecolor": COLORS["bg"],
    "figure.edgecolor": "none",
    "savefig.dpi": LAYOUT["dpi"],
    "savefig.facecolor": COLORS["bg"],
    "savefig.edgecolor": "none",
    "savefig.pad_inches": 0,

    # Axes: the pulse canvas has no chrome
    "axes.facecolor": COLORS["bg"],
    "axes.edgecolor": "none",
    "axes.grid": False,

    # Patches: filled, never outlined
    "patch.linewidth": 0,
    "patch.antialiased": True,
}


def apply() -> None:
    """Apply the pulsar style to matplotlib globally."""
    plt.rcParams.update(STYLE)
