"""Example: the raw engine on a repeating ramp, one figure per shape and color."""

import numpy as np

import pulsar_plots as pp

values = np.tile(np.linspace(0.1, 0.7, 7), 5)[:32]

for shape, color in zip(pp.Shape, pp.PULSE_COLORS[1:]):
    pp.core(
        values,
        shape=shape,
        color=color,
        style=pp.AlphaSize(),
        row_count=7,
        padding=9,
        figsize=(3.0, 3.0),
        filename=f"core-{shape.value}.png",
    )
