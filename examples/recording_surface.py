"""Example: headless layout, printing the draw calls instead of plotting."""

import logging

import pulsar_plots as pp

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

surface = pp.RecordingSurface()
pp.render(
    surface,
    [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 1.0],
    pp.Shape.CIRCLE,
    "black",
    pp.Size(overshoot=1.2),
    row_count=7,
    row_start=2,
    padding=4,
    canvas_size=(120, 280),
)

for command in surface.commands:
    print(command)

try:
    pp.render(surface, [0.5], row_count=7, row_start=7, canvas_size=(100, 100))
except pp.InvalidLayout as exc:
    print(f"refused: {exc}")
