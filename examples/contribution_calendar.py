"""Example: a year of random contributions as a squircle calendar."""

import pulsar_plots as pp

contributions = pp.sample_contributions(days=365, seed=42)

pp.chart(
    contributions,
    shape="squircle",
    color=pp.COLORS["green"],
    style=pp.AlphaSize(pp.Alpha(max=0.6), pp.Size(overshoot=1.8)),
    padding=2,
    filename="contribution-calendar.svg",
)
