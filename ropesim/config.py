"""
Simulation tunables.

Units follow the display: positions in pixels, time in milliseconds.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class SimulationConfig:
    # downward acceleration in px/ms^2 (+y is down on screen)
    gravity: float = 0.0008
    # relaxation sweeps per step; fewer passes give visibly stretchy links
    relaxation_passes: int = 500
    # frame gaps longer than this (tab suspend, debugger) are clamped
    max_dt: float = 50.0
    point_radius: float = 6.0
    # seed for the solver's per-sweep permutation; None draws fresh entropy
    seed: Optional[int] = None
