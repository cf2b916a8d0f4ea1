"""
Rope and cloth playground: point masses joined by inextensible links.

    from ropesim import World, TopologyEditor

    world = World()
    editor = TopologyEditor(world)
    editor.place_or_toggle((100, 100))
    world.resume()
    world.tick()
"""
from .Vec2 import Vec2
from .MassPoint import MassPoint
from .PointStore import PointStore
from .DistanceConstraint import DistanceConstraint
from .ConstraintStore import ConstraintStore
from .config import SimulationConfig
from .editor import LinkState, Tool, TopologyEditor
from .errors import DegenerateConstraint, DuplicateConstraint, PresetError, RopeSimError, StaleHandle
from .solvers import RelaxationSolver, VerletIntegrator
from .world import World

__all__ = [
    "Vec2",
    "MassPoint",
    "PointStore",
    "DistanceConstraint",
    "ConstraintStore",
    "SimulationConfig",
    "LinkState",
    "Tool",
    "TopologyEditor",
    "DegenerateConstraint",
    "DuplicateConstraint",
    "PresetError",
    "RopeSimError",
    "StaleHandle",
    "RelaxationSolver",
    "VerletIntegrator",
    "World",
]
