from .solver import solver
from .verlet import VerletIntegrator
from .relaxation import RelaxationSolver

__all__ = [
    "solver",
    "VerletIntegrator",
    "RelaxationSolver",
]
