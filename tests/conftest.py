import pytest

from ropesim.config import SimulationConfig
from ropesim.editor import TopologyEditor
from ropesim.world import World


class FakeClock:
    def __init__(self, now=0.0):
        self.now = float(now)

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def world(clock):
    return World(SimulationConfig(seed=1234), clock=clock)


@pytest.fixture
def fast_world(clock):
    # few passes; for long runs where only boundedness matters
    return World(SimulationConfig(seed=99, relaxation_passes=5), clock=clock)


@pytest.fixture
def editor(world):
    return TopologyEditor(world)


def distance(world, a, b):
    return world.points.get(a).pos.distance_to(world.points.get(b).pos)
