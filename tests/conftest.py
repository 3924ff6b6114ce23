import os
import sys

import numpy as np
import pytest

# Get the path to the project root (one level up from 'tests')
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
src_path = os.path.join(project_root, 'src')

# Add 'src' to sys.path
sys.path.insert(0, src_path)

from aircraftdesign import (  # noqa: E402
    Component,
    ObjectPoint,
    ObjectVol,
    ShapeCuboid,
    ShapePoint,
    System,
)


@pytest.fixture
def cuboid():
    """2 x 3 x 4 m cuboid."""
    return ShapeCuboid(2.0, 3.0, 4.0)


@pytest.fixture
def unit_box_leaf():
    """1 m cube of water with a unit cost."""
    return Component(
        "box",
        ObjectVol(ShapeCuboid(1.0, 1.0, 1.0), 1000.0),
        description="unit cube",
        vendor="ACME",
        cost=1.0,
    )


def make_leaf(name, cost=0.0, mass=1.0, **kwargs):
    return Component(name, ObjectPoint(ShapePoint(), mass), cost=cost, **kwargs)


@pytest.fixture
def leaf_factory():
    """Factory for point-mass leaves: leaf_factory(name, cost=0, mass=1, **kwargs)."""
    return make_leaf


@pytest.fixture
def wing():
    """System 'wing' with two distinct leaves costing 100 and 250."""
    child1 = make_leaf("child1", cost=100.0, mass=2.0)
    child2 = make_leaf("child2", cost=250.0, mass=6.0)
    return System(
        "wing",
        [child1, child2],
        subO=[np.zeros(3), np.array([4.0, 0.0, 0.0])],
    )
