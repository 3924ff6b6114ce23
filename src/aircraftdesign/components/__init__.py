"""
aircraftdesign component tree.

Leaves wrap a massified object; systems own ordered subcomponents placed
through per-child frames.

Example
-------
>>> from aircraftdesign.components import Component, System
>>> fuselage = System("fuselage", [boom, pod], subO=[[0, 0, 0], [-0.4, 0, 0]])
>>> fuselage.cost
"""

from .base import UNASSIGNED_ID, AbstractComponent, clone
from .component import Component
from .system import System

__all__ = [
    "AbstractComponent",
    "Component",
    "System",
    "clone",
    "UNASSIGNED_ID",
]
