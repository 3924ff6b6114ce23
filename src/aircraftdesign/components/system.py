"""
Multi-component system assembly.

A System owns an ordered list of subcomponents (leaves or other systems)
and places each one through its own local frame. This allows recursive
definition of systems holding other systems as subcomponents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from aircraftdesign.errors import ArityMismatch, UnitMismatch
from aircraftdesign.objects import DEFAULT_MASS_UNITS
from aircraftdesign.utils.orientation import compose_frames
from aircraftdesign.utils.validation import validate_matrix3, validate_vector3

from .base import UNASSIGNED_ID, AbstractComponent

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False, repr=False)
class System(AbstractComponent):
    """
    Defines a system made out of components.

    Parameters
    ----------
    name : str
        Name of the system
    subcomponents : sequence of AbstractComponent
        Components that make this system, in order. Each one is owned by
        this system only; use ``clone`` to place the same part twice.
    id : int
        System number identifier. Default -1 (unassigned)
    O, Oaxis :
        Origin and orientation of the system coordinate system
    subO : sequence of array-like (3,) | None
        Origin of each subcomponent in this system's frame. Default zeros.
    subOaxis : sequence of array-like (3, 3) | None
        Orientation of each subcomponent in this system's frame.
        Default identity.
    description, comments, vendor : str
        Free-text metadata

    Attributes
    ----------
    cost : float
        Sum of the subcomponent costs, computed once at construction

    Raises
    ------
    ArityMismatch
        If ``subO`` or ``subOaxis`` do not have one entry per subcomponent
    ValueError
        If the same component object appears twice in the tree

    Examples
    --------
    >>> rib = Component("rib", ObjectSurf(ShapeCuboid(0.2, 0.002, 0.03), 1.5), cost=4.0)
    >>> wing = System(
    ...     "wing",
    ...     [rib, rib.clone()],
    ...     subO=[[0, 0, 0], [0, 0.3, 0]],
    ... )
    >>> wing.cost
    8.0
    """

    name: str
    subcomponents: tuple[AbstractComponent, ...]
    id: int = UNASSIGNED_ID
    O: NDArray[np.float64] | None = None
    Oaxis: NDArray[np.float64] | None = None
    subO: tuple[NDArray[np.float64], ...] | None = None
    subOaxis: tuple[NDArray[np.float64], ...] | None = None
    description: str = ""
    comments: str = ""
    vendor: str = ""
    cost: float = field(init=False)

    def __post_init__(self):
        subcomponents = tuple(self.subcomponents)
        for sub in subcomponents:
            if not isinstance(sub, AbstractComponent):
                raise TypeError(
                    f"System '{self.name}' subcomponents must be components, got "
                    f"{type(sub).__name__}"
                )
        _check_exclusive(self.name, subcomponents)
        n = len(subcomponents)

        subO = [np.zeros(3)] * n if self.subO is None else list(self.subO)
        subOaxis = [np.eye(3)] * n if self.subOaxis is None else list(self.subOaxis)
        if len(subO) != n:
            raise ArityMismatch(
                f"System '{self.name}' has {n} subcomponents but {len(subO)} origins"
            )
        if len(subOaxis) != n:
            raise ArityMismatch(
                f"System '{self.name}' has {n} subcomponents but {len(subOaxis)} orientations"
            )

        object.__setattr__(self, "subcomponents", subcomponents)
        object.__setattr__(
            self, "subO", tuple(validate_vector3(o, f"subO[{i}]") for i, o in enumerate(subO))
        )
        object.__setattr__(
            self, "subOaxis",
            tuple(validate_matrix3(a, f"subOaxis[{i}]") for i, a in enumerate(subOaxis)),
        )
        object.__setattr__(self, "cost", sum(sub.cost for sub in subcomponents))
        self._init_frame()
        logger.debug("Created system '%s' with %d subcomponents", self.name, n)

    def children(self) -> tuple[AbstractComponent, ...]:
        return self.subcomponents

    def _cloned_fields(self) -> dict:
        return {"subcomponents": tuple(sub.clone() for sub in self.subcomponents)}

    # -------------------------------------------------------------------------
    # Mass properties
    # -------------------------------------------------------------------------

    def mass(self) -> float:
        return sum(sub.mass() for sub in self.subcomponents)

    def cg(self) -> NDArray[np.float64]:
        """
        Mass-weighted center of gravity of the subcomponents, expressed in
        this system's frame. A massless system returns the origin.
        """
        total = 0.0
        moment = np.zeros(3)
        for sub, o, axis in zip(self.subcomponents, self.subO, self.subOaxis):
            m = sub.mass()
            moment += m * (o + axis.T @ sub.cg())
            total += m
        if total == 0:
            if self.subcomponents:
                logger.warning("System '%s' has zero mass; cg set to origin", self.name)
            return np.zeros(3)
        return moment / total

    def mass_units(self) -> str:
        return _common_units(self, [sub.mass_units() for sub in self.subcomponents],
                             DEFAULT_MASS_UNITS, "mass")

    def cg_units(self) -> str:
        return _common_units(self, [sub.cg_units() for sub in self.subcomponents],
                             "m", "length")

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def _export(self, prefix, O, Oaxis, options) -> list[str]:
        base = f"{prefix}_{self.name}" if prefix else self.name
        names: list[str] = []
        for i, (sub, o, axis) in enumerate(zip(self.subcomponents, self.subO, self.subOaxis)):
            O_sub, Oaxis_sub = compose_frames(O, Oaxis, o, axis)
            names.extend(sub._export(f"{base}_{i}", O_sub, Oaxis_sub, options))
        return names

    def summary(self) -> str:
        """
        Get human-readable tree of the system.

        Returns
        -------
        str
            Multi-line summary with one indented line per component
        """
        lines = []
        for path, node in self.walk():
            indent = "  " * len(path)
            lines.append(f"{indent}[{'.'.join(map(str, path)) or '-'}] {node!r}")
        return "\n".join(lines)


def _check_exclusive(name: str, subcomponents: tuple[AbstractComponent, ...]) -> None:
    seen: set[int] = set()
    for sub in subcomponents:
        for _, node in sub.walk():
            if id(node) in seen:
                raise ValueError(
                    f"Component '{node.name}' appears more than once in system '{name}'. "
                    "Use clone() to reuse a component."
                )
            seen.add(id(node))


def _common_units(system: System, units: list[str], default: str, kind: str) -> str:
    distinct = set(units)
    if not distinct:
        return default
    if len(distinct) > 1:
        raise UnitMismatch(
            f"System '{system.name}' mixes {kind} units: {sorted(distinct)}"
        )
    return distinct.pop()
