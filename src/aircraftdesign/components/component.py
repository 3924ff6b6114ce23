"""
Leaf component: one massified object placed in space.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from aircraftdesign.errors import ExportFailure
from aircraftdesign.objects import AbstractObject
from aircraftdesign.utils.validation import validate_non_negative

from .base import UNASSIGNED_ID, AbstractComponent

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False, repr=False)
class Component(AbstractComponent):
    """
    Defines an object placed at a location and orientation in space.

    Parameters
    ----------
    name : str
        Name of the component
    subcomponents : AbstractObject
        Mass and geometry of this component
    id : int
        Component number identifier. Default -1 (unassigned)
    O : array-like (3,) | None
        Origin of the object coordinate system. Default zeros.
    Oaxis : array-like (3, 3) | None
        Orientation of the coordinate system. Default identity.
    description : str
        Useful description
    comments : str
        Free-form notes
    vendor : str
        Vendor information
    cost : float
        Cost of one unit. Default 0.

    Examples
    --------
    >>> spar = Component(
    ...     "spar",
    ...     ObjectVol(ShapeCyl(0.01, 1.2), 1600.0),
    ...     description="CF tube",
    ...     vendor="Rock West",
    ...     cost=45.0,
    ... )
    >>> spar.mass()
    0.603...
    """

    name: str
    subcomponents: AbstractObject
    id: int = UNASSIGNED_ID
    O: NDArray[np.float64] | None = None
    Oaxis: NDArray[np.float64] | None = None
    description: str = ""
    comments: str = ""
    vendor: str = ""
    cost: float = 0.0

    def __post_init__(self):
        if not isinstance(self.subcomponents, AbstractObject):
            raise TypeError(
                f"Component '{self.name}' needs an object, got "
                f"{type(self.subcomponents).__name__}"
            )
        object.__setattr__(self, "cost", validate_non_negative(self.cost, "cost"))
        self._init_frame()
        logger.debug("Created component '%s'", self.name)

    @property
    def object(self) -> AbstractObject:
        return self.subcomponents

    def children(self) -> tuple[AbstractComponent, ...]:
        return ()

    def mass(self) -> float:
        return self.subcomponents.mass()

    def cg(self) -> NDArray[np.float64]:
        return np.asarray(self.subcomponents.cg(), dtype=np.float64)

    def mass_units(self) -> str:
        return self.subcomponents.mass_units()

    def cg_units(self) -> str:
        return self.subcomponents.cg_units()

    def _export(self, prefix, O, Oaxis, options) -> list[str]:
        filename = f"{prefix}_{self.name}" if prefix else self.name
        try:
            return [self.subcomponents.shape.export(filename, O, Oaxis, options)]
        except ExportFailure as exc:
            raise ExportFailure(str(exc), component=self.name, prefix=prefix) from exc

    def __len__(self) -> int:
        return 1
