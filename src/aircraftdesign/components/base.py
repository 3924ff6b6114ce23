"""
Base component abstraction for aircraft design trees.

A design is a tree of components. Leaves (:class:`Component`) wrap one
massified object; assemblies (:class:`System`) own an ordered list of
subcomponents, each placed through its own local frame. Every node is an
immutable value: "editing" a node means cloning it with new values.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import replace

import numpy as np
from numpy.typing import NDArray

from aircraftdesign.utils.validation import validate_matrix3, validate_vector3

logger = logging.getLogger(__name__)

UNASSIGNED_ID = -1
"""Identifier of components that were not given one."""


class AbstractComponent(ABC):
    """
    Base class for components of a design tree.

    Implementations are frozen dataclasses carrying the fields

    * ``name`` : name of this component
    * ``subcomponents`` : what makes this component (an object or children)
    * ``id`` : component number identifier
    * ``O`` : origin of the component coordinate system
    * ``Oaxis`` : orientation of the coordinate system (rows are axes)
    * ``description``, ``comments``, ``vendor`` : free-text metadata
    * ``cost`` : cost of one unit of this component

    Notes
    -----
    ``O`` and ``Oaxis`` place the component when it is the root of an
    export or report. Inside a :class:`System` the placement of each child
    is given by the system's per-child frames instead.
    """

    name: str
    id: int
    O: NDArray[np.float64]
    Oaxis: NDArray[np.float64]
    description: str
    comments: str
    vendor: str
    cost: float

    def _init_frame(self) -> None:
        O = np.zeros(3) if self.O is None else self.O
        Oaxis = np.eye(3) if self.Oaxis is None else self.Oaxis
        object.__setattr__(self, "O", validate_vector3(O, "O"))
        object.__setattr__(self, "Oaxis", validate_matrix3(Oaxis, "Oaxis"))

    # -------------------------------------------------------------------------
    # Tree interface
    # -------------------------------------------------------------------------

    @abstractmethod
    def children(self) -> tuple[AbstractComponent, ...]:
        """Direct child components (empty for a leaf)."""

    @abstractmethod
    def mass(self) -> float:
        """Total mass of this component."""

    @abstractmethod
    def cg(self) -> NDArray[np.float64]:
        """Center of gravity in this component's local frame."""

    @abstractmethod
    def mass_units(self) -> str:
        pass

    @abstractmethod
    def cg_units(self) -> str:
        pass

    @abstractmethod
    def _export(
        self,
        prefix: str,
        O: NDArray[np.float64],
        Oaxis: NDArray[np.float64],
        options,
    ) -> list[str]:
        """Write placed geometry of every leaf and return the file names."""

    def _cloned_fields(self) -> dict:
        return {}

    def walk(self, path: tuple[int, ...] = ()) -> Iterator[tuple[tuple[int, ...], AbstractComponent]]:
        """
        Depth-first pre-order traversal.

        Yields
        ------
        tuple[tuple[int, ...], AbstractComponent]
            Child-index path from this node, and the node
        """
        yield path, self
        for i, child in enumerate(self.children()):
            yield from child.walk(path + (i,))

    # -------------------------------------------------------------------------
    # Cloning
    # -------------------------------------------------------------------------

    def clone(self, O=None, Oaxis=None) -> AbstractComponent:
        """
        Return a copy of this component in a new location and orientation.

        Every other field (identifier, metadata, cost and subcomponents) is
        copied verbatim. Child components are cloned too, so the copy never
        shares nodes with the original.

        Parameters
        ----------
        O : array-like (3,) | None
            New origin. Keeps the current one if None.
        Oaxis : array-like (3, 3) | None
            New orientation. Keeps the current one if None.

        Notes
        -----
        The new frame takes effect where the clone is the root of an export.
        Inside a System the child is placed by that system's ``subO`` and
        ``subOaxis`` only.

        Examples
        --------
        >>> moved = wing.clone([0, 2.5, 0])
        >>> rolled = wing.clone(Oaxis=rotation_matrix(10, 0, 0))
        >>> also_rolled = wing.clone(rotation_matrix(10, 0, 0))
        """
        # a single 3x3 positional argument is an orientation
        if O is not None and Oaxis is None and np.ndim(O) == 2:
            O, Oaxis = None, O
        changes = {
            "O": self.O if O is None else O,
            "Oaxis": self.Oaxis if Oaxis is None else Oaxis,
        }
        changes.update(self._cloned_fields())
        return replace(self, **changes)

    # -------------------------------------------------------------------------
    # Reports and export
    # -------------------------------------------------------------------------

    def get_report(self, format: str = "simple"):
        """
        Report rows for this component. See :func:`aircraftdesign.report.get_report`.
        """
        from aircraftdesign.report import get_report
        return get_report(self, format)

    def save_shape(self, filename: str, O=None, Oaxis=None, options=None) -> str:
        """
        Export placed geometry. See :func:`aircraftdesign.export.save_shape`.
        """
        from aircraftdesign.export import save_shape
        return save_shape(self, filename, O=O, Oaxis=Oaxis, options=options)

    def __len__(self) -> int:
        """Number of items that make this component."""
        return len(self.children())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name='{self.name}', id={self.id}, "
            f"cost={self.cost})"
        )


def clone(cmp: AbstractComponent, O=None, Oaxis=None) -> AbstractComponent:
    """Functional form of :meth:`AbstractComponent.clone`."""
    return cmp.clone(O, Oaxis)
