"""
Geometric primitives.

Shapes are immutable values describing only geometry: a few defining
dimensions plus the label of their length unit. Each variant supplies
closed-form volume, area and centroid, and knows how to build a triangle
mesh of itself for export.

All centroids are given in the shape's local frame:

- Cuboid: corner at the origin, edges along x1, x2, x3
- Cylinder: base centred at the origin, axis along x3
- Sphere and Point: centred at the origin
"""
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np
import trimesh
from numpy.typing import NDArray

from aircraftdesign.config import MESH_FILE_TYPES, POINT_FILE_TYPES, ExportOptions
from aircraftdesign.errors import ExportFailure
from aircraftdesign.utils.orientation import IDENTITY, ORIGIN, homogeneous_transform
from aircraftdesign.utils.validation import validate_non_negative

logger = logging.getLogger(__name__)

UNIT_KINDS = ("length", "area", "volume")


class Shape(ABC):
    """
    Base class for geometric primitives.

    Implementations are frozen dataclasses with a ``units`` field holding
    the label of their length dimensions, and must provide
    :meth:`volume`, :meth:`area`, :meth:`centroid` and :meth:`_mesh`.
    """

    units: str

    @abstractmethod
    def volume(self) -> float:
        """Volume enclosed by the shape [units^3]."""

    @abstractmethod
    def area(self) -> float:
        """Surface area of the shape [units^2]."""

    @abstractmethod
    def centroid(self) -> tuple[float, float, float]:
        """Coordinates (x1, x2, x3) of the centroid in the local frame."""

    @abstractmethod
    def _mesh(self, options: ExportOptions) -> trimesh.Trimesh:
        """Triangle mesh of the shape in its local frame."""

    def export(
        self,
        filename: str,
        O: NDArray[np.float64] = ORIGIN,
        Oaxis: NDArray[np.float64] = IDENTITY,
        options: ExportOptions | None = None,
    ) -> str:
        """
        Write the shape placed at frame ``(O, Oaxis)`` to a mesh file.

        Parameters
        ----------
        filename : str
            File name without extension
        O : array-like (3,)
            Origin of the shape's local frame in world coordinates
        Oaxis : array-like (3, 3)
            Rows are the local axes in world coordinates
        options : ExportOptions | None
            Output directory, format and meshing resolution

        Returns
        -------
        str
            Name of the written file, relative to ``options.output_dir``

        Raises
        ------
        ExportFailure
            If the format is not supported or the file cannot be written
        """
        options = options if options is not None else ExportOptions()
        if options.file_type not in MESH_FILE_TYPES:
            raise ExportFailure(
                f"{type(self).__name__} cannot be written as '{options.file_type}'. "
                f"Valid options: {MESH_FILE_TYPES}"
            )
        mesh = self._mesh(options)
        mesh.apply_transform(homogeneous_transform(O, Oaxis))
        return _write(mesh, filename, options.file_type, options)

    # -------------------------------------------------------------------------
    # Units
    # -------------------------------------------------------------------------

    def volume_units(self) -> str:
        return self.units + "^3"

    def area_units(self) -> str:
        return self.units + "^2"

    def centroid_units(self) -> str:
        return self.units

    def units_of(self, kind: str) -> str:
        """
        Units of a derived quantity.

        Parameters
        ----------
        kind : str
            One of 'length', 'area', 'volume'
        """
        if kind == "length":
            return self.centroid_units()
        if kind == "area":
            return self.area_units()
        if kind == "volume":
            return self.volume_units()
        raise ValueError(f"Unknown unit kind '{kind}'. Valid options: {UNIT_KINDS}")


def _write(geometry, filename: str, file_type: str, options: ExportOptions) -> str:
    name = f"{filename}.{file_type}"
    path = options.output_dir / name
    try:
        options.output_dir.mkdir(parents=True, exist_ok=True)
        geometry.export(file_obj=str(path), file_type=file_type)
    except (OSError, ValueError, KeyError, NotImplementedError) as exc:
        raise ExportFailure(f"Could not write {path}: {exc}") from exc
    logger.info("Exported %s", path)
    return name


# =============================================================================
# Shape implementations
# =============================================================================

@dataclass(frozen=True)
class ShapeCuboid(Shape):
    """Cuboid shape formed by six rectangles (3D rectangle)."""
    x1: float
    x2: float
    x3: float
    units: str = "m"

    def __post_init__(self):
        object.__setattr__(self, "x1", validate_non_negative(self.x1, "x1"))
        object.__setattr__(self, "x2", validate_non_negative(self.x2, "x2"))
        object.__setattr__(self, "x3", validate_non_negative(self.x3, "x3"))

    def volume(self) -> float:
        return self.x1 * self.x2 * self.x3

    def area(self) -> float:
        return 2 * (self.x1 * self.x2 + self.x2 * self.x3 + self.x3 * self.x1)

    def centroid(self) -> tuple[float, float, float]:
        return (self.x1 / 2, self.x2 / 2, self.x3 / 2)

    def _mesh(self, options: ExportOptions) -> trimesh.Trimesh:
        mesh = trimesh.creation.box(extents=[self.x1, self.x2, self.x3])
        mesh.apply_translation(self.centroid())
        return mesh


@dataclass(frozen=True)
class ShapeCyl(Shape):
    """Cylinder: axis along x3, circular section on the x1-x2 plane."""
    r: float
    h: float
    units: str = "m"

    def __post_init__(self):
        object.__setattr__(self, "r", validate_non_negative(self.r, "r"))
        object.__setattr__(self, "h", validate_non_negative(self.h, "h"))

    def volume(self) -> float:
        return math.pi * self.r**2 * self.h

    def area(self) -> float:
        return 2 * math.pi * self.r**2 + 2 * math.pi * self.r * self.h

    def centroid(self) -> tuple[float, float, float]:
        return (0.0, 0.0, self.h / 2)

    def _mesh(self, options: ExportOptions) -> trimesh.Trimesh:
        mesh = trimesh.creation.cylinder(
            radius=self.r, height=self.h, sections=options.cylinder_sections
        )
        # trimesh centres the cylinder at the origin; move the base there
        mesh.apply_translation(self.centroid())
        return mesh


@dataclass(frozen=True)
class ShapeSphere(Shape):
    r: float
    units: str = "m"

    def __post_init__(self):
        object.__setattr__(self, "r", validate_non_negative(self.r, "r"))

    def volume(self) -> float:
        return 4 / 3 * math.pi * self.r**3

    def area(self) -> float:
        return 4 * math.pi * self.r**2

    def centroid(self) -> tuple[float, float, float]:
        return (0.0, 0.0, 0.0)

    def _mesh(self, options: ExportOptions) -> trimesh.Trimesh:
        return trimesh.creation.icosphere(
            subdivisions=options.sphere_subdivisions, radius=self.r
        )


@dataclass(frozen=True)
class ShapePoint(Shape):
    """A volume-less point, used for point masses."""
    units: str = "m"

    def volume(self) -> float:
        return 0.0

    def area(self) -> float:
        return 0.0

    def centroid(self) -> tuple[float, float, float]:
        return (0.0, 0.0, 0.0)

    def _mesh(self, options: ExportOptions) -> trimesh.Trimesh:
        raise ExportFailure("A point has no surface to mesh")

    def export(
        self,
        filename: str,
        O: NDArray[np.float64] = ORIGIN,
        Oaxis: NDArray[np.float64] = IDENTITY,
        options: ExportOptions | None = None,
    ) -> str:
        """Write the point as a one-vertex point cloud at ``O``."""
        options = options if options is not None else ExportOptions()
        if options.point_file_type not in POINT_FILE_TYPES:
            raise ExportFailure(
                f"ShapePoint cannot be written as '{options.point_file_type}'. "
                f"Valid options: {POINT_FILE_TYPES}"
            )
        cloud = trimesh.PointCloud(np.asarray(O, dtype=np.float64).reshape(1, 3))
        return _write(cloud, filename, options.point_file_type, options)


@dataclass(frozen=True, eq=False)
class ShapeSurfGrid(Shape):
    """
    Arbitrary shape given as a triangulated surface grid.

    Volume, area and centroid are delegated to the mesh. For a closed
    (watertight, consistently wound) mesh the centroid is the centre of
    volume; otherwise it is the area-weighted centroid of the surface.

    Parameters
    ----------
    grid : trimesh.Trimesh
        Surface grid. A private copy is kept so later edits of the caller's
        mesh do not change this shape.
    units : str
        Length units of the grid coordinates
    """
    grid: trimesh.Trimesh
    units: str = "m"

    def __post_init__(self):
        if not isinstance(self.grid, trimesh.Trimesh):
            raise TypeError(f"grid must be a trimesh.Trimesh, got {type(self.grid).__name__}")
        object.__setattr__(self, "grid", self.grid.copy())

    def volume(self) -> float:
        return abs(float(self.grid.volume))

    def area(self) -> float:
        return float(self.grid.area)

    def centroid(self) -> tuple[float, float, float]:
        c = self.grid.center_mass if self.grid.is_volume else self.grid.centroid
        return tuple(float(ci) for ci in c)

    def _mesh(self, options: ExportOptions) -> trimesh.Trimesh:
        return self.grid.copy()


SHAPE_TYPES = (ShapeCuboid, ShapeCyl, ShapeSphere, ShapePoint, ShapeSurfGrid)
