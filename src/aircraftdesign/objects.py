"""
Massified objects: a shape plus a uniform density rule.

- ObjectVol: density per unit volume
- ObjectSurf: density per unit area (skins, fabrics, panels)
- ObjectPoint: absolute mass concentrated at the shape centroid

All quantities are in the units of the underlying shape and the density
units string; no conversion is ever performed.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from aircraftdesign.errors import InvalidDimension
from aircraftdesign.shapes import Shape, ShapePoint
from aircraftdesign.utils.validation import validate_non_negative

DEFAULT_MASS_UNITS = "kg"


def strip_units(dunits: str, measure_units: str) -> str:
    """
    Mass units from density units and the units of the normalizing measure.

    Removes the first ``/<measure_units>`` (or `` / <measure_units>``) from
    ``dunits``; if neither is present the two strings are concatenated.

    Examples
    --------
    >>> strip_units("kg/m^3", "m^3")
    'kg'
    >>> strip_units("lb / ft^2", "ft^2")
    'lb'
    >>> strip_units("kg", "")
    'kg'
    """
    for sep in ("/", " / "):
        token = sep + measure_units
        if measure_units and token in dunits:
            return dunits.replace(token, "", 1)
    return dunits + measure_units


class AbstractObject(ABC):
    """
    Base class for objects with shape and mass properties.

    Implementations carry the fields ``shape``, ``density`` and ``dunits``
    and provide :meth:`measure` and :meth:`measure_units`.
    """

    shape: Shape
    density: float
    dunits: str

    def _validate(self) -> None:
        if not isinstance(self.shape, Shape):
            raise TypeError(f"shape must be a Shape, got {type(self.shape).__name__}")
        object.__setattr__(self, "density", validate_non_negative(self.density, "density"))

    @abstractmethod
    def measure(self) -> float:
        """Quantity the density is normalized by (volume, area or 1)."""

    @abstractmethod
    def measure_units(self) -> str:
        """Units of :meth:`measure`."""

    def mass(self) -> float:
        return self.density * self.measure()

    def cg(self) -> tuple[float, float, float]:
        """Center of gravity in the shape's local frame."""
        return self.shape.centroid()

    def mass_units(self) -> str:
        return strip_units(self.dunits, self.measure_units())

    def cg_units(self) -> str:
        return self.shape.centroid_units()


@dataclass(frozen=True, eq=False)
class ObjectVol(AbstractObject):
    """Volumetric object with uniform density."""
    shape: Shape
    density: float
    dunits: str = "kg/m^3"

    def __post_init__(self):
        self._validate()

    def measure(self) -> float:
        return self.shape.volume()

    def measure_units(self) -> str:
        return self.shape.volume_units()


@dataclass(frozen=True, eq=False)
class ObjectSurf(AbstractObject):
    """Surface object with uniform area-based density."""
    shape: Shape
    density: float
    dunits: str = "kg/m^2"

    def __post_init__(self):
        self._validate()

    def measure(self) -> float:
        return self.shape.area()

    def measure_units(self) -> str:
        return self.shape.area_units()


@dataclass(frozen=True, eq=False)
class ObjectPoint(AbstractObject):
    """
    Point mass. ``density`` is the absolute mass of the object.

    The shape only places the mass (at its centroid) and is used for
    visualization; its volume and area are ignored.
    """
    shape: Shape
    density: float
    dunits: str = DEFAULT_MASS_UNITS

    def __post_init__(self):
        self._validate()

    def measure(self) -> float:
        return 1.0

    def measure_units(self) -> str:
        return ""


OBJECT_TYPES = (ObjectVol, ObjectSurf, ObjectPoint)


def point_mass(mass: float, units: str = "m", dunits: str = DEFAULT_MASS_UNITS) -> ObjectPoint:
    """Shorthand for a point mass at the origin."""
    return ObjectPoint(ShapePoint(units), mass, dunits)


def object_from_mass(
    shape: Shape,
    mass: float,
    kind: type[AbstractObject] | None = None,
    mass_units: str = DEFAULT_MASS_UNITS,
) -> AbstractObject:
    """
    Build an object whose total mass is ``mass``.

    Parameters
    ----------
    shape : Shape
        Geometry of the object
    mass : float
        Total mass
    kind : type | None
        ObjectVol, ObjectSurf or ObjectPoint. By default the mass is spread
        over the shape's volume, or held as a point mass when the shape
        has no volume.
    mass_units : str
        Units of ``mass``. Density units become ``"<mass_units>/<measure units>"``.

    Returns
    -------
    AbstractObject
        Object with ``mass()`` equal to ``mass``. Point masses are exact;
        for distributed kinds the density is ``mass / measure``, so the
        product can differ from ``mass`` by float rounding.

    Raises
    ------
    InvalidDimension
        If mass is negative, or a volumetric/surface object is requested
        for a shape other than a point that has zero volume/area
    """
    mass = validate_non_negative(mass, "mass")
    if kind is ObjectPoint or isinstance(shape, ShapePoint):
        return ObjectPoint(shape, mass, mass_units)
    if kind is None:
        if shape.volume() <= 0:
            return ObjectPoint(shape, mass, mass_units)
        kind = ObjectVol
    if kind is ObjectVol:
        measure, munits = shape.volume(), shape.volume_units()
    elif kind is ObjectSurf:
        measure, munits = shape.area(), shape.area_units()
    else:
        raise TypeError(f"Unknown object kind {kind!r}. Valid options: {OBJECT_TYPES}")
    if measure <= 0:
        raise InvalidDimension(
            f"Cannot distribute mass {mass} over {type(shape).__name__} "
            f"with zero {'volume' if kind is ObjectVol else 'area'}"
        )
    return kind(shape, mass / measure, f"{mass_units}/{munits}")
