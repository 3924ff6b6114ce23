"""
aircraftdesign - Mass, cost and bill-of-materials bookkeeping for aircraft
assemblies.

Shapes
------
ShapeCuboid, ShapeCyl, ShapeSphere, ShapePoint, ShapeSurfGrid

Objects
-------
ObjectVol, ObjectSurf, ObjectPoint, object_from_mass

Components
----------
Component : Leaf wrapping one object
System : Ordered assembly of components with per-child frames

Examples
--------
>>> from aircraftdesign import ShapeCuboid, ObjectVol, Component, System
>>> box = Component("battery", ObjectVol(ShapeCuboid(0.1, 0.05, 0.03), 2100.0), cost=80.0)
>>> avionics = System("avionics", [box, box.clone()], subO=[[0, 0, 0], [0.12, 0, 0]])
>>> avionics.cost
160.0
>>> avionics.get_report("bom")
"""

__version__ = "0.1.0"

from aircraftdesign.components import (
    UNASSIGNED_ID,
    AbstractComponent,
    Component,
    System,
    clone,
)
from aircraftdesign.config import EXPORT_PRESETS, ExportOptions
from aircraftdesign.errors import (
    AircraftDesignError,
    ArityMismatch,
    ExportFailure,
    InvalidDimension,
    InvalidFormat,
    UnitMismatch,
)
from aircraftdesign.export import placements, save_shape
from aircraftdesign.objects import (
    AbstractObject,
    ObjectPoint,
    ObjectSurf,
    ObjectVol,
    object_from_mass,
    point_mass,
)
from aircraftdesign.report import (
    ReportRow,
    RowKey,
    display_bom,
    get_report,
    report_as_dicts,
    report_to_dataframe,
)
from aircraftdesign.shapes import (
    Shape,
    ShapeCuboid,
    ShapeCyl,
    ShapePoint,
    ShapeSphere,
    ShapeSurfGrid,
)
from aircraftdesign.utils.orientation import rotation_matrix

__all__ = [
    # Version
    "__version__",
    # Shapes
    "Shape",
    "ShapeCuboid",
    "ShapeCyl",
    "ShapeSphere",
    "ShapePoint",
    "ShapeSurfGrid",
    # Objects
    "AbstractObject",
    "ObjectVol",
    "ObjectSurf",
    "ObjectPoint",
    "object_from_mass",
    "point_mass",
    # Components
    "AbstractComponent",
    "Component",
    "System",
    "clone",
    "UNASSIGNED_ID",
    # Reports
    "RowKey",
    "ReportRow",
    "get_report",
    "report_as_dicts",
    "report_to_dataframe",
    "display_bom",
    # Export
    "save_shape",
    "placements",
    "ExportOptions",
    "EXPORT_PRESETS",
    # Errors
    "AircraftDesignError",
    "InvalidDimension",
    "ArityMismatch",
    "InvalidFormat",
    "UnitMismatch",
    "ExportFailure",
    # Utilities
    "rotation_matrix",
]
