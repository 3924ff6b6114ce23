"""
Exception hierarchy for aircraftdesign.

Every error is raised synchronously at the point of violation. Construction
checks fail before a node is returned, so no half-built component ever
escapes a constructor.
"""
from __future__ import annotations


class AircraftDesignError(Exception):
    """Base class for all aircraftdesign errors."""


class InvalidDimension(AircraftDesignError, ValueError):
    """Negative, non-finite or wrongly-shaped geometric or density input."""


class ArityMismatch(AircraftDesignError, ValueError):
    """Per-child frame lists do not match the number of subcomponents."""


class InvalidFormat(AircraftDesignError, ValueError):
    """Unrecognized report format name."""


class UnitMismatch(AircraftDesignError, ValueError):
    """Subcomponents of a system report incompatible units."""


class ExportFailure(AircraftDesignError, RuntimeError):
    """
    Geometry export of a leaf component failed.

    Parameters
    ----------
    message : str
        Human readable reason
    component : str | None
        Name of the leaf whose shape could not be exported
    prefix : str | None
        File name prefix the leaf was being exported under, so the caller
        can retry just that leaf
    """

    def __init__(self, message: str, component: str | None = None,
                 prefix: str | None = None):
        super().__init__(message)
        self.component = component
        self.prefix = prefix

    def __str__(self) -> str:
        msg = super().__str__()
        if self.component is not None:
            msg = f"{msg} (component='{self.component}', prefix='{self.prefix}')"
        return msg
