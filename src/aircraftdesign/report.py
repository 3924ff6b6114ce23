"""
Report and bill-of-materials views of a component tree.

Three formats are available:

- ``simple``: one row describing only the given component
- ``recursive``: depth-first pre-order listing of every component
- ``bom``: bill of materials; leaves only, identical parts folded into one
  row with a unit count

Reports are ordered mappings ``RowKey -> ReportRow`` in order of first
occurrence. They are the only data handed to table or file writers.
"""
from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from aircraftdesign.components.base import UNASSIGNED_ID, AbstractComponent
from aircraftdesign.components.component import Component
from aircraftdesign.config import DEFAULT_REPORT_EXCLUDE
from aircraftdesign.errors import InvalidFormat

logger = logging.getLogger(__name__)

REPORT_FORMATS = ("simple", "recursive", "bom")

# Public column name -> ReportRow attribute, in display order
REPORT_FIELDS: dict[str, str] = {
    "Name": "name",
    "ID": "id",
    "Subcomponents": "subcomponents",
    "Description": "description",
    "Comments": "comments",
    "Vendor": "vendor",
    "UnitCost": "unit_cost",
    "Units": "units",
    "TotalCost": "total_cost",
    "O": "O",
    "Oaxis": "Oaxis",
}


@dataclass(frozen=True)
class RowKey:
    """
    Identity of a report row.

    Two components are the same part when name, metadata and cost all
    match. ``path`` is the child-index path of the component in the tree.
    BOM keys leave the path empty and the identifier unassigned so
    identical parts fold together whatever their ``id``.
    """
    name: str
    id: int
    description: str
    comments: str
    vendor: str
    cost: float
    path: tuple[int, ...] = ()

    @classmethod
    def of(
        cls,
        cmp: AbstractComponent,
        path: tuple[int, ...] = (),
        with_id: bool = True,
    ) -> RowKey:
        cid = cmp.id if with_id else UNASSIGNED_ID
        return cls(cmp.name, cid, cmp.description, cmp.comments, cmp.vendor,
                   cmp.cost, path)


@dataclass
class ReportRow:
    """One row of a report. See ``REPORT_FIELDS`` for public column names."""
    name: str
    id: int
    subcomponents: str
    description: str
    comments: str
    vendor: str
    unit_cost: float
    units: int
    total_cost: float
    O: NDArray[np.float64]
    Oaxis: NDArray[np.float64]

    @classmethod
    def of(cls, cmp: AbstractComponent) -> ReportRow:
        if isinstance(cmp, Component):
            subcomponents = type(cmp.subcomponents).__name__
        else:
            subcomponents = ", ".join(sub.name for sub in cmp.children())
        return cls(
            name=cmp.name,
            id=cmp.id,
            subcomponents=subcomponents,
            description=cmp.description,
            comments=cmp.comments,
            vendor=cmp.vendor,
            unit_cost=cmp.cost,
            units=1,
            total_cost=cmp.cost,
            O=cmp.O,
            Oaxis=cmp.Oaxis,
        )

    def add_unit(self) -> None:
        self.units += 1
        self.total_cost = self.units * self.unit_cost

    def as_dict(self, exclude: Iterable[str] | None = DEFAULT_REPORT_EXCLUDE) -> dict:
        """Row as ``{column name: value}`` without the excluded columns."""
        skip = set(exclude or ())
        return {col: getattr(self, attr) for col, attr in REPORT_FIELDS.items()
                if col not in skip}


def get_report(
    cmp: AbstractComponent,
    format: str = "simple",
) -> OrderedDict[RowKey, ReportRow]:
    """
    Build a report of a component tree.

    Parameters
    ----------
    cmp : AbstractComponent
        Root of the tree
    format : str
        'simple', 'recursive' or 'bom'

    Returns
    -------
    OrderedDict[RowKey, ReportRow]
        Rows in order of first occurrence

    Raises
    ------
    InvalidFormat
        If ``format`` is not recognized
    """
    if format not in REPORT_FORMATS:
        raise InvalidFormat(
            f"Invalid report format '{format}'. Valid options: {REPORT_FORMATS}"
        )
    report: OrderedDict[RowKey, ReportRow] = OrderedDict()
    if format == "simple":
        report[RowKey.of(cmp)] = ReportRow.of(cmp)
    elif format == "recursive":
        for path, node in cmp.walk():
            report[RowKey.of(node, path)] = ReportRow.of(node)
    else:
        for _, node in cmp.walk():
            if not isinstance(node, Component):
                continue
            key = RowKey.of(node, with_id=False)
            if key in report:
                report[key].add_unit()
            else:
                report[key] = ReportRow.of(node)
    logger.debug("Built %s report of '%s' with %d rows", format, cmp.name, len(report))
    return report


def report_as_dicts(
    report: OrderedDict[RowKey, ReportRow],
    exclude: Iterable[str] | None = DEFAULT_REPORT_EXCLUDE,
) -> OrderedDict[RowKey, dict]:
    """Report with each row flattened to ``{column name: value}``."""
    _check_columns(exclude)
    return OrderedDict((key, row.as_dict(exclude)) for key, row in report.items())


def report_to_dataframe(
    report: OrderedDict[RowKey, ReportRow],
    exclude: Iterable[str] | None = DEFAULT_REPORT_EXCLUDE,
) -> pd.DataFrame:
    """
    Tabulate a report, one row per entry in insertion order.
    """
    _check_columns(exclude)
    columns = [col for col in REPORT_FIELDS if col not in set(exclude or ())]
    return pd.DataFrame([row.as_dict(exclude) for row in report.values()], columns=columns)


def display_bom(
    cmp: AbstractComponent,
    exclude: Iterable[str] | None = DEFAULT_REPORT_EXCLUDE,
) -> pd.DataFrame:
    """Bill of materials of ``cmp`` as a DataFrame."""
    return report_to_dataframe(get_report(cmp, "bom"), exclude)


def total_cost(report: OrderedDict[RowKey, ReportRow]) -> float:
    """Sum of the ``TotalCost`` column."""
    return sum(row.total_cost for row in report.values())


def _check_columns(exclude: Iterable[str] | None) -> None:
    unknown = set(exclude or ()) - set(REPORT_FIELDS)
    if unknown:
        raise InvalidFormat(
            f"Unknown report columns: {sorted(unknown)}. Valid options: {list(REPORT_FIELDS)}"
        )
