"""
Placed-geometry export of a component tree.

Walks the tree top-down composing each system's per-child frames onto the
accumulated world frame and writes one mesh file per leaf. See
:mod:`aircraftdesign.utils.orientation` for the frame convention.
"""
from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from aircraftdesign.components.base import AbstractComponent
from aircraftdesign.components.component import Component
from aircraftdesign.components.system import System
from aircraftdesign.config import ExportOptions
from aircraftdesign.utils.orientation import compose_frames
from aircraftdesign.utils.validation import validate_matrix3, validate_vector3

logger = logging.getLogger(__name__)

FILE_SEPARATOR = ";"


def save_shape(
    cmp: AbstractComponent,
    filename: str,
    O=None,
    Oaxis=None,
    options: ExportOptions | None = None,
    path: str | Path | None = None,
) -> str:
    """
    Write the geometry of every leaf of ``cmp`` placed in world coordinates.

    Parameters
    ----------
    cmp : AbstractComponent
        Root of the tree to export
    filename : str
        Prefix of every written file. A leaf reached through system ``s``
        at child index ``i`` is written as ``<filename>_<s>_<i>_<leaf>``.
    O : array-like (3,) | None
        World origin of the root. Default: the root's own ``O``.
    Oaxis : array-like (3, 3) | None
        World orientation of the root. Default: the root's own ``Oaxis``.
    options : ExportOptions | None
        File type, meshing resolution and output directory
    path : str | Path | None
        Output directory, overriding ``options.output_dir``

    Returns
    -------
    str
        Written file names in tree order, joined by ``";"``

    Raises
    ------
    ExportFailure
        On the first leaf that cannot be exported; carries the leaf name
        and the prefix it was exported under
    """
    options = options if options is not None else ExportOptions()
    if path is not None:
        options = options.with_output_dir(path)
    O = cmp.O if O is None else validate_vector3(O, "O")
    Oaxis = cmp.Oaxis if Oaxis is None else validate_matrix3(Oaxis, "Oaxis")

    logger.debug("Exporting '%s' to %s", cmp.name, options.output_dir)
    names = cmp._export(filename, np.asarray(O), np.asarray(Oaxis), options)
    return FILE_SEPARATOR.join(names)


def placements(cmp: AbstractComponent, O=None, Oaxis=None) -> list[tuple]:
    """
    World frame of every leaf, computed with the same walk as
    :func:`save_shape` but without writing any file.

    Returns
    -------
    list[tuple[tuple[int, ...], Component, NDArray, NDArray]]
        ``(path, leaf, O, Oaxis)`` for every leaf in tree order
    """
    O = cmp.O if O is None else validate_vector3(O, "O")
    Oaxis = cmp.Oaxis if Oaxis is None else validate_matrix3(Oaxis, "Oaxis")
    out: list[tuple] = []
    _collect(cmp, (), np.asarray(O), np.asarray(Oaxis), out)
    return out


def _collect(node, path, O_acc, R_acc, out) -> None:
    if isinstance(node, Component):
        out.append((path, node, O_acc, R_acc))
        return
    if isinstance(node, System):
        for i, (sub, o, axis) in enumerate(zip(node.subcomponents, node.subO, node.subOaxis)):
            _collect(sub, path + (i,), *compose_frames(O_acc, R_acc, o, axis), out)
