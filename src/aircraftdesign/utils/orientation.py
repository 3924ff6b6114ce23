"""
Coordinate frame utilities.

A frame is a pair ``(O, Oaxis)``: ``O`` is the origin of the local system in
parent coordinates and the rows of ``Oaxis`` are the unit vectors of the local
axes expressed in parent coordinates. A local point ``x`` therefore maps to
the parent as::

    X = O + Oaxis.T @ x

Composition of a child frame ``(o, a)`` under a parent frame ``(O, A)``::

    O_child = O + A.T @ o
    A_child = a @ A

Examples
--------
>>> from aircraftdesign.utils.orientation import rotation_matrix, IDENTITY
>>> Oaxis = rotation_matrix(roll=0, pitch=0, yaw=90)
>>> Oaxis[0]     # local x points along parent y
array([0., 1., 0.])
"""
from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy.spatial.transform import Rotation as R


IDENTITY: NDArray[np.float64] = np.eye(3, dtype=np.float64)
IDENTITY.setflags(write=False)
"""Identity orientation (local axes aligned with parent axes)."""

ORIGIN: NDArray[np.float64] = np.zeros(3, dtype=np.float64)
ORIGIN.setflags(write=False)


def rotation_matrix(
    roll: float,
    pitch: float,
    yaw: float,
    degrees: bool = True,
) -> NDArray[np.float64]:
    """
    Orientation matrix from roll, pitch and yaw angles.

    Naming follows aircraft convention:

    * roll:   rotation about x-axis
    * pitch:  rotation about y-axis
    * yaw:    rotation about z-axis

    Parameters
    ----------
    roll, pitch, yaw : float
        Rotation angles [degrees or radians]
    degrees : bool
        If True (default), angles are in degrees.

    Returns
    -------
    NDArray[np.float64]
        3x3 ``Oaxis`` matrix whose rows are the rotated local axes expressed
        in the parent frame.

    Notes
    -----
    Rotations are extrinsic x-y-z. scipy returns the active matrix whose
    columns are the rotated axes, so the frame matrix is its transpose.
    """
    rot = R.from_euler("xyz", [roll, pitch, yaw], degrees=degrees)
    return rot.as_matrix().T


def compose_frames(
    O_parent: NDArray[np.float64],
    Oaxis_parent: NDArray[np.float64],
    O_local: NDArray[np.float64],
    Oaxis_local: NDArray[np.float64],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Express a local frame, given relative to a parent frame, in the
    parent's parent coordinates.

    Returns
    -------
    tuple[NDArray, NDArray]
        ``(O_parent + Oaxis_parent.T @ O_local, Oaxis_local @ Oaxis_parent)``
    """
    O = np.asarray(O_parent, dtype=np.float64) + \
        np.asarray(Oaxis_parent, dtype=np.float64).T @ np.asarray(O_local, dtype=np.float64)
    Oaxis = np.asarray(Oaxis_local, dtype=np.float64) @ np.asarray(Oaxis_parent, dtype=np.float64)
    return O, Oaxis


def frame_to_world(
    points,
    O: NDArray[np.float64],
    Oaxis: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Map local points (N, 3) or a single point (3,) into the parent frame.
    """
    pts = np.asarray(points, dtype=np.float64)
    return pts @ np.asarray(Oaxis, dtype=np.float64) + np.asarray(O, dtype=np.float64)


def homogeneous_transform(
    O: NDArray[np.float64],
    Oaxis: NDArray[np.float64],
) -> NDArray[np.float64]:
    """4x4 homogeneous matrix equivalent to :func:`frame_to_world`."""
    T = np.eye(4, dtype=np.float64)
    T[:3, :3] = np.asarray(Oaxis, dtype=np.float64).T
    T[:3, 3] = np.asarray(O, dtype=np.float64)
    return T
