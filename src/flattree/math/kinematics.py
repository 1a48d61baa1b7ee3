"""Kinematic quantities derived from four-vectors.

Four-vectors are stored as (x, y, z, t) arrays, i.e. (px, py, pz, E) for
momenta and (x, y, z, c*t) for positions, with lengths in millimeters.

Directions exactly parallel to the beam axis have no defined pseudorapidity
or rapidity. In that case both are set to `sign(z) * ETA_SENTINEL`, which
keeps the direction information while flagging the value as undefined.
"""

import numpy as np

__all__ = [
    "C_LIGHT",
    "ETA_SENTINEL",
    "RATIO_SENTINEL",
    "pt",
    "phi",
    "cos_theta",
    "eta",
    "rapidity",
    "mass",
    "kinematics",
    "length_to_time",
]

# Speed of light in m/s
C_LIGHT = 2.99792458e8

# Value of the (pseudo)rapidity along the beam axis
ETA_SENTINEL = 999.9

# Value of an energy ratio with a null denominator
RATIO_SENTINEL = 999.9


def pt(vector):
    """Transverse component of a four-vector.

    Parameters
    ----------
    vector : np.ndarray
        (4) Four-vector

    Returns
    -------
    float
        Transverse momentum (or transverse distance for a position)
    """
    return float(np.sqrt(vector[0] * vector[0] + vector[1] * vector[1]))


def phi(vector):
    """Azimuthal angle of a four-vector, in [-pi, pi].

    A vector with no transverse component has an azimuthal angle of 0,
    whatever the signs of its (null) components.
    """
    if vector[0] == 0.0 and vector[1] == 0.0:
        return 0.0

    return float(np.arctan2(vector[1], vector[0]))


def cos_theta(vector):
    """Cosine of the polar angle of the spatial part of a four-vector.

    A null three-vector is considered to point along the beam axis.

    Parameters
    ----------
    vector : np.ndarray
        (4) Four-vector

    Returns
    -------
    float
        Signed cosine of the polar angle
    """
    mag = np.sqrt(
        vector[0] * vector[0] + vector[1] * vector[1] + vector[2] * vector[2]
    )
    if mag == 0.0:
        return 1.0

    return float(vector[2] / mag)


def _beam_sign(vector):
    return 1.0 if vector[2] >= 0.0 else -1.0


def eta(vector):
    """Pseudorapidity of a four-vector.

    Parameters
    ----------
    vector : np.ndarray
        (4) Four-vector

    Returns
    -------
    float
        Pseudorapidity, or `sign(z) * ETA_SENTINEL` along the beam axis
    """
    cos = cos_theta(vector)
    if abs(cos) == 1.0:
        return _beam_sign(vector) * ETA_SENTINEL

    return float(-0.5 * np.log((1.0 - cos) / (1.0 + cos)))


def rapidity(vector):
    """Rapidity of a four-vector.

    Parameters
    ----------
    vector : np.ndarray
        (4) Four-vector

    Returns
    -------
    float
        Rapidity, or `sign(z) * ETA_SENTINEL` along the beam axis
    """
    if abs(cos_theta(vector)) == 1.0:
        return _beam_sign(vector) * ETA_SENTINEL

    with np.errstate(divide="ignore", invalid="ignore"):
        return float(0.5 * np.log((vector[3] + vector[2]) / (vector[3] - vector[2])))


def mass(vector):
    """Invariant mass of a four-vector.

    Space-like vectors get a negative mass, `-sqrt(-m^2)`.
    """
    m2 = vector[3] * vector[3] - (
        vector[0] * vector[0] + vector[1] * vector[1] + vector[2] * vector[2]
    )
    if m2 < 0.0:
        return float(-np.sqrt(-m2))

    return float(np.sqrt(m2))


def kinematics(vector):
    """Bundles the transverse and angular quantities of a four-vector.

    Parameters
    ----------
    vector : np.ndarray
        (4) Four-vector

    Returns
    -------
    Tuple[float, float, float, float]
        (pt, eta, phi, rapidity)
    """
    return pt(vector), eta(vector), phi(vector), rapidity(vector)


def length_to_time(t):
    """Converts a time component expressed as a length (mm) to a time.

    The operations are applied in a fixed order so that the conversion is
    bit-reproducible.

    Parameters
    ----------
    t : float
        Time component of a position four-vector, in mm

    Returns
    -------
    float
        Laboratory time, `t * 1.0e-3 / C_LIGHT` (mm to m, then m to s)
    """
    return float(t) * 1.0e-3 / C_LIGHT
