# -*- coding: utf-8 -*-
# pylint: disable=invalid-name,line-too-long,too-many-arguments,too-many-locals
"""
Created on 18 Oct 2026

@author: Ivica Stevanovic
"""
import numpy as np
from typing import Tuple


# Constants class
class Const:
    # Equation selectors for the height-gain terminal correction model
    EQN_2A = 1      # knife-edge diffraction, Equation (2a)
    EQN_2B = 2      # logarithmic height-gain, Equation (2b)

    WS_DEFAULT_M = 27.0         # Default street width, in m

    # Terrestrial statistical model, §3.2
    SIGMA_L_DB = 4.0            # (4b)
    SIGMA_S_DB = 6.0            # (5b)
    D_REF_KM = 2.0              # Distance beyond which the loss saturates

    # Earth-space and aeronautical statistical model, §3.3
    A_1 = 0.05
    K_1_FACTOR = 93.0
    K_1_EXPONENT = 0.175

    # Enforced validity ranges
    TH_DEG__CL_LOSS3 = (0.0, 90.0)

    # Default representative clutter height (m), street width (m) and equation
    CLUTTER_DEFAULTS = {
        "water/sea": (10.0, WS_DEFAULT_M, EQN_2B),
        "open/rural": (10.0, WS_DEFAULT_M, EQN_2B),
        "suburban": (10.0, WS_DEFAULT_M, EQN_2A),
        "urban/trees/forest": (15.0, WS_DEFAULT_M, EQN_2A),
        "dense urban": (20.0, WS_DEFAULT_M, EQN_2A),
    }


class ClutterLossError(ValueError):
    """Base class for input values outside of the domain of a clutter loss model"""


class PercentageOutOfRangeError(ClutterLossError):
    """Percentage of locations outside of (0, 100) %"""


class ElevationOutOfRangeError(ClutterLossError):
    """Elevation angle outside of [0, 90] degrees"""


class EquationSelectorError(ClutterLossError):
    """Equation selector other than Const.EQN_2A or Const.EQN_2B"""


"""
cl_loss1, cl_loss2, cl_loss3 - Compute clutter loss according to
Recommendation ITU-R P.2108-1

Description:  Section 3 of Recommendation ITU-R P.2108-1, "Prediction of
              clutter loss"

    §3.1  Height-gain terminal correction model
    §3.2  Statistical clutter loss model for terrestrial paths
    §3.3  Statistical clutter loss model for Earth-space and aeronautical paths

Python implementation by Ivica Stevanovic (OFCOM CH)

Usage:
    Ah = cl_loss1(f, h, eqnum, R, ws)
    Lctt = cl_loss2(f, d, p)
    Lces = cl_loss3(f, th, p)
"""


def cl_loss1(f: float, h: float, eqnum: int, R: float,
             ws: float = Const.WS_DEFAULT_M) -> float:
    """
    Compute the median clutter loss using the height-gain terminal
    correction model as defined in ITU-R P.2108-1 (Section 3.1)

    Parameters:
    -----------
    f : float
        Frequency (GHz): 0.03 - 3
    h : float
        Antenna height (m)
    eqnum : int
        Equation to be used, defaults per clutter category:
            Const.EQN_2B (2) - water/sea,  R = 10 m, Equation (2b)
            Const.EQN_2B (2) - open/rural, R = 10 m, Equation (2b)
            Const.EQN_2A (1) - suburban,   R = 10 m, Equation (2a)
            Const.EQN_2A (1) - urban/trees/forest, R = 15 m, Equation (2a)
            Const.EQN_2A (1) - dense urban,R = 20 m, Equation (2a)
    R : float
        Representative clutter height (m)
    ws : float
        Street width (m), default value 27 m
        ws = 0 is evaluated as a vertical diffraction angle theta_c = 90 deg,
        ws < 0 gives a negative theta_c and a NaN loss for Equation (2a);
        Equation (2b) does not depend on ws

    Returns:
    --------
    Ah : float
        Clutter loss according to P.2108 §3.1 (dB)

    Raises:
    -------
    EquationSelectorError
        If eqnum is neither Const.EQN_2A nor Const.EQN_2B
    """
    if eqnum not in (Const.EQN_2A, Const.EQN_2B):
        raise EquationSelectorError("The equation selector eqnum can be either 1, Equation (2a), or 2, Equation (2b).")

    if h >= R:
        return 0.0

    Knu = 0.342 * np.sqrt(f)                    # (2g)
    Kh2 = 21.8 + 6.2 * np.log10(f)              # (2f)
    hdif = R - h                                # (2d)
    with np.errstate(divide="ignore"):
        theta_c = np.degrees(np.arctan(np.float64(hdif) / ws))  # (2e)
    nu = Knu * np.sqrt(hdif * theta_c)          # (2c)

    if eqnum == Const.EQN_2B:
        Ah = -Kh2 * np.log10(h / R)             # (2b)
    else:
        Ah = knife_edge_loss(nu) - 6.03         # (2a)

    return Ah


def knife_edge_loss(nu: float) -> float:
    """
    Diffraction loss J(nu) over a single knife edge, Recommendation ITU-R P.526.
    The approximation is only used for nu > -0.78, J(nu) = 0 otherwise.
    """
    if nu <= -0.78:
        return 0.0

    return 6.9 + 20.0 * np.log10(np.sqrt((nu - 0.1)**2 + 1) + nu - 0.1)


def cl_loss2(f: float, d: float, p: float) -> float:
    """
    Compute the statistical distribution of clutter loss for terrestrial
    paths in urban and suburban environments as defined in
    ITU-R P.2108-1 (Section 3.2)

    The clutter loss not exceeded for p% of locations is computed at the
    path distance d and at the reference distance of 2 km, and the smaller
    of the two is returned.

    Parameters:
    -----------
    f : float
        Frequency (GHz): 0.5 <= f <= 67
    d : float
        Distance (km): 0.25 <= d < 1 (correction to be applied at one end only)
                       d >= 1 (correction can be applied at both ends of the path)
    p : float
        Percentage of locations (%): 0 < p < 100

    Returns:
    --------
    Lctt : float
        Clutter loss according to P.2108 §3.2 (dB)

    Raises:
    -------
    PercentageOutOfRangeError
        If p is not in (0, 100)
    """
    check_percentage(p)

    # Location correction
    Ll = -2.0 * np.log10(10**(-5.0 * np.log10(f) - 12.5) + 10**(-16.5))   # (4a)

    Lctt = terrestrial_loss(f, d, p, Ll)
    Lctt2 = terrestrial_loss(f, Const.D_REF_KM, p, Ll)

    return min(Lctt, Lctt2)


def terrestrial_loss(f: float, d: float, p: float, Ll: float) -> float:
    """
    Clutter loss (3) for a single distance d, given the location correction Ll
    """
    sigmal = Const.SIGMA_L_DB                          # (4b)
    Ls = 32.98 + 23.9 * np.log10(d) + 3 * np.log10(f)  # (5a)
    sigmas = Const.SIGMA_S_DB                          # (5b)

    wl = 10**(-0.2 * Ll)
    wsub = 10**(-0.2 * Ls)

    sigmacb = np.sqrt((sigmal**2 * wl + sigmas**2 * wsub) / (wl + wsub))   # (3b)

    Lctt = -5 * np.log10(wl + wsub) - sigmacb * norminv(1 - p / 100.0, 0, 1)  # (3)

    return Lctt


def cl_loss3(f: float, th: float, p: float) -> float:
    """
    Compute the statistical distribution of clutter loss for Earth-space
    and aeronautical paths as defined in ITU-R P.2108-1 (Section 3.3)

    Parameters:
    -----------
    f : float
        Frequency (GHz): 10 <= f <= 100
    th : float
        Elevation angle (degrees): 0 <= th <= 90
    p : float
        Percentage of locations (%): 0 < p < 100

    Returns:
    --------
    Lces : float
        Clutter loss according to P.2108 §3.3 (dB)

    Raises:
    -------
    ElevationOutOfRangeError
        If th is not in [0, 90]
    PercentageOutOfRangeError
        If p is not in (0, 100)
    """
    th_min, th_max = Const.TH_DEG__CL_LOSS3
    if th < th_min or th > th_max:
        raise ElevationOutOfRangeError("Elevation angle th = " + str(th) + " is outside of the valid domain [0, 90] degrees.")

    check_percentage(p)

    K1 = Const.K_1_FACTOR * np.power(f, Const.K_1_EXPONENT)
    A1 = Const.A_1

    L1 = -K1 * np.log(1 - p / 100.0)
    L2 = 1.0 / np.tan(A1 * (1 - th / 90.0) + np.pi * th / 180.0)

    # The exponent vanishes at zenith, (L1 * L2)^0 = 1
    Lces = (L1 * L2)**(0.5 * (90.0 - th) / 90.0) - 1 - 0.6 * norminv(1 - p / 100.0, 0, 1)   # (6)

    return Lces


def clutter_defaults(category: str) -> Tuple[float, float, int]:
    """
    Return the default representative clutter height R (m), street width ws (m)
    and the equation eqnum used in cl_loss1 for a given clutter category:
    'water/sea', 'open/rural', 'suburban', 'urban/trees/forest', 'dense urban'.
    Each of the names separated by '/' may also be used on its own.
    """
    key = category.strip().lower()

    for name, values in Const.CLUTTER_DEFAULTS.items():
        if key == name or key in name.split("/"):
            return values

    raise ValueError("Unknown clutter category '" + category + "'. Valid categories are: " +
                     ", ".join(Const.CLUTTER_DEFAULTS.keys()) + ".")


def check_percentage(p: float):
    if p <= 0 or p >= 100:
        raise PercentageOutOfRangeError("Percentage of locations p = " + str(p) + " is outside of the valid domain (0, 100) %.")


def norminv(p: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """
    Compute the inverse of the normal distribution with mean mu and
    standard deviation sigma.

    Parameters:
    -----------
    p : float
        Probability, 0.0 < p < 1.0
    mu : float
        Mean of the normal distribution (dB)
    sigma : float
        Standard deviation of the normal distribution (dB)

    Returns:
    --------
    y : float
        Value for which the normal cumulative distribution equals p
    """
    y = mu + sigma * Qi(1 - p)

    return y


def Qi(x: float) -> float:
    """
    Approximation to the inverse complementary cumulative normal distribution
    function, Recommendation ITU-R P.1057, Annex 5, Section 16.
    This approximation is sourced from Formula 26.2.23 in Abramowitz & Stegun
    and has an error of abs(epsilon(p)) < 4.5e-4
    """
    if x <= 0.5:
        out = T(x) - C(x)               # (39a)
    else:
        out = -(T(1 - x) - C(1 - x))    # (39b)

    return out


def T(y):
    return np.sqrt(-2.0 * np.log(y))    # (39c)


def C(z):   # (39d)
    C0 = 2.515517
    C1 = 0.802853
    C2 = 0.010328
    D1 = 1.432788
    D2 = 0.189269
    D3 = 0.001308

    t = T(z)

    return ((C2 * t + C1) * t + C0) / (((D3 * t + D2) * t + D1) * t + 1)
