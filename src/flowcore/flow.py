"""Mean velocity and volumetric flow in open-channel (free surface) conduits.

Two independent correlations are provided:

* :func:`semi_empirical_flow` combines Darcy-Weisbach with the
  Colebrook-White friction law, solved in closed form for velocity given the
  friction slope. It needs absolute roughness and kinematic viscosity.
* :func:`manning_flow` is the classic Manning equation in SI units.
"""

from collections import namedtuple
from math import log10, sqrt

from . import _logger
from flowcore.constants import GRAVITY

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"

FlowResult = namedtuple('FlowResult', ['velocity', 'flow'])

NO_FLOW = FlowResult(0.0, 0.0)


def semi_empirical_flow(hradius, slope, area, froughness, kin_visc):
    """Calculate mean velocity and flow from the Darcy-Weisbach/Colebrook-White
    closed form

        V = -2 sqrt(8 g Rh S) log10(ks / (14.8 Rh)
                                    + 2.51 nu / (4 Rh sqrt(8 g Rh S)))

    Args:
        hradius (float): hydraulic radius, in meters
        slope (float): energy slope, dimensionless (m/m)
        area (float): wetted flow area, in square meters
        froughness (float): absolute pipe roughness, in meters
        kin_visc (float): kinematic viscosity, in square meters per second

    Returns:
        (FlowResult): velocity (m/s) and volumetric flow (m**3/s). Both are
          zero when the hydraulic radius or slope is not positive, or when
          the logarithm argument is not positive.
    """
    if hradius <= 0.0 or slope <= 0.0:
        return NO_FLOW

    sqrt8grs = sqrt(8.0 * GRAVITY * hradius * slope)
    term1 = froughness / (14.8 * hradius)
    term2 = (2.51 * kin_visc) / (4.0 * hradius * sqrt8grs)

    if term1 + term2 <= 0.0:
        _logger.debug('Non-positive logarithm argument {0:0.4E}; no flow'
                      .format(term1 + term2))
        return NO_FLOW

    velocity = -2.0 * sqrt8grs * log10(term1 + term2)

    return FlowResult(velocity, velocity * area)


def manning_flow(area, manning_n, hradius, slope):
    """Calculate flow and mean velocity with the Manning equation

        Q = A (1/n) Rh^(2/3) S^(1/2)

    Args:
        area (float): wetted flow area, in square meters
        manning_n (float): Manning roughness coefficient
        hradius (float): hydraulic radius, in meters
        slope (float): channel slope, dimensionless (m/m)

    Returns:
        (FlowResult): velocity (m/s) and volumetric flow (m**3/s)
    """
    flow = area * (1.0 / manning_n) * hradius**(2.0 / 3.0) * slope**0.5
    velocity = flow / area if area > 0.0 else 0.0

    return FlowResult(velocity, flow)
