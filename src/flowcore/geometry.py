"""Cross-section geometry of partially filled circular conduits"""

from collections import namedtuple
from math import acos, sin

import scipy.constants as sc

from . import _logger

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"

GeometrySample = namedtuple('GeometrySample',
                            ['area', 'perimeter', 'hradius', 'theta'])


def circular_section(idiameter, depth):
    """Calculate wetted area, wetted perimeter, hydraulic radius, and central
    angle of a circular pipe flowing partially full.

    A depth at or above the inner diameter is treated as a full pipe and
    bypasses the trigonometric branch entirely, so ``theta`` is exactly 2*pi.
    Otherwise the central angle subtended by the free surface is
    ``theta = 2*acos(1 - 2y/D)`` with the cosine argument clamped to [-1, 1]
    to absorb floating point overshoot near y = 0 and y = D.

    Args:
        idiameter (float): pipe inner diameter, in meters
        depth (float): water depth above the pipe invert, in meters

    Returns:
        (GeometrySample): area (m**2), wetted perimeter (m), hydraulic radius
          (m), and central angle (radians). Zero depth yields zero area,
          perimeter, and hydraulic radius.
    """
    if depth >= idiameter:
        return GeometrySample(area=sc.pi * idiameter**2 / 4.0,
                              perimeter=sc.pi * idiameter,
                              hradius=idiameter / 4.0,
                              theta=2.0 * sc.pi)

    term = 1.0 - 2.0 * depth / idiameter
    term = max(-1.0, min(1.0, term))
    theta = 2.0 * acos(term)

    area = (idiameter**2 / 8.0) * (theta - sin(theta))
    perimeter = 0.5 * theta * idiameter
    hradius = area / perimeter if perimeter > 0.0 else 0.0

    _logger.debug('D = {0:0.4E} m, y = {1:0.4E} m: A = {2:0.4E} m**2, '
                  'P = {3:0.4E} m, Rh = {4:0.4E} m, theta = {5:0.4f}'
                  .format(idiameter, depth, area, perimeter, hradius, theta))

    return GeometrySample(area=area, perimeter=perimeter, hradius=hradius,
                          theta=theta)
