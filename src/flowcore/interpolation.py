"""Piecewise-linear lookup over tabulated curves"""

import numpy as np

from . import _logger

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"


def interpolate(table, x):
    """Linearly interpolate between the two table points bracketing ``x``.

    Values at or below the first abscissa return the first ordinate; values at
    or beyond the last abscissa return the last ordinate. The curve is never
    extrapolated.

    Args:
        table ([(float, float)]): (x, y) pairs, ascending in x
        x (float): abscissa to look up

    Returns:
        (float): interpolated ordinate

    Raises:
        ValueError: Empty table.
    """
    if not table:
        raise ValueError('Cannot interpolate on an empty table')

    xp = [pt[0] for pt in table]
    fp = [pt[1] for pt in table]

    if x > xp[-1]:
        _logger.warning('{0:g} is beyond the end of the curve ({1:g}); '
                        'using last tabulated value'.format(x, xp[-1]))
    elif x < xp[0]:
        _logger.info('{0:g} is below the start of the curve ({1:g}); '
                     'using first tabulated value'.format(x, xp[0]))

    return float(np.interp(x, xp, fp))
