"""Static catalogs: commercial pipe sizes and Hunter probable-demand curves.

All catalogs are immutable tuples built once at import time and ordered
ascending, because selection is "first adequate entry wins"."""

from collections import namedtuple

from fluids.friction import material_roughness as fluids_material_roughness
from fluids.friction import nearest_material_roughness
from fluids.piping import nearest_pipe

from . import _logger, Q_

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"

PipeSpec = namedtuple('PipeSpec', ['name', 'idiameter_mm'])

PotablePipeSpec = namedtuple('PotablePipeSpec',
                             ['nominal', 'nominal_mm', 'idiameter_mm'])

#: PVC sanitary and storm sewer pipe, ascending by inner diameter (mm)
SANITARY_PIPES = (
    PipeSpec('2"', 54.6),
    PipeSpec('3"', 82.0),
    PipeSpec('4"', 107.0),
    PipeSpec('6"', 159.0),
    PipeSpec('8"', 198.0),
    PipeSpec('10"', 246.0),
    PipeSpec('12"', 293.0),
    PipeSpec('15"', 363.0),
    PipeSpec('18"', 437.0),
    PipeSpec('21"', 509.0),
    PipeSpec('24"', 582.0),
)

# (nominal label, NPS in inches, ISO nominal size in mm)
_SCH40_SIZES = (
    ('1/2"',    0.5,  15),
    ('3/4"',    0.75, 20),
    ('1"',      1.0,  25),
    ('1-1/4"',  1.25, 32),
    ('1-1/2"',  1.5,  40),
    ('2"',      2.0,  50),
    ('2-1/2"',  2.5,  65),
    ('3"',      3.0,  80),
    ('4"',      4.0,  100),
    ('6"',      6.0,  150),
    ('8"',      8.0,  200),
)


def schedule_catalog(sizes, schedule='40'):
    """Build a potable pipe catalog from standard pipe schedule dimensions

    Args:
        sizes ([tuple]): (nominal label, NPS in inches, nominal size in mm)
          triples, ascending
        schedule (str): pipe schedule

    Returns:
        (tuple): PotablePipeSpec entries with inner diameter in millimeters

    Raises:
        ValueError: Failed to find dimensions for given size and schedule.
    """
    catalog = []
    for nominal, nps, nominal_mm in sizes:
        try:
            (_, Di, _, _) = nearest_pipe(NPS=nps, schedule=schedule)
        except Exception:
            raise ValueError('Cannot find dimensions corresponding '
                             'to {0:0.4f}-in nominal diameter and pipe '
                             'schedule "{1:s}"'.format(nps, schedule))

        idiameter_mm = round(Q_(Di, 'm').to('mm').magnitude, 2)
        catalog.append(PotablePipeSpec(nominal, nominal_mm, idiameter_mm))

    return tuple(sorted(catalog, key=lambda p: p.idiameter_mm))


#: PVC SCH40 pressure pipe for potable water, ascending by inner diameter
POTABLE_PIPES = schedule_catalog(_SCH40_SIZES)


def _gpm_curve(points):
    """Convert (units, gpm) pairs to (units, L/s) pairs"""
    return tuple((units, Q_(gpm, 'gallon/minute').to('liter/second').magnitude)
                 for units, gpm in points)


#: Hunter curve, systems with predominantly flush tanks; (UH, L/s)
HUNTER_TANK = _gpm_curve((
    (1, 3.0), (2, 5.0), (3, 6.5), (4, 8.0), (5, 9.4), (6, 10.7),
    (7, 11.8), (8, 12.8), (9, 13.7), (10, 14.6), (11, 15.4), (12, 16.0),
    (13, 16.5), (14, 17.0), (15, 17.5), (16, 18.0), (17, 18.4),
    (18, 18.8), (19, 19.2), (20, 19.6), (25, 21.5), (30, 23.3),
    (35, 24.9), (40, 26.3), (45, 27.7), (50, 29.1), (60, 32.0),
    (70, 35.0), (80, 38.0), (90, 41.0), (100, 43.5), (120, 48.0),
    (140, 52.5), (160, 57.0), (180, 61.0), (200, 65.0), (225, 70.0),
    (250, 75.0), (275, 80.0), (300, 85.0), (400, 105.0), (500, 124.0),
    (750, 170.0), (1000, 208.0),
))

#: Hunter curve, systems with predominantly flush valves; (UH, L/s)
HUNTER_FLUSH_VALVE = _gpm_curve((
    (5, 15.0), (6, 17.4), (7, 19.8), (8, 22.2), (9, 24.6), (10, 27.0),
    (11, 27.8), (12, 28.6), (13, 29.4), (14, 30.2), (15, 31.0),
    (16, 31.8), (17, 32.6), (18, 33.4), (19, 34.2), (20, 35.0),
    (25, 38.0), (30, 42.0), (35, 44.0), (40, 46.0), (45, 48.0),
    (50, 50.0), (60, 54.0), (70, 58.0), (80, 61.2), (90, 64.3),
    (100, 67.5), (120, 73.0), (140, 77.0), (160, 81.0), (180, 85.5),
    (200, 90.0), (225, 95.5), (250, 101.0), (275, 104.5), (300, 108.0),
    (400, 127.0), (500, 143.0), (750, 177.0), (1000, 208.0),
))


def material_roughness(surface, is_clean=True):
    """Find absolute surface roughness by surface finish name and
    cleanliness

    Args:
        surface (str): text description of pipe surface
        is_clean (bool): pipe cleanliness

    Returns:
        (float): absolute roughness, in meters

    Raises:
        ValueError: Failed to find surface roughness for material
            description.
    """
    surface_key = nearest_material_roughness(surface, is_clean)

    lc_surface = str(surface).lower().strip()
    lc_surface_key = str(surface_key).lower().strip()
    if lc_surface not in lc_surface_key:
        raise ValueError('Surface specified "{0:s}" too different '
                         'from surface found "{1:s}"'
                         .format(surface, surface_key))

    froughness = fluids_material_roughness(surface_key)

    _logger.info('Note: Surface roughness set to {0:0.4E} m; used "{1:s}" '
                 'based on specification "{2:s}, {3:s}"'
                 .format(froughness, surface_key, surface.strip(),
                         'clean' if is_clean else 'fouled'))

    return froughness
