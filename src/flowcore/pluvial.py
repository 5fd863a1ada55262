#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Pluvial design matrix: permissible drainage area for storm sewer pipes.

For each commercial pipe and each slope the matrix reports the range of
contributing drainage area the pipe can serve. The upper bound is the area
whose rational-method runoff fills the pipe to the maximum fill ratio; the
lower bound is the area whose runoff just reaches the depth at which the
tractive force equals the self-cleaning minimum. Pipe/slope combinations that
cannot self-clean even at maximum fill are rejected.

Then run `pip install .` which will install the command `flowcore_pluvial`
inside your current environment.
"""

from collections import namedtuple, OrderedDict
import sys

from tabulate import tabulate

from . import _logger
from flowcore.catalog import SANITARY_PIPES, material_roughness
from flowcore.cli import base_parser, setup_logging, process_files
from flowcore.constants import (GAMMA_WATER, MIN_TRACTIVE_FORCE,
                                MIN_DEPTH_SEARCH_STEPS, DEFAULT_FILL_RATIO,
                                DEFAULT_SLOPES, DEFAULT_INTENSITY,
                                DEFAULT_RUNOFF_COEFF, DEFAULT_KS,
                                DEFAULT_KIN_VISC)
from flowcore.errors import InvalidInputError
from flowcore.flow import semi_empirical_flow
from flowcore.geometry import circular_section
from flowcore.input import Field
import flowcore.units as fu

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"

#: Tractive force at maximum fill is below the self-cleaning minimum
LOW_TAU_MAX = 'LOW_TAU_MAX'

#: Depth scan never reached the self-cleaning hydraulic radius
MIN_DEPTH_NOT_FOUND = 'MIN_DEPTH_NOT_FOUND'

#: Lower area bound exceeds the upper bound
MIN_GREATER_THAN_MAX = 'MIN_GREATER_THAN_MAX'

REASON_LABELS = {
    LOW_TAU_MAX: 'Tractive force < {0:0.2f}'.format(MIN_TRACTIVE_FORCE),
    MIN_DEPTH_NOT_FOUND: 'No self-cleaning depth',
    MIN_GREATER_THAN_MAX: 'Invalid range',
}

DesignInput = namedtuple('DesignInput',
                         ['intensity', 'runoff_coeff', 'froughness',
                          'kin_visc', 'fill_ratio'],
                         defaults=(DEFAULT_FILL_RATIO,))


class InvalidCell(namedtuple('InvalidCell', ['reason', 'tau_max', 'slope'])):
    """Matrix cell for a pipe/slope combination that fails a design check

    Attributes:
        reason (str): One of LOW_TAU_MAX, MIN_DEPTH_NOT_FOUND, or
          MIN_GREATER_THAN_MAX
        tau_max (float): tractive force at maximum fill, kg/m**2
        slope (float): slope, percent
    """
    __slots__ = ()
    is_valid = False


class ValidCell(namedtuple('ValidCell', ['area_min', 'area_max', 'flow_min',
                                         'flow_max', 'tau_max', 'slope'])):
    """Matrix cell for a pipe/slope combination that passes all checks

    Attributes:
        area_min (float): drainage area at minimum self-cleaning depth, m**2
        area_max (float): drainage area at maximum fill, m**2
        flow_min (float): flow at minimum self-cleaning depth, L/s
        flow_max (float): flow at maximum fill, L/s
        tau_max (float): tractive force at maximum fill, kg/m**2
        slope (float): slope, percent
    """
    __slots__ = ()
    is_valid = True


def validate_design_input(design, slopes=()):
    """Check pluvial design parameters before any calculation is attempted

    Args:
        design (DesignInput): Design parameters
        slopes ([float]): Slopes, percent

    Raises:
        InvalidInputError: A parameter is outside its physical domain.
    """
    if not design.intensity > 0.0:
        raise InvalidInputError('Rainfall intensity must be positive')
    if not 0.0 < design.runoff_coeff <= 1.0:
        raise InvalidInputError('Runoff coefficient must be in (0, 1]')
    if not design.froughness >= 0.0:
        raise InvalidInputError('Absolute roughness must not be negative')
    if not design.kin_visc > 0.0:
        raise InvalidInputError('Kinematic viscosity must be positive')
    if not 0.0 < design.fill_ratio <= 100.0:
        raise InvalidInputError('Fill ratio must be in (0, 100] percent')
    for slope in slopes:
        if not slope > 0.0:
            raise InvalidInputError('Slope must be positive, got {0:g}%'
                                    .format(slope))


def drainage_area(flow, runoff_coeff, intensity_ms):
    """Contributing area whose rational-method runoff equals ``flow``

    Args:
        flow (float): volumetric flow, m**3/s
        runoff_coeff (float): runoff coefficient, dimensionless
        intensity_ms (float): rainfall intensity, m/s

    Returns:
        (float): drainage area, m**2; zero if C*I is not positive
    """
    denom = runoff_coeff * intensity_ms
    return flow / denom if denom > 0.0 else 0.0


def find_min_depth(idiameter, ymax, hradius_target,
                   steps=MIN_DEPTH_SEARCH_STEPS):
    """Find the smallest sampled depth whose hydraulic radius reaches a target

    Depth is sampled at ``steps`` equal increments from ``ymax/steps`` up to
    ``ymax``; the first sample meeting the target wins. Hydraulic radius
    increases monotonically with depth up to about 0.81 D, so the first
    crossing is the minimum to within one increment.

    Args:
        idiameter (float): pipe inner diameter, m
        ymax (float): maximum depth searched, m
        hradius_target (float): hydraulic radius to reach, m
        steps (int): number of depth increments

    Returns:
        (float): depth in meters, or None if no sample reaches the target
    """
    step_size = ymax / steps
    for i in range(1, steps + 1):
        ytest = i * step_size
        if circular_section(idiameter, ytest).hradius >= hradius_target:
            return ytest
    return None


def evaluate_cell(pipe, slope_pct, design):
    """Evaluate the drainage-area bounds of one pipe at one slope

    Args:
        pipe (PipeSpec): Commercial pipe
        slope_pct (float): Slope, percent
        design (DesignInput): Design parameters

    Returns:
        (ValidCell or InvalidCell): Result of the evaluation
    """
    idiameter = fu.mm_to_m(pipe.idiameter_mm)
    slope = fu.percent_to_fraction(slope_pct)
    intensity_ms = fu.mmhr_to_ms(design.intensity)

    # Upper bound: maximum fill ratio
    ymax = fu.percent_to_fraction(design.fill_ratio) * idiameter
    geom_max = circular_section(idiameter, ymax)
    tau_max = GAMMA_WATER * geom_max.hradius * slope

    if tau_max < MIN_TRACTIVE_FORCE:
        _logger.debug('{0:s} at {1:g}%: tau_max = {2:0.4f} < {3:0.2f}'
                      .format(pipe.name, slope_pct, tau_max,
                              MIN_TRACTIVE_FORCE))
        return InvalidCell(LOW_TAU_MAX, tau_max, slope_pct)

    hyd_max = semi_empirical_flow(geom_max.hradius, slope, geom_max.area,
                                  design.froughness, design.kin_visc)
    area_max = drainage_area(hyd_max.flow, design.runoff_coeff, intensity_ms)

    # Lower bound: depth where tractive force equals the minimum
    hradius_target = MIN_TRACTIVE_FORCE / (GAMMA_WATER * slope)
    ymin = find_min_depth(idiameter, ymax, hradius_target)

    if ymin is None:
        _logger.warning('{0:s} at {1:g}%: no sampled depth reaches '
                        'Rh = {2:0.4E} m'
                        .format(pipe.name, slope_pct, hradius_target))
        return InvalidCell(MIN_DEPTH_NOT_FOUND, tau_max, slope_pct)

    geom_min = circular_section(idiameter, ymin)
    hyd_min = semi_empirical_flow(geom_min.hradius, slope, geom_min.area,
                                  design.froughness, design.kin_visc)
    area_min = drainage_area(hyd_min.flow, design.runoff_coeff, intensity_ms)

    _logger.debug('{0:s} at {1:g}%: ymin = {2:0.4E} m, ymax = {3:0.4E} m, '
                  'Amin = {4:0.4E} m**2, Amax = {5:0.4E} m**2'
                  .format(pipe.name, slope_pct, ymin, ymax, area_min,
                          area_max))

    if area_min > area_max:
        _logger.warning('{0:s} at {1:g}%: minimum drainage area exceeds '
                        'maximum'.format(pipe.name, slope_pct))
        return InvalidCell(MIN_GREATER_THAN_MAX, tau_max, slope_pct)

    return ValidCell(area_min=area_min,
                     area_max=area_max,
                     flow_min=fu.m3s_to_lps(hyd_min.flow),
                     flow_max=fu.m3s_to_lps(hyd_max.flow),
                     tau_max=tau_max,
                     slope=slope_pct)


def evaluate_matrix(design, pipes=SANITARY_PIPES, slopes=DEFAULT_SLOPES):
    """Evaluate every pipe of a catalog at every slope

    Args:
        design (DesignInput): Design parameters
        pipes ([PipeSpec]): Pipe catalog, in display order
        slopes ([float]): Slopes, percent, in display order

    Returns:
        ([(PipeSpec, OrderedDict)]): One row per pipe, each mapping slope to
          its result cell

    Raises:
        InvalidInputError: Design parameters are out of domain.
    """
    validate_design_input(design, slopes)

    _logger.debug('Evaluating {0:d} pipes at {1:d} slopes'
                  .format(len(pipes), len(slopes)))

    rows = []
    for pipe in pipes:
        cells = OrderedDict()
        for slope in slopes:
            cells[slope] = evaluate_cell(pipe, slope, design)
        rows.append((pipe, cells))

    return rows


def format_cell(cell):
    """Text rendering of a matrix cell"""
    if not cell.is_valid:
        return '{0:s}\ntau={1:0.2f}'.format(REASON_LABELS[cell.reason],
                                            cell.tau_max)

    return '{0:,.1f} - {1:,.1f} m2\nQmax: {2:0.1f} l/s  tau: {3:0.2f}' \
        .format(cell.area_min, cell.area_max, cell.flow_max, cell.tau_max)


def matrix_table(rows, tablefmt='grid'):
    """Display the pluvial design matrix as a table

        Args:
            rows ([(PipeSpec, OrderedDict)]): Result of evaluate_matrix()
            tablefmt (str): Table format; see `tabulate` documentation

        Returns:
            str: Text table of permissible drainage areas"""
    if not rows:
        return ''

    slopes = list(rows[0][1].keys())
    headers = ['Pipe', 'ID (mm)'] \
        + ['S = {0:0.1f}%'.format(slope) for slope in slopes]

    table = []
    for pipe, cells in rows:
        table.append([pipe.name, '{0:0.1f}'.format(pipe.idiameter_mm)]
                     + [format_cell(cells[slope]) for slope in slopes])

    return tabulate(table, headers=headers, tablefmt=tablefmt)


fields = (
    Field('intensity',    'design rainfall intensity',  'mm/hr',
          DEFAULT_INTENSITY),
    Field('runoff_coeff', 'runoff coefficient',         '',
          DEFAULT_RUNOFF_COEFF),
    Field('froughness',   'absolute pipe roughness',    'm',      DEFAULT_KS),
    Field('kin_visc',     'kinematic viscosity',        'm**2/s',
          DEFAULT_KIN_VISC),
    Field('fill_ratio',   'maximum fill ratio (percent)', '',
          DEFAULT_FILL_RATIO),
)


def design_from_input(idata):
    """Convert Pint input quantities to a DesignInput"""
    return DesignInput(
        intensity=idata['intensity'].to('mm/hr').magnitude,
        runoff_coeff=idata['runoff_coeff'].to('').magnitude,
        froughness=idata['froughness'].to('m').magnitude,
        kin_visc=idata['kin_visc'].to('m**2/s').magnitude,
        fill_ratio=idata['fill_ratio'].to('').magnitude)


def generate_report(design, slopes, pipes=SANITARY_PIPES):
    """Evaluate the matrix and return it as a titled text table"""
    rows = evaluate_matrix(design, pipes, slopes)

    header = 'Permissible drainage area, I = {0:g} mm/hr, C = {1:g}, ' \
             'ks = {2:0.3E} m, nu = {3:0.3E} m2/s, y/D = {4:g}%, ' \
             'tau >= {5:0.2f} kg/m2' \
             .format(design.intensity, design.runoff_coeff, design.froughness,
                     design.kin_visc, design.fill_ratio, MIN_TRACTIVE_FORCE)

    return header + '\n' + matrix_table(rows)


def slope_list(text):
    """Parse a comma-separated list of slopes, percent"""
    return [float(tok) for tok in text.split(',') if tok.strip()]


def parse_args(args):
    """Parse command line parameters

    Args:
      args ([str]): command line parameters as list of strings

    Returns:
      :obj:`argparse.Namespace`: command line parameters namespace
    """
    parser = base_parser('Pluvial drainage area matrix calculator')
    parser.add_argument(
        '--slopes',
        dest='slopes',
        help='comma-separated slopes to evaluate, percent (e.g. 0.5,1,2)',
        type=slope_list,
        default=list(DEFAULT_SLOPES),
        metavar='PCT[,PCT...]')
    parser.add_argument(
        '--material',
        dest='material',
        help='take absolute roughness from pipe surface material name',
        default=None)
    parser.add_argument(
        '--fouled',
        dest='is_clean',
        help='use fouled-surface roughness with --material',
        action='store_false')
    return parser.parse_args(args)


def main(args):
    """Main entry point allowing external calls

    Args:
        args ([str]): command line parameter list
    """
    args = parse_args(args)
    setup_logging(args.loglevel)

    froughness = None
    if args.material:
        try:
            froughness = material_roughness(args.material, args.is_clean)
        except ValueError as err:
            _logger.error('Cannot set roughness from material: {0:s}'
                          .format(str(err)))
            print('! Unknown pipe material "{0:s}"'.format(args.material))
            return

    def solver(idata):
        design = design_from_input(idata)
        if froughness is not None:
            design = design._replace(froughness=froughness)
        return generate_report(design, args.slopes)

    process_files(args.file, fields, solver, 'flowcore_pluvial')


def run():
    """Entry point for console_scripts
    """
    main(sys.argv[1:])


if __name__ == "__main__":
    run()
