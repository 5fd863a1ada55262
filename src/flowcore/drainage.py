#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Sanitary drainage pipe sizing with the Manning equation.

The commercial catalog is scanned in ascending order of inner diameter; the
first pipe whose free-surface capacity at the design fill ratio meets the
design flow is selected.

Then run `pip install .` which will install the command `flowcore_drainage`
inside your current environment.
"""

from collections import namedtuple
import sys

from tabulate import tabulate

from . import _logger
from flowcore.catalog import SANITARY_PIPES
from flowcore.cli import base_parser, setup_logging, process_files
from flowcore.constants import (DEFAULT_DRAINAGE_SLOPE, DEFAULT_MANNING_N,
                                DEFAULT_DRAINAGE_FILL_RATIO)
from flowcore.errors import InvalidInputError, NoSuitablePipeError
from flowcore.flow import manning_flow
from flowcore.geometry import circular_section
from flowcore.input import Field
import flowcore.units as fu

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"

DrainageSelection = namedtuple('DrainageSelection',
                               ['pipe', 'velocity', 'capacity',
                                'water_depth'])

DrainageRow = namedtuple('DrainageRow',
                         ['pipe', 'capacity', 'velocity', 'water_depth',
                          'is_viable'])


def validate_drainage_input(flow_lps, slope_pct, manning_n, fill_ratio_pct):
    """Check drainage sizing parameters

    Raises:
        InvalidInputError: A parameter is outside its physical domain.
    """
    if not flow_lps > 0.0:
        raise InvalidInputError('Design flow must be positive')
    if not slope_pct > 0.0:
        raise InvalidInputError('Slope must be positive')
    if not manning_n > 0.0:
        raise InvalidInputError('Manning coefficient must be positive')
    if not 0.0 < fill_ratio_pct <= 100.0:
        raise InvalidInputError('Fill ratio must be in (0, 100] percent')


def pipe_capacity(pipe, slope, manning_n, fill_ratio):
    """Manning capacity of a pipe flowing at a given fill ratio

    Args:
        pipe (PipeSpec): Commercial pipe
        slope (float): slope, m/m
        manning_n (float): Manning coefficient
        fill_ratio (float): depth to diameter ratio, fraction

    Returns:
        (tuple): (GeometrySample, FlowResult, depth in meters)
    """
    idiameter = fu.mm_to_m(pipe.idiameter_mm)
    depth = idiameter * fill_ratio
    geom = circular_section(idiameter, depth)
    hyd = manning_flow(geom.area, manning_n, geom.hradius, slope)
    return geom, hyd, depth


def select_drainage_diameter(flow_lps, slope_pct, manning_n, fill_ratio_pct,
                             pipes=SANITARY_PIPES):
    """Select the smallest commercial pipe whose Manning capacity at the
    design fill ratio meets the design flow

    Args:
        flow_lps (float): design flow, L/s
        slope_pct (float): slope, percent
        manning_n (float): Manning coefficient
        fill_ratio_pct (float): maximum fill ratio y/D, percent
        pipes ([PipeSpec]): Catalog, ascending by inner diameter

    Returns:
        (DrainageSelection): chosen pipe, velocity of the design flow (m/s),
          capacity (L/s), and water depth (mm)

    Raises:
        InvalidInputError: A parameter is out of domain.
        NoSuitablePipeError: No catalog pipe has enough capacity.
    """
    validate_drainage_input(flow_lps, slope_pct, manning_n, fill_ratio_pct)

    design_flow = fu.lps_to_m3s(flow_lps)
    slope = fu.percent_to_fraction(slope_pct)
    fill_ratio = fu.percent_to_fraction(fill_ratio_pct)

    for pipe in pipes:
        geom, hyd, depth = pipe_capacity(pipe, slope, manning_n, fill_ratio)
        _logger.debug('{0:s}: capacity {1:0.4E} m**3/s'
                      .format(pipe.name, hyd.flow))
        if hyd.flow >= design_flow:
            return DrainageSelection(pipe=pipe,
                                     velocity=design_flow / geom.area,
                                     capacity=fu.m3s_to_lps(hyd.flow),
                                     water_depth=fu.m_to_mm(depth))

    raise NoSuitablePipeError('No commercial pipe carries {0:0.2f} l/s at '
                              'S = {1:g}%, n = {2:g}, y/D = {3:g}%'
                              .format(flow_lps, slope_pct, manning_n,
                                      fill_ratio_pct))


def evaluate_drainage_catalog(flow_lps, slope_pct, manning_n, fill_ratio_pct,
                              pipes=SANITARY_PIPES):
    """Evaluate the Manning capacity of every pipe in a catalog

    Args:
        flow_lps (float): design flow, L/s
        slope_pct (float): slope, percent
        manning_n (float): Manning coefficient
        fill_ratio_pct (float): maximum fill ratio y/D, percent
        pipes ([PipeSpec]): Catalog, in display order

    Returns:
        ([DrainageRow]): capacity (L/s), velocity at capacity (m/s), water
          depth (mm), and viability of each pipe

    Raises:
        InvalidInputError: A parameter is out of domain.
    """
    validate_drainage_input(flow_lps, slope_pct, manning_n, fill_ratio_pct)

    design_flow = fu.lps_to_m3s(flow_lps)
    slope = fu.percent_to_fraction(slope_pct)
    fill_ratio = fu.percent_to_fraction(fill_ratio_pct)

    rows = []
    for pipe in pipes:
        geom, hyd, depth = pipe_capacity(pipe, slope, manning_n, fill_ratio)
        rows.append(DrainageRow(pipe=pipe,
                                capacity=fu.m3s_to_lps(hyd.flow),
                                velocity=hyd.velocity,
                                water_depth=fu.m_to_mm(depth),
                                is_viable=hyd.flow >= design_flow))
    return rows


def catalog_table(rows, tablefmt='psql'):
    """Display the capacity of each catalog pipe as a table"""
    headers = ['Pipe', 'ID (mm)', 'Capacity (l/s)', 'Velocity (m/s)',
               'Depth (mm)', 'Status']
    table = [[row.pipe.name,
              '{0:0.1f}'.format(row.pipe.idiameter_mm),
              '{0:0.2f}'.format(row.capacity),
              '{0:0.2f}'.format(row.velocity),
              '{0:0.1f}'.format(row.water_depth),
              'OK' if row.is_viable else 'Insufficient']
             for row in rows]
    return tabulate(table, headers=headers, tablefmt=tablefmt)


fields = (
    Field('vol_flow',   'design flow',                  'liter/second', None),
    Field('slope',      'slope (percent)',              '',
          DEFAULT_DRAINAGE_SLOPE),
    Field('manning_n',  'Manning coefficient',          '',
          DEFAULT_MANNING_N),
    Field('fill_ratio', 'maximum fill ratio (percent)', '',
          DEFAULT_DRAINAGE_FILL_RATIO),
)


def generate_report(flow_lps, slope_pct, manning_n, fill_ratio_pct,
                    show_table=False, tablefmt='psql'):
    """Select a pipe and return the selection (and optionally the catalog
    capacity table) as text"""
    header = 'Drainage sizing (Manning), Q = {0:0.2f} l/s, S = {1:g}%, ' \
             'n = {2:g}, y/D = {3:g}%' \
             .format(flow_lps, slope_pct, manning_n, fill_ratio_pct)

    sections = [header]

    if show_table:
        sections.append(catalog_table(
            evaluate_drainage_catalog(flow_lps, slope_pct, manning_n,
                                      fill_ratio_pct), tablefmt=tablefmt))

    try:
        sel = select_drainage_diameter(flow_lps, slope_pct, manning_n,
                                       fill_ratio_pct)
    except NoSuitablePipeError as err:
        if not show_table:
            raise
        _logger.warning(str(err))
        sections.append('No suitable pipe: {0:s}'.format(str(err)))
        return '\n'.join(sections)

    rows = [
        ('Recommended pipe', sel.pipe.name),
        ('Inner diameter (mm)', '{0:0.1f}'.format(sel.pipe.idiameter_mm)),
        ('Capacity (l/s)', '{0:0.2f}'.format(sel.capacity)),
        ('Flow velocity (m/s)', '{0:0.2f}'.format(sel.velocity)),
        ('Water depth (mm)', '{0:0.1f}'.format(sel.water_depth)),
    ]
    sections.append(tabulate(rows, tablefmt=tablefmt))

    return '\n'.join(sections)


def parse_args(args):
    """Parse command line parameters

    Args:
      args ([str]): command line parameters as list of strings

    Returns:
      :obj:`argparse.Namespace`: command line parameters namespace
    """
    parser = base_parser('Sanitary drainage pipe sizing (Manning)')
    parser.add_argument(
        '--table',
        dest='show_table',
        help='also print the capacity of every catalog pipe',
        action='store_true')
    return parser.parse_args(args)


def main(args):
    """Main entry point allowing external calls

    Args:
        args ([str]): command line parameter list
    """
    args = parse_args(args)
    setup_logging(args.loglevel)

    def solver(idata):
        return generate_report(
            idata['vol_flow'].to('liter/second').magnitude,
            idata['slope'].to('').magnitude,
            idata['manning_n'].to('').magnitude,
            idata['fill_ratio'].to('').magnitude,
            show_table=args.show_table)

    process_files(args.file, fields, solver, 'flowcore_drainage')


def run():
    """Entry point for console_scripts
    """
    main(sys.argv[1:])


if __name__ == "__main__":
    run()
