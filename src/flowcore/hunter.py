#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Probable maximum flow from Hunter fixture units.

Flow is interpolated on the Hunter probable-demand curves for systems with
predominantly flush tanks and for systems with predominantly flush valves.

Then run `pip install .` which will install the command `flowcore_hunter`
inside your current environment.
"""

from collections import namedtuple
import sys

from tabulate import tabulate

from . import _logger
from flowcore.catalog import HUNTER_TANK, HUNTER_FLUSH_VALVE
from flowcore.cli import base_parser, setup_logging, process_files
from flowcore.errors import InvalidInputError
from flowcore.input import Field
from flowcore.interpolation import interpolate

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"

HunterFlows = namedtuple('HunterFlows', ['tank', 'flush_valve'])


def interpolate_hunter_flow(table, units):
    """Probable maximum flow for a number of Hunter units

    Args:
        table ([(float, float)]): Hunter curve as (units, L/s) pairs
        units (float): Hunter fixture units

    Returns:
        (float): probable maximum flow, L/s

    Raises:
        InvalidInputError: Units are not positive.
    """
    if not units > 0.0:
        raise InvalidInputError('Hunter units must be positive')

    return interpolate(table, units)


def probable_flows(units):
    """Probable maximum flow on both Hunter curves"""
    flows = HunterFlows(tank=interpolate_hunter_flow(HUNTER_TANK, units),
                        flush_valve=interpolate_hunter_flow(HUNTER_FLUSH_VALVE,
                                                            units))
    _logger.debug('{0:g} UH: tank {1:0.3f} l/s, flush valve {2:0.3f} l/s'
                  .format(units, flows.tank, flows.flush_valve))
    return flows


fields = (
    Field('units', 'Hunter fixture units', '', None),
)


def generate_report(units, tablefmt='psql'):
    """Return probable flows for a number of Hunter units as a text table"""
    flows = probable_flows(units)
    rows = [
        ('Flush tank', '{0:0.3f}'.format(flows.tank)),
        ('Flush valve', '{0:0.3f}'.format(flows.flush_valve)),
    ]
    return tabulate(rows,
                    headers=['{0:g} UH'.format(units), 'Flow (l/s)'],
                    tablefmt=tablefmt)


def parse_args(args):
    """Parse command line parameters

    Args:
      args ([str]): command line parameters as list of strings

    Returns:
      :obj:`argparse.Namespace`: command line parameters namespace
    """
    parser = base_parser('Probable maximum flow from Hunter units')
    return parser.parse_args(args)


def main(args):
    """Main entry point allowing external calls

    Args:
        args ([str]): command line parameter list
    """
    args = parse_args(args)
    setup_logging(args.loglevel)

    def solver(idata):
        return generate_report(idata['units'].to('').magnitude)

    process_files(args.file, fields, solver, 'flowcore_hunter')


def run():
    """Entry point for console_scripts
    """
    main(sys.argv[1:])


if __name__ == "__main__":
    run()
