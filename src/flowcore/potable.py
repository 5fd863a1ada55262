#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Potable water pipe sizing by limit velocity.

The theoretical diameter is the one whose full-bore area carries the design
flow at the limit velocity. The selected pipe is the smallest commercial PVC
SCH40 pipe whose real inner diameter is at least the theoretical one.

Then run `pip install .` which will install the command `flowcore_potable`
inside your current environment.
"""

from collections import namedtuple
from math import sqrt
import sys

import scipy.constants as sc
from tabulate import tabulate

from . import _logger
from flowcore.catalog import POTABLE_PIPES
from flowcore.cli import base_parser, setup_logging, process_files
from flowcore.constants import DEFAULT_LIMIT_VELOCITY
from flowcore.errors import InvalidInputError, OutOfCommercialRangeError
from flowcore.input import Field
import flowcore.units as fu

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"

PotableSelection = namedtuple('PotableSelection',
                              ['theoretical_diameter_mm', 'pipe'])


def select_potable_diameter(flow_lps, limit_velocity, pipes=POTABLE_PIPES):
    """Select the smallest commercial pipe able to carry a design flow at or
    below a limit velocity

    Args:
        flow_lps (float): design flow, L/s
        limit_velocity (float): limit velocity, m/s
        pipes ([PotablePipeSpec]): Catalog, ascending by inner diameter

    Returns:
        (PotableSelection): theoretical diameter (mm) and chosen catalog entry

    Raises:
        InvalidInputError: Flow or velocity is not positive.
        OutOfCommercialRangeError: No catalog pipe is large enough.
    """
    if not flow_lps > 0.0:
        raise InvalidInputError('Design flow must be positive')
    if not limit_velocity > 0.0:
        raise InvalidInputError('Limit velocity must be positive')

    min_area = fu.lps_to_m3s(flow_lps) / limit_velocity
    theoretical_mm = fu.m_to_mm(sqrt(4.0 * min_area / sc.pi))

    _logger.debug('Required area {0:0.4E} m**2, theoretical diameter '
                  '{1:0.2f} mm'.format(min_area, theoretical_mm))

    for pipe in pipes:
        if pipe.idiameter_mm >= theoretical_mm:
            return PotableSelection(theoretical_mm, pipe)

    raise OutOfCommercialRangeError(
        'Theoretical diameter {0:0.1f} mm is outside the commercial range '
        '(largest inner diameter {1:0.1f} mm)'
        .format(theoretical_mm, pipes[-1].idiameter_mm if pipes else 0.0))


fields = (
    Field('vol_flow',  'design flow',     'liter/second', None),
    Field('vlimit',    'limit velocity',  'm/s',
          DEFAULT_LIMIT_VELOCITY),
)


def generate_report(flow_lps, limit_velocity, tablefmt='psql'):
    """Select a pipe and return the selection as a text table"""
    sel = select_potable_diameter(flow_lps, limit_velocity)

    rows = [
        ('Design flow (l/s)', '{0:0.3f}'.format(flow_lps)),
        ('Limit velocity (m/s)', '{0:0.2f}'.format(limit_velocity)),
        ('Theoretical diameter (mm)',
         '{0:0.2f}'.format(sel.theoretical_diameter_mm)),
        ('Commercial pipe', sel.pipe.nominal),
        ('Nominal ISO (mm)', '{0:d}'.format(sel.pipe.nominal_mm)),
        ('Real inner diameter (mm)', '{0:0.2f}'.format(sel.pipe.idiameter_mm)),
    ]

    return 'Potable water sizing (PVC SCH40)\n' \
        + tabulate(rows, tablefmt=tablefmt)


def parse_args(args):
    """Parse command line parameters

    Args:
      args ([str]): command line parameters as list of strings

    Returns:
      :obj:`argparse.Namespace`: command line parameters namespace
    """
    parser = base_parser('Potable water pipe sizing by limit velocity')
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
            idata['vlimit'].to('m/s').magnitude)

    process_files(args.file, fields, solver, 'flowcore_potable')


def run():
    """Entry point for console_scripts
    """
    main(sys.argv[1:])


if __name__ == "__main__":
    run()
