"""Command line plumbing shared by the flowcore console scripts"""

import argparse
import logging
import sys

from . import _logger
from flowcore.errors import FlowcoreError
from flowcore.input import InputLine, extract_case_input
from flowcore import __version__

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"


def base_parser(description):
    """Create an argument parser with the options common to all tools

    Args:
      description (str): tool description shown in ``--help``

    Returns:
      :obj:`argparse.ArgumentParser`: parser with version, input file, and
        verbosity options
    """
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        '--version',
        action='version',
        version='flowcore {ver}'.format(ver=__version__))
    parser.add_argument(
        dest="file",
        help="input files (STDIN if not specified)",
        type=argparse.FileType('r'),
        nargs='*',
        default=[sys.stdin],
        metavar="FILE")
    parser.add_argument(
        '-v',
        '--verbose',
        dest="loglevel",
        help="set loglevel to INFO",
        action='store_const',
        const=logging.INFO)
    parser.add_argument(
        '-vv',
        '--very-verbose',
        dest="loglevel",
        help="set loglevel to DEBUG",
        action='store_const',
        const=logging.DEBUG)
    return parser


def setup_logging(loglevel):
    """Setup basic logging

    Args:
      loglevel (int): minimum loglevel for emitting messages
    """
    logformat = "[%(asctime)s] %(levelname)s:%(name)s: %(message)s"
    logging.basicConfig(level=loglevel, stream=sys.stdout,
                        format=logformat, datefmt="%Y-%m-%d %H:%M:%S")


def solve_case(iline, fields, solver):
    """Parse and solve a single case, trapping calculation errors

    Args:
        iline (InputLine): Pre-processed input data line
        fields ([Field]): Ordered field definitions for the tool
        solver (callable): Takes the dict of input quantities and returns the
          text report for the case

    Returns:
        (dict): ``status``, ``msg``, and ``output`` (report text, empty on
          error)
    """
    results = extract_case_input(iline, fields)
    results['output'] = ''

    if results['status'] == 'ok':
        _logger.debug('Case input read successfully')
    elif results['status'] == 'warning':
        _logger.warning('Case read with warning: {0:s}'
                        .format(results['msg']))
    else:
        _logger.error('Case not processed due to input '
                      'error: {0:s}'.format(results['msg']))
        return results

    try:
        results['output'] = solver(results['input'])
    except FlowcoreError as err:
        _logger.error('Case not solved: {0:s}'.format(str(err)))
        results['status'] = 'error'
        results['msg'] = str(err)
        return results

    if results['status'] == 'ok':
        results['msg'] = 'Calculation complete'

    return results


def process_files(files, fields, solver, appname):
    """Run every data line of every input file through a solver and print
    the reports

    Args:
        files ([file]): Open input files
        fields ([Field]): Ordered field definitions for the tool
        solver (callable): Case solver; see :func:`solve_case`
        appname (str): Tool name for log messages

    Returns:
        (int): number of failed cases
    """
    _logger.info("Starting {0:s}".format(appname))

    nfailed = 0
    for fh in files:
        _logger.info('Processing file: {0:s}'.format(fh.name))

        for ict, rawline in enumerate(fh):
            iline = InputLine(line=rawline, ipos=ict+1)
            _logger.debug(iline.as_log())

            if iline.typecode != 'D':
                continue

            _logger.info('Processing data line:')
            _logger.info(iline.as_log())

            results = solve_case(iline, fields, solver)

            if results['status'] in ('ok', 'warning'):
                print(results['output'])
                print()
            else:
                # Report errors with line and source file name and carry on
                # with the next case
                nfailed += 1
                print('! Case defined on line {0:d} of {1:s} failed: {2:s}'
                      .format(iline.ipos, fh.name, results['msg']))

    _logger.info("Ending {0:s}".format(appname))

    return nfailed
