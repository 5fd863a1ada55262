"""Input processing utilities for reading flowcore case files.

A case file holds one calculation per data line; fields are whitespace
separated numbers in the units given by each tool's field table. Blank lines
and comment lines are skipped."""

from collections import namedtuple
from math import isnan

from . import _logger, Q_

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"

#: Description of one input field: tag, description, input units, and default
#: value (``None`` if the field is mandatory)
Field = namedtuple('Field', ['tag', 'description', 'units', 'default'])


class InputLine(object):
    """Categorized and tokenized line of user input

        Attributes:
            line (str): Original line of input text with newline(s) removed
            type (str): One of 'blank', 'comment', or 'data'
            typecode (str): One of 'B', 'C', or 'D', corresponding to type
            ipos (int): Line number in original file (count starts at 1)
            ntok (int): Number of tokens found (0 except for 'data' lines)
            token ((str)): Tokens parsed from line ('data' lines only,
              otherwise empty)

        Args:
            line (str): Original line of input text
            ipos (int): Line number in original file
            commentchar (str): leading character/string denoting that a line is
              a comment
    """

    def __init__(self, line, ipos=0, commentchar='#'):
        """Constructor """
        self.ipos = ipos

        self._line = line.rstrip('\r\n')
        self._token = ()

        tline = self._line.strip()

        if not tline:
            self._type = 'blank'
        elif commentchar and tline.startswith(commentchar):
            self._type = 'comment'
        else:
            self._type = 'data'
            self._token = tuple(tline.split())

    @property
    def line(self):
        """Original input line stripped of line terminators"""
        return self._line

    @property
    def type(self):
        """Type of input line; one of 'blank', 'comment', or 'data'"""
        return self._type

    @property
    def typecode(self):
        """Type code of input line; one of 'B', 'C', or 'D'"""
        return self._type[0].upper()

    @property
    def ntok(self):
        """Number of tokens found (0 except for 'data' lines)"""
        return len(self._token)

    @property
    def token(self):
        """Tokens parsed from line ('data' lines only, otherwise empty)"""
        return self._token

    def as_log(self, logfmt='{0:-6d} [{1:s}] {2:s}'):
        """Return line number (ipos), type code, and original line to assist
        in finding input errors.

            Args:
                logfmt (str): Format string for producing log output. Field 0
                  is the `ipos` attribute, field 1 is the type code, and field
                  2 is the `line` attribute

            Returns:
                (str): Formatted line with metadata
        """
        return logfmt.format(self.ipos, self.typecode, self._line)


def extract_case_input(iline, fields):
    """Extract case input from a pre-processed data line as Pint quantities

        Trailing fields that are not present on the line take their default
        values; a missing mandatory field or an unparseable token is an error.

        Args:
            iline (InputLine): Pre-processed input data line
            fields ([Field]): Ordered field definitions

        Returns:
            (dict): ``status`` ('ok', 'warning', or 'error'), ``msg``, and
              ``input`` (dict of Pint quantities keyed by field tag)
    """
    _logger.debug('Extracting input data for single case')

    results = {
        'status': 'ok',
        'msg':    'Proper token count ({0:d})'.format(iline.ntok),
        'input':  {}
    }
    idata = results['input']

    nmandatory = sum(1 for fld in fields if fld.default is None)
    if iline.ntok < nmandatory:
        results['status'] = 'error'
        results['msg'] = 'Too few tokens ({0:d} found, at least {1:d} ' \
                         'expected)'.format(iline.ntok, nmandatory)
        return results
    elif iline.ntok > len(fields):
        results['status'] = 'warning'
        results['msg'] = 'Too many tokens ({0:d} found, {1:d} expected)' \
                         .format(iline.ntok, len(fields))

    for i, fld in enumerate(fields):
        if i < iline.ntok:
            try:
                value = float(iline.token[i])
            except ValueError as err:
                _logger.error('Numeric parse failure, '
                              'field {0:d}, {1:s} "{2:s}": {3:s}'
                              .format(i, fld.tag, fld.description, str(err)))
                results['status'] = 'error'
                results['msg'] = 'Cannot parse values from input line, ' \
                                 'field {0:d}, "{1:s}"'.format(i, fld.tag)
                return results

            if isnan(value):
                results['status'] = 'error'
                results['msg'] = 'Cannot parse values from input line, ' \
                                 'field {0:d}, {1:s}, "{2:s}"' \
                                 .format(i, fld.tag, fld.description)
                return results
        else:
            value = fld.default

        idata[fld.tag] = Q_(value, fld.units)
        _logger.debug('{0:s} "{1:s}" is {2:0.4E~}'
                      .format(fld.tag, fld.description, idata[fld.tag]))

    _logger.info(results['status'] + ': ' + results['msg'])

    return results
