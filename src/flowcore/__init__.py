# -*- coding: utf-8 -*-
from importlib.metadata import version, PackageNotFoundError
from pint import UnitRegistry

try:
    # Change here if project is renamed and does not equal the package name
    dist_name = 'flowcore'
    __version__ = version(dist_name)
except PackageNotFoundError:
    __version__ = 'unknown'

import logging
from logging import NullHandler

# Set default logging handler to avoid "No handler found" warnings.
_logger = logging.getLogger(__name__)
_logger.addHandler(NullHandler())

# Pint unit registry
# Share with all functions in an application  via 'from . import ureg, Q_
ureg = UnitRegistry()
Q_ = ureg.Quantity
