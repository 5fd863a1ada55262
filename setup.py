#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
    Setup file for flowcore.

    Hydraulic and sanitary pipe sizing calculators: pluvial drainage-area
    matrix, Hunter-unit demand, potable water and drainage pipe selection.
"""

from setuptools import setup, find_packages

# Add here console scripts and other entry points in ini-style format
entry_points = """
[console_scripts]
# script_name = flowcore.module:function
flowcore_pluvial  = flowcore.pluvial:run
flowcore_hunter   = flowcore.hunter:run
flowcore_potable  = flowcore.potable:run
flowcore_drainage = flowcore.drainage:run
"""

install_requires = [
    'fluids',
    'numpy',
    'pint',
    'scipy',
    'tabulate',
]

extras_require = {
    'testing': ['pytest'],
}


def setup_package():
    setup(name='flowcore',
          version='1.0.4',
          description='Hydraulic and sanitary pipe sizing calculators',
          author='Victor Diaz',
          license='mit',
          package_dir={'': 'src'},
          packages=find_packages(where='src'),
          python_requires='>=3.8',
          install_requires=install_requires,
          extras_require=extras_require,
          entry_points=entry_points)


if __name__ == "__main__":
    setup_package()
