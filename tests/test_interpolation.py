#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pytest import approx, raises

from flowcore.catalog import HUNTER_TANK, HUNTER_FLUSH_VALVE
from flowcore.errors import InvalidInputError
from flowcore.hunter import interpolate_hunter_flow, probable_flows, main
from flowcore.interpolation import interpolate

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"


def test_interpolate():
    table = [(10, 1.0), (20, 2.0)]
    assert interpolate(table, 15) == 1.5
    assert interpolate(table, 12.5) == approx(1.25)
    assert interpolate(table, 10) == 1.0
    assert interpolate(table, 20) == 2.0

    # Clamped, never extrapolated
    assert interpolate(table, 5) == 1.0
    assert interpolate(table, 0) == 1.0
    assert interpolate(table, 25) == 2.0
    assert interpolate(table, 1.0E6) == 2.0

    assert interpolate([(3, 7.0)], 10) == 7.0

    with raises(ValueError):
        interpolate([], 1.0)

    return


def test_hunter_flow():
    gpm = 0.0630901964

    assert interpolate_hunter_flow(HUNTER_TANK, 10) \
        == approx(14.6 * gpm, rel=1.0E-6)
    assert interpolate_hunter_flow(HUNTER_FLUSH_VALVE, 10) \
        == approx(27.0 * gpm, rel=1.0E-6)

    # Between 20 UH (19.6 gpm) and 25 UH (21.5 gpm)
    assert interpolate_hunter_flow(HUNTER_TANK, 22.5) \
        == approx(20.55 * gpm, rel=1.0E-6)

    flows = probable_flows(2)
    assert flows.tank == approx(5.0 * gpm, rel=1.0E-6)
    # Below the start of the flush valve curve
    assert flows.flush_valve == approx(15.0 * gpm, rel=1.0E-6)

    with raises(InvalidInputError):
        interpolate_hunter_flow(HUNTER_TANK, 0.0)

    with raises(InvalidInputError):
        probable_flows(-3.0)

    assert probable_flows(37.5) == probable_flows(37.5)

    return


def test_cli(tmpdir, capsys):
    inp = tmpdir.join('hunter.inp')
    inp.write('10\n'
              '0\n')

    main([str(inp)])
    out = capsys.readouterr().out

    assert 'Flush tank' in out
    assert '0.921' in out
    assert '1.703' in out
    assert '! Case defined on line 2' in out

    return
