#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pytest import approx, raises

import flowcore.catalog as fc

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"


def test_sanitary_pipes():
    ids = [pipe.idiameter_mm for pipe in fc.SANITARY_PIPES]
    assert ids == sorted(ids)
    assert len(set(pipe.name for pipe in fc.SANITARY_PIPES)) == len(ids)

    return


def test_potable_pipes():
    assert len(fc.POTABLE_PIPES) == 11

    ids = [pipe.idiameter_mm for pipe in fc.POTABLE_PIPES]
    assert ids == sorted(ids)

    # SCH40 inner diameters
    assert fc.POTABLE_PIPES[0].nominal == '1/2"'
    assert fc.POTABLE_PIPES[0].nominal_mm == 15
    assert fc.POTABLE_PIPES[0].idiameter_mm == approx(15.80, abs=0.05)
    assert fc.POTABLE_PIPES[5].nominal == '2"'
    assert fc.POTABLE_PIPES[5].idiameter_mm == approx(52.50, abs=0.05)
    assert fc.POTABLE_PIPES[-1].nominal == '8"'
    assert fc.POTABLE_PIPES[-1].idiameter_mm == approx(202.72, abs=0.05)

    with raises(ValueError):
        fc.schedule_catalog((('bogus', 0.5, 15),), schedule='cheese')

    return


def test_hunter_curves():
    for curve in (fc.HUNTER_TANK, fc.HUNTER_FLUSH_VALVE):
        units = [pt[0] for pt in curve]
        flows = [pt[1] for pt in curve]
        assert units == sorted(units)
        assert flows == sorted(flows)

    # 3 gpm at 1 UH on the flush tank curve
    assert fc.HUNTER_TANK[0][0] == 1
    assert fc.HUNTER_TANK[0][1] == approx(0.189271, rel=1.0E-5)

    # Flush valve curve starts at 5 UH, 15 gpm
    assert fc.HUNTER_FLUSH_VALVE[0][0] == 5
    assert fc.HUNTER_FLUSH_VALVE[0][1] == approx(0.946353, rel=1.0E-5)

    return


def test_material_roughness():
    assert fc.material_roughness('cast iron', True) == approx(2.59E-4)
    assert fc.material_roughness('Steel tubes', False) == approx(1.0E-3)

    with raises(ValueError):
        fc.material_roughness('cheese', False)

    return
