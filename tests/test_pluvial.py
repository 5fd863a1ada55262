#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pytest import approx, raises

from flowcore.catalog import PipeSpec, SANITARY_PIPES
from flowcore.errors import InvalidInputError
from flowcore.geometry import circular_section
import flowcore.pluvial as fp

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"

DESIGN = fp.DesignInput(intensity=100.0, runoff_coeff=0.9,
                        froughness=1.5E-6, kin_visc=1.01E-6)


def test_design_defaults():
    assert DESIGN.fill_ratio == approx(85.0)

    return


def test_low_tau_max():
    # A 100 mm pipe at 0.5% passes (tau_max = 0.1516), so use 95 mm
    # tau_max = 1000 * 0.3033 * 0.095 * 0.005 = 0.144
    cell = fp.evaluate_cell(PipeSpec('4"', 95.0), 0.5, DESIGN)
    assert not cell.is_valid
    assert cell.reason == fp.LOW_TAU_MAX
    assert cell.tau_max < 0.15
    assert cell.tau_max == approx(0.14405, rel=1.0E-3)
    assert cell.slope == approx(0.5)

    cell = fp.evaluate_cell(SANITARY_PIPES[0], 0.5, DESIGN)
    assert not cell.is_valid
    assert cell.reason == fp.LOW_TAU_MAX

    return


def test_valid_cell():
    cell = fp.evaluate_cell(PipeSpec('8"', 200.0), 2.0, DESIGN)
    assert cell.is_valid
    assert cell.tau_max == approx(1.21306, rel=1.0E-3)
    assert cell.slope == approx(2.0)
    assert cell.area_min > 0.0
    assert cell.area_max > 0.0
    assert cell.area_min <= cell.area_max
    assert 0.0 < cell.flow_min < cell.flow_max

    # Area bound is the rational-method area for the bound flow (L/s)
    intensity_ms = 100.0 / 3600000.0
    assert cell.area_max == approx(cell.flow_max / 1000.0
                                   / (0.9 * intensity_ms))
    assert cell.area_min == approx(cell.flow_min / 1000.0
                                   / (0.9 * intensity_ms))

    return


def test_fill_ratio_input():
    pipe = PipeSpec('8"', 200.0)
    full = fp.evaluate_cell(pipe, 2.0, DESIGN)
    half = fp.evaluate_cell(pipe, 2.0, DESIGN._replace(fill_ratio=50.0))
    assert half.is_valid
    assert half.area_max < full.area_max
    assert half.tau_max < full.tau_max

    return


def test_min_greater_than_max():
    # Roughness this large makes the log argument exceed 1 and the
    # velocities negative, inverting the bounds
    design = DESIGN._replace(froughness=5.0)
    cell = fp.evaluate_cell(PipeSpec('8"', 200.0), 2.0, design)
    assert not cell.is_valid
    assert cell.reason == fp.MIN_GREATER_THAN_MAX
    assert cell.tau_max == approx(1.21306, rel=1.0E-3)

    return


def test_min_depth_not_found(monkeypatch):
    monkeypatch.setattr(fp, 'find_min_depth', lambda *args, **kwargs: None)
    cell = fp.evaluate_cell(PipeSpec('8"', 200.0), 2.0, DESIGN)
    assert not cell.is_valid
    assert cell.reason == fp.MIN_DEPTH_NOT_FOUND
    assert cell.tau_max > 0.15

    return


def test_find_min_depth():
    D = 0.2
    ymax = 0.85 * D
    step = ymax / 200
    target = 0.15 / (1000.0 * 0.02)

    ymin = fp.find_min_depth(D, ymax, target)
    assert ymin is not None
    assert circular_section(D, ymin).hradius >= target
    assert circular_section(D, ymin - step).hradius < target

    # Target beyond the largest hydraulic radius of the section
    assert fp.find_min_depth(D, ymax, D) is None

    # Coarser scans stay within their own resolution
    ycoarse = fp.find_min_depth(D, ymax, target, steps=20)
    assert abs(ycoarse - ymin) <= ymax / 20

    return


def test_drainage_area():
    assert fp.drainage_area(1.0, 0.5, 2.0) == approx(1.0)
    assert fp.drainage_area(1.0, 0.0, 2.0) == 0.0
    assert fp.drainage_area(1.0, 0.5, 0.0) == 0.0

    return


def test_evaluate_matrix():
    slopes = [2.0, 0.5, 1.0]
    rows = fp.evaluate_matrix(DESIGN, SANITARY_PIPES, slopes)

    assert [pipe for pipe, cells in rows] == list(SANITARY_PIPES)
    for pipe, cells in rows:
        assert list(cells.keys()) == slopes
        for slope, cell in cells.items():
            assert cell.slope == slope
            if cell.is_valid:
                assert cell.area_min <= cell.area_max

    # Largest pipe at steepest slope always self-cleans
    assert rows[-1][1][2.0].is_valid

    # Pure function of its inputs
    assert fp.evaluate_matrix(DESIGN, SANITARY_PIPES, slopes) == rows

    return


def test_invalid_design():
    with raises(InvalidInputError):
        fp.evaluate_matrix(DESIGN._replace(intensity=0.0))

    with raises(InvalidInputError):
        fp.evaluate_matrix(DESIGN._replace(runoff_coeff=1.5))

    with raises(InvalidInputError):
        fp.evaluate_matrix(DESIGN._replace(froughness=-1.0E-6))

    with raises(InvalidInputError):
        fp.evaluate_matrix(DESIGN._replace(kin_visc=0.0))

    with raises(InvalidInputError):
        fp.evaluate_matrix(DESIGN._replace(fill_ratio=120.0))

    with raises(InvalidInputError):
        fp.evaluate_matrix(DESIGN, SANITARY_PIPES, [1.0, 0.0])

    return


def test_matrix_table():
    rows = fp.evaluate_matrix(DESIGN)
    tbl = fp.matrix_table(rows)
    assert 'S = 0.5%' in tbl
    assert 'S = 2.0%' in tbl
    for pipe in SANITARY_PIPES:
        assert pipe.name in tbl
    assert 'Tractive force < 0.15' in tbl
    assert 'Qmax' in tbl

    assert fp.matrix_table([]) == ''

    return


def test_cli(tmpdir, capsys):
    inp = tmpdir.join('pluvial.inp')
    inp.write('# I      C    ks       nu       fill\n'
              '100.0  0.9\n'
              '\n'
              '80.0   0.7  1.5E-6   1.01E-6  75\n'
              '-5.0   0.9\n'
              'heavy  0.9\n')

    fp.main([str(inp)])
    out = capsys.readouterr().out

    assert out.count('Permissible drainage area') == 2
    assert 'y/D = 75%' in out
    assert '! Case defined on line 5 of {0:s} failed: Rainfall intensity ' \
           'must be positive'.format(str(inp)) in out
    assert '! Case defined on line 6' in out

    return


def test_cli_slopes(tmpdir, capsys):
    inp = tmpdir.join('pluvial.inp')
    inp.write('100.0  0.9\n')

    fp.main(['--slopes', '1.5,3.0', str(inp)])
    out = capsys.readouterr().out

    assert 'S = 1.5%' in out
    assert 'S = 3.0%' in out
    assert 'S = 0.5%' not in out

    # Slope list followed by the input file
    args = fp.parse_args(['--slopes', '1.5,3.0', str(inp)])
    assert args.slopes == approx([1.5, 3.0])
    assert args.file[0].name == str(inp)
    args.file[0].close()

    assert fp.slope_list('0.5, 1,2') == approx([0.5, 1.0, 2.0])
    with raises(SystemExit):
        fp.parse_args(['--slopes', '1.5,steep', str(inp)])

    return


def test_cli_default_design(tmpdir, capsys):
    inp = tmpdir.join('pluvial.inp')
    inp.write('80.0\n')

    fp.main([str(inp)])
    out = capsys.readouterr().out

    assert 'I = 80 mm/hr, C = 0.9,' in out
    assert '! Case defined' not in out

    return


def test_cli_material(tmpdir, capsys):
    inp = tmpdir.join('pluvial.inp')
    inp.write('100.0  0.9\n')

    fp.main(['--material', 'cast iron', str(inp)])
    out = capsys.readouterr().out
    assert 'ks = 2.590E-04 m' in out

    fp.main(['--material', 'cheese', str(inp)])
    out = capsys.readouterr().out
    assert '! Unknown pipe material "cheese"' in out
    assert 'Permissible drainage area' not in out

    return
