"""Unit conversions shared by the flowcore solvers.

The solvers work in SI base units (m, m**2, m**3/s, m/s) while the user-facing
inputs are in millimeters, percent, liters per second, and mm/hr. Keeping the
factors in one place stops the call sites from drifting apart."""

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"


def mm_to_m(length_mm):
    """Convert millimeters to meters"""
    return length_mm / 1000.0


def m_to_mm(length_m):
    """Convert meters to millimeters"""
    return length_m * 1000.0


def percent_to_fraction(pct):
    """Convert a percentage (slope, fill ratio) to a fraction"""
    return pct / 100.0


def mmhr_to_ms(intensity_mmhr):
    """Convert rainfall intensity from mm/hr to m/s"""
    return intensity_mmhr / 3600000.0


def lps_to_m3s(flow_lps):
    """Convert volumetric flow from liters per second to cubic meters per
    second"""
    return flow_lps / 1000.0


def m3s_to_lps(flow_m3s):
    """Convert volumetric flow from cubic meters per second to liters per
    second"""
    return flow_m3s * 1000.0
