"""
mobius — Möbius transformations of the extended complex plane.

Computes the fractional-linear map defined by three point correspondences,
evaluates it at points, and recovers the circles/lines that curve families
become under it.
"""

__version__ = "0.1.0"
