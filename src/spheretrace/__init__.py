"""
spheretrace: a small Monte Carlo path tracer for scenes made of spheres.
"""

__version__ = "0.1.0"
