"""Offline Monte Carlo path tracer with a BVH-accelerated CPU renderer."""

__version__ = "0.1.0"
