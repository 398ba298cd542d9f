"""Basic Income vs. Basic Job Simulator

A tiny, readable Monte Carlo comparison of two competing economic policies.
Uses NumPy for seeded, reproducible randomness and summary statistics.
"""

__version__ = "0.1.0"
