"""
Synthetic data generation for the ULD Load Planner.

Generates realistic ULD load requests for demos, tests and what-if runs.
"""

from .uld_generator import ULDRequestGenerator

__all__ = [
    "ULDRequestGenerator",
]
