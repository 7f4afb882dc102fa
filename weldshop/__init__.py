"""Minimum-cost plate welding and a threaded order-processing simulation."""

__version__ = "0.1.0"
__all__ = ["common", "solver", "company", "tester"]