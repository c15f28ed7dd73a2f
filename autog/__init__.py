"""Layered graph drawing building blocks: graph model, options, results, monitoring and geometry."""

__version__ = "0.1.0"