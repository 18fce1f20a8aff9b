"""Agri-Waste Match - agricultural waste reporting and reuse-organization matching."""

__version__ = "0.1.0"
