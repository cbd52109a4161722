"""Spot market catalogue, order domain, status errors and request interceptors for a small exchange."""

__version__ = "0.1.0"