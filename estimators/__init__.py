"""Settlement and tax estimators."""

__version__ = "0.1.0"
