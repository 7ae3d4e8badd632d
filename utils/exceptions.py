"""Errors raised by the filtering engines."""


class FilterError(Exception):
    """Base class for spectral filtering errors."""


class InvalidParameter(FilterError, ValueError):
    """Kernel size, regularization or image shape is not usable."""


class ShapeMismatch(FilterError, ValueError):
    """Two spectra of different shapes were combined."""
