"""Generate README files from observable project facts."""

__version__ = "0.1.0"
