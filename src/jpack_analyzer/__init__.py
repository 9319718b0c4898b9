"""jpack-analyzer: classify Java artifacts for modular runtime images."""

__version__ = "0.1.0"
