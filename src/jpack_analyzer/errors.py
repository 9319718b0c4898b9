"""Exceptions raised by the analyzer and caught by the CLI.

Anything derived from JPackAnalyzerError aborts the current run.
Recoverable conditions are logged instead of raised.
"""

from __future__ import annotations


class JPackAnalyzerError(Exception):
    """Base exception for fatal analyzer errors."""


class ConfigError(JPackAnalyzerError):
    """Raised when a config file cannot be read or fails validation."""


class GraphLoadError(JPackAnalyzerError):
    """Raised when a dependency graph document cannot be read or is invalid."""


class PathResolutionError(JPackAnalyzerError):
    """Raised when a canonical filesystem path cannot be computed."""


class ManifestReadError(JPackAnalyzerError):
    """Raised when a jar manifest cannot be read."""


class DescriptorReadError(JPackAnalyzerError):
    """Raised when a jar or its module-info.class cannot be read."""


class JdepsExecutionError(JPackAnalyzerError):
    """Raised when jdeps (or java) cannot be launched or times out."""


class JdepsOutputError(JPackAnalyzerError):
    """Raised when a .jdeps output file cannot be read back."""
