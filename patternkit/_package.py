"""Package metadata and naming constants."""

PACKAGE_NAME = "patternkit"
__version__ = "1.0.0"
VERSION = __version__  # Alias for compatibility
DESCRIPTION = "Runtime-selected strategies, factories and repositories behind narrow capability contracts"
