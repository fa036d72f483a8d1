"""patternkit - Root Package.

Executable versions of classic object-oriented design patterns, built around
a strategy registry that selects a capability implementation at runtime.

Key Components:
    - domain: Capability contracts, value objects and domain errors
    - infrastructure: Strategy registry, variants, persistence and logging
    - application: Services consuming registries and repositories
    - config: Typed configuration loaded from files and environment
    - cli: Command line interface

Architecture:
    Shared objects are created by patternkit.bootstrap.Application and passed
    to consumers explicitly; there are no module-level singletons.
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
