"""
Domain layer - capability contracts, value objects and domain errors.

Nothing in this package depends on infrastructure; concrete variants live in
patternkit.infrastructure and are selected at runtime through registries.
"""
