"""Infrastructure layer - registries, variants, persistence and logging."""
