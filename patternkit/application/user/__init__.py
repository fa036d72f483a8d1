"""User application services."""
