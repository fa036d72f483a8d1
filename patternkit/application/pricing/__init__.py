"""Pricing application services."""
