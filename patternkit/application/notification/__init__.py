"""Notification application services."""
