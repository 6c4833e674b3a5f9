"""Utility modules for firmware descriptor parsing."""
