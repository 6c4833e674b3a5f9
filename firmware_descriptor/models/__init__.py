"""Firmware descriptor value models."""
