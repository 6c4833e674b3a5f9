"""Pydantic schemas for remote payloads."""
