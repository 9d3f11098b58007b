"""Pydantic output schemas for godir commands."""
