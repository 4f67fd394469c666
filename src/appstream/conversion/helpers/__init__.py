"""Stateless per-entity converters and the pure helpers they share."""
