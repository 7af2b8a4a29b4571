"""Preset grid data files."""
