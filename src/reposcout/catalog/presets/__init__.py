"""Packaged finding catalog presets."""
