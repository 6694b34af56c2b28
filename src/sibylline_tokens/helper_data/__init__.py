"""Packaged default helper configuration."""
