"""Shared models used across the converter packages."""
