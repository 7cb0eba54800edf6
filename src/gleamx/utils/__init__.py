"""Utility modules for gleamx."""
