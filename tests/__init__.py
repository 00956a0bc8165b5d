# tests/__init__.py
"""Unit tests for the pixel_palette color analysis and replacement tools."""
