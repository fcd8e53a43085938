"""Burrow data model: geometry constants and layout values."""

from labyrinth_sort.burrow.geometry import (
    EMPTY,
    BurrowGeometry,
    geometry_for,
    geometry_registry,
    standard_geometry,
)
from labyrinth_sort.burrow.layout import Layout, LayoutError, format_layout, validate_layout

__all__ = [
    "EMPTY",
    "BurrowGeometry",
    "Layout",
    "LayoutError",
    "format_layout",
    "geometry_for",
    "geometry_registry",
    "standard_geometry",
    "validate_layout",
]
