"""
weekresolver.codes
~~~~~~~~~~~~~~~~~~

Catalogue codes and how each one derives its week code.

Basic usage::

    from weekresolver.codes import DEFAULT_REGISTRY, FixedCode

    DEFAULT_REGISTRY.lookup("bkm")   # → ComputedCode(add_weeks=2, shift_day=FRIDAY, ...)
    DEFAULT_REGISTRY.lookup("DIS")   # → FixedCode(suffix='197605')
    DEFAULT_REGISTRY.lookup("XYZ")   # → UnknownCatalogueCode(code='XYZ')

Public API
----------
CatalogueRegistry        Read-only, case-insensitive code table.
DEFAULT_REGISTRY         The production catalogue codes.
FixedCode, ComputedCode  The two configuration variants.
UnknownCatalogueCode     Lookup result for an unsupported code.
"""

from __future__ import annotations

from weekresolver.codes.registry import (
    DEFAULT_REGISTRY,
    CatalogueCodeConfiguration,
    CatalogueRegistry,
    ComputedCode,
    FixedCode,
    UnknownCatalogueCode,
)

__all__ = [
    "CatalogueCodeConfiguration",
    "CatalogueRegistry",
    "ComputedCode",
    "DEFAULT_REGISTRY",
    "FixedCode",
    "UnknownCatalogueCode",
]
