"""Kernel value-object types – public re-export surface.

Modules:
  slug.py — Slug, ScopeConstraints
"""

from slugsmith.kernel.types.slug import ScopeConstraints, Slug

__all__ = ["ScopeConstraints", "Slug"]
