"""Kernel slugs – record capability, declarations and storage ports."""

from slugsmith.kernel.slugs.declaration import SlugDeclaration, SluggableMixin
from slugsmith.kernel.slugs.ports import PriorStateReader, Sluggable, SlugExistenceChecker

__all__ = [
    "PriorStateReader",
    "SlugDeclaration",
    "SlugExistenceChecker",
    "Sluggable",
    "SluggableMixin",
]
