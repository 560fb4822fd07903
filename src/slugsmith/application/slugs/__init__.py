"""Application slugs – slugifier, change detection, uniqueness, lifecycle."""
from slugsmith.application.slugs.change_detector import LOOKUP, ChangeDetector
from slugsmith.application.slugs.config import SlugConfiguration
from slugsmith.application.slugs.coordinator import SlugLifecycleCoordinator, SlugOutcome
from slugsmith.application.slugs.registry import SlugRegistry
from slugsmith.application.slugs.resolver import ExistsFn, UniquenessResolver
from slugsmith.application.slugs.slugifier import DefaultSlugifier, Slugifier, slugify

__all__ = [
    "LOOKUP",
    "ChangeDetector",
    "DefaultSlugifier",
    "ExistsFn",
    "SlugConfiguration",
    "SlugLifecycleCoordinator",
    "SlugOutcome",
    "SlugRegistry",
    "Slugifier",
    "UniquenessResolver",
    "slugify",
]
