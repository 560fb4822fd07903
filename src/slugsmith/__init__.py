"""
slugsmith – collision-free URL slugs for persisted records.

Import path convention::

    from slugsmith.kernel.errors import SlugOperationError
    from slugsmith.kernel.slugs import SlugDeclaration, SluggableMixin
    from slugsmith.application.slugs import SlugConfiguration, SlugLifecycleCoordinator
    from slugsmith.adapters.sqlalchemy import SlugFlushListener, SlugMixin
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
