"""Domain layer for geotime.

Contains the core rules: the ``WideTime`` value object, the order-preserving
codec, the fallback display formatter, and the error taxonomy. This package
depends only on the standard library, ``geotime.interfaces`` and
``geotime.utils``.

Dependency rule: do not import from `geotime.adapters` or `geotime.entrypoints`.
"""
