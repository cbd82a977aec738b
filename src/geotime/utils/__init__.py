"""Support namespace for cross-cutting, dependency-light helpers.

This package provides a neutral location for small, reusable functions that
would otherwise clutter feature packages. It is not a new architectural layer.

Scope:
- Small, stateless helpers with no third-party dependencies (e.g., number
  formatting).
- No codec rules, no wiring.

Import direction:
- May be imported by any geotime package.
- Must not import from other geotime packages.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules.
"""
