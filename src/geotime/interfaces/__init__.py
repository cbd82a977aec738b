"""Interfaces (application boundary) for geotime.

Defines framework-free contracts (ABCs) implemented by adapters, such as the
textual alphabets used by the order-preserving codec.

Dependency rule: this package is independent; do not import from any
`geotime.*` modules. It may be imported by `geotime.domain`,
`geotime.adapters` and `geotime.bootstrap`.
"""
