"""Adapters (infrastructure) for geotime.

Provide concrete implementations of the interfaces: the textual alphabets used
by the order-preserving codec, and the SQLAlchemy column type that persists
``WideTime`` values as sortable text.

Dependency rule: may import `geotime.domain`, `geotime.interfaces` and
`geotime.config`; the
domain must not import this package.
"""
