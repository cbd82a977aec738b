"""Entrypoints (inbound adapters) for geotime.

Expose the library to the outside world through the ``geotime`` command line
tool. Parse and validate inputs, call codecs and formatters, and present
results.

Dependency rule: may import `geotime.bootstrap`, `geotime.config` and
`geotime.domain`; avoid importing `geotime.adapters` directly.
"""
