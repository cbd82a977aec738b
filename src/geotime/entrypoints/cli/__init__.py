"""Command line interface for geotime."""
