"""Composition root for geotime.

Wires concrete adapters (alphabets) into domain services (codecs).
"""
