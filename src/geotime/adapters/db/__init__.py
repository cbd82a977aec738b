"""SQLAlchemy integration for geotime values."""
