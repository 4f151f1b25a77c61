"""
GeoJSON Model
=============

Immutable, self-validating GeoJSON (RFC 7946) objects. Decoding never checks
GeoJSON rules; call ``validate()`` / ``is_valid()`` on the result, or build
values with the ``of(...)`` factories which raise ``GeoJsonValidationError``.
"""

from geojson_model.core import *  # noqa: F401,F403
from geojson_model.core import __all__ as _core_all
from geojson_model.geo import dump, dumps, load, loads

__all__ = list(_core_all) + ["dump", "dumps", "load", "loads"]
