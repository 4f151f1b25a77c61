"""
GeoJSON text codec.

Parsing goes through ``geojson.loads`` with plain ``dict`` objects so the
model's own type registry decides which class gets built; writing goes through
``geojson.dumps``. Both refuse NaN and Infinity.
"""
from typing import IO, Any

import geojson
from pydantic import BaseModel

from geojson_model.core.config import DEFAULT_CONFIG, CodecConfig
from geojson_model.core.schema.library import GeoJsonDecodeError, TGeoJson, decode
from geojson_model.core.schema.spatial import GeoJson


def _parse(text: str | bytes) -> Any:
    try:
        return geojson.loads(text, object_hook=None)
    except ValueError as exc:
        # json.JSONDecodeError and geojson's non-compliant number check
        raise GeoJsonDecodeError(f"malformed GeoJSON text: {exc}") from exc


def loads(text: str | bytes, as_type: type[TGeoJson] = GeoJson) -> TGeoJson:
    return decode(_parse(text), as_type)


def load(fp: IO[str], as_type: type[TGeoJson] = GeoJson) -> TGeoJson:
    return loads(fp.read(), as_type=as_type)


def dumps(obj: BaseModel, config: CodecConfig | None = None) -> str:
    config = config or DEFAULT_CONFIG
    return geojson.dumps(
        obj.model_dump(mode="json"),
        indent=config.indent,
        sort_keys=config.sort_keys,
        ensure_ascii=config.ensure_ascii,
    )


def dump(obj: BaseModel, fp: IO[str], config: CodecConfig | None = None) -> None:
    fp.write(dumps(obj, config=config))
