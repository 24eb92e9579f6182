"""Builders for MongoDB query filter documents."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

TYPE_DOUBLE = 1
TYPE_STRING = 2
TYPE_OBJECT = 3
TYPE_ARRAY = 4
TYPE_BINARY_DATA = 5
TYPE_UNDEFINED = 6
TYPE_OBJECT_ID = 7
TYPE_BOOLEAN = 8
TYPE_DATE = 9
TYPE_NULL = 10
TYPE_REGEX = 11
TYPE_DB_POINTER = 12
TYPE_JAVASCRIPT = 13
TYPE_SYMBOL = 14
TYPE_JAVASCRIPT_WITH_SCOPE = 15
TYPE_INT32 = 16
TYPE_TIMESTAMP = 17
TYPE_INT64 = 18
TYPE_DECIMAL128 = 19
TYPE_MIN_KEY = -1
TYPE_MAX_KEY = 127

GEOMETRY_POINT = "Point"
GEOMETRY_MULTI_POINT = "MultiPoint"
GEOMETRY_LINE_STRING = "LineString"
GEOMETRY_MULTI_LINE = "MultiLineString"
GEOMETRY_POLYGON = "Polygon"
GEOMETRY_MULTI_POLYGON = "MultiPolygon"
GEOMETRY_COLLECTION = "GeometryCollection"

Document = dict


class Builder:
    """Collects operator conditions for a single field."""

    def __init__(self, field: str) -> None:
        self.field = field
        self._conditions: dict[str, Any] = {}

    def _add(self, operator: str, value: Any) -> "Builder":
        self._conditions[operator] = value
        return self

    def build(self) -> Document:
        """Return the filter document ``{field: {operators...}}``.

        A builder without conditions yields ``{field: None}``.
        """
        return {self.field: dict(self._conditions) if self._conditions else None}

    def gt(self, value: Any) -> "Builder":
        return self._add("$gt", value)

    def gte(self, value: Any) -> "Builder":
        return self._add("$gte", value)

    def lt(self, value: Any) -> "Builder":
        return self._add("$lt", value)

    def lte(self, value: Any) -> "Builder":
        return self._add("$lte", value)

    def eq(self, value: Any) -> "Builder":
        return self._add("$eq", value)

    def ne(self, value: Any) -> "Builder":
        return self._add("$ne", value)

    def in_(self, *args: Any) -> "Builder":
        return self._add("$in", list(args))

    def nin(self, *args: Any) -> "Builder":
        return self._add("$nin", list(args))

    def exists(self, value: bool) -> "Builder":
        return self._add("$exists", value)

    def type_(self, value: int) -> "Builder":
        return self._add("$type", value)

    def geo_intersects(self, value: Document) -> "Builder":
        return self._add("$geoIntersects", value)

    def geo_within(self, value: Document) -> "Builder":
        return self._add("$geoWithin", value)

    def near(self, value: Document, min_distance: float | None = None,
             max_distance: float | None = None) -> "Builder":
        return self._add("$near", _proximity(value, min_distance, max_distance))

    def near_sphere(self, value: Document, min_distance: float | None = None,
                    max_distance: float | None = None) -> "Builder":
        return self._add("$nearSphere", _proximity(value, min_distance, max_distance))


def _proximity(value: Document, min_distance: float | None,
               max_distance: float | None) -> Document:
    query = dict(value)
    if min_distance is not None:
        query["$minDistance"] = min_distance
    if max_distance is not None:
        query["$maxDistance"] = max_distance
    return query


def and_(*args: Document) -> Document:
    return {"$and": list(args)}


def or_(*args: Document) -> Document:
    return {"$or": list(args)}


def not_(condition: Document) -> Document:
    return {"$not": condition}


def nor(*args: Document) -> Document:
    return {"$nor": list(args)}


def text_search(value: str, language: str | None = None,
                case_sensitive: bool | None = None,
                diacritic_sensitive: bool | None = None) -> Document:
    """Build a ``$text`` query; options left as ``None`` are omitted."""
    query: dict[str, Any] = {"$search": value}
    if language is not None:
        query["$language"] = language
    if case_sensitive is not None:
        query["$caseSensitive"] = case_sensitive
    if diacritic_sensitive is not None:
        query["$diacriticSensitive"] = diacritic_sensitive
    return {"$text": query}


def _point(coordinate: Sequence[float]) -> list[float]:
    pair = list(coordinate)
    if len(pair) != 2:
        raise ValueError(f"coordinate must have two values, got {len(pair)}")
    return pair


def geometry(geo_type: str, *args: Sequence[float]) -> Document:
    """Build a ``$geometry`` element from (x, y) coordinate pairs."""
    return {
        "$geometry": {
            "type": geo_type,
            "coordinates": [_point(c) for c in args],
        }
    }


def geometry_collection(*args: Document) -> Document:
    return {"$geometry": {"type": GEOMETRY_COLLECTION, "geometries": list(args)}}


def box(bottom_left: Sequence[float], top_right: Sequence[float]) -> Document:
    return {"$box": [_point(bottom_left), _point(top_right)]}


def center(center: Sequence[float], radius: float) -> Document:
    return {"$center": [_point(center), radius]}


def _all_keys(documents: Iterable[Document]) -> list[str]:
    return [key for doc in documents for key in doc]