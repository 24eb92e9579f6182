import pytest

from scaffoldkit.querybuilder import (
    GEOMETRY_COLLECTION,
    GEOMETRY_POINT,
    GEOMETRY_POLYGON,
    TYPE_STRING,
    Builder,
    and_,
    box,
    center,
    geometry,
    geometry_collection,
    nor,
    not_,
    or_,
    text_search,
)


def test_comparison_chain_keeps_order():
    doc = Builder("age").gt(10).lte(20).ne(15).build()
    assert doc == {"age": {"$gt": 10, "$lte": 20, "$ne": 15}}
    assert list(doc["age"]) == ["$gt", "$lte", "$ne"]


def test_remaining_comparisons():
    doc = Builder("score").gte(1).lt(5).eq(3).build()
    assert doc == {"score": {"$gte": 1, "$lt": 5, "$eq": 3}}


def test_in_and_nin_collect_values():
    doc = Builder("tag").in_("a", "b").nin("c").build()
    assert doc == {"tag": {"$in": ["a", "b"], "$nin": ["c"]}}


def test_empty_builder_builds_null_condition():
    assert Builder("name").build() == {"name": None}


def test_exists_and_type():
    doc = Builder("name").exists(True).type_(TYPE_STRING).build()
    assert doc == {"name": {"$exists": True, "$type": TYPE_STRING}}


def test_logical_combinators():
    a = Builder("x").gt(1).build()
    b = Builder("y").lt(2).build()
    assert and_(a, b) == {"$and": [a, b]}
    assert or_(a, b) == {"$or": [a, b]}
    assert nor(a) == {"$nor": [a]}
    assert not_(a) == {"$not": a}


def test_text_search_omits_missing_options():
    assert text_search("coffee") == {"$text": {"$search": "coffee"}}


def test_text_search_keeps_false_options():
    doc = text_search("coffee", "en", False, True)
    assert doc == {
        "$text": {
            "$search": "coffee",
            "$language": "en",
            "$caseSensitive": False,
            "$diacriticSensitive": True,
        }
    }


def test_geometry_converts_pairs_to_lists():
    doc = geometry(GEOMETRY_POLYGON, (0.0, 0.0), (1.0, 1.0))
    assert doc == {
        "$geometry": {
            "type": GEOMETRY_POLYGON,
            "coordinates": [[0.0, 0.0], [1.0, 1.0]],
        }
    }


def test_geometry_rejects_bad_pair():
    with pytest.raises(ValueError):
        geometry(GEOMETRY_POINT, (1.0, 2.0, 3.0))


def test_geometry_collection_wraps_geometries():
    point = geometry(GEOMETRY_POINT, (1.0, 2.0))
    doc = geometry_collection(point)
    assert doc["$geometry"]["type"] == GEOMETRY_COLLECTION
    assert doc["$geometry"]["geometries"] == [point]


def test_box_and_center():
    assert box((0, 0), (5, 5)) == {"$box": [[0, 0], [5, 5]]}
    assert center((1, 2), 3.5) == {"$center": [[1, 2], 3.5]}


def test_geo_within_and_intersects():
    area = box((0, 0), (5, 5))
    shape = geometry(GEOMETRY_POINT, (1.0, 1.0))
    doc = Builder("loc").geo_within(area).geo_intersects(shape).build()
    assert doc == {"loc": {"$geoWithin": area, "$geoIntersects": shape}}


def test_near_with_distances():
    point = geometry(GEOMETRY_POINT, (1.0, 2.0))
    doc = Builder("loc").near(point, 10.0, 100.0).build()
    assert doc["loc"]["$near"] == {
        **point,
        "$minDistance": 10.0,
        "$maxDistance": 100.0,
    }


def test_near_sphere_without_distances_does_not_mutate_input():
    point = geometry(GEOMETRY_POINT, (1.0, 2.0))
    doc = Builder("loc").near_sphere(point, None, 50.0).build()
    assert doc["loc"]["$nearSphere"] == {**point, "$maxDistance": 50.0}
    assert "$maxDistance" not in point