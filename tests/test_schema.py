from classes import Primitive, StringRange, Array, Object, add_unique
from schema import Schema

def test_encode_primitive_and_strings():
    assert Primitive("NULL").encode() == "NULL"
    assert StringRange(5, 5).encode() == "STRING(5)"
    assert StringRange(1, 7).encode() == "STRING(1, 7)"

def test_encode_array():
    summary = Array([Primitive("NUMBER"), StringRange(0, 3)])
    assert summary.encode() == {"ARRAY": ["NUMBER", "STRING(0, 3)"]}
    assert Array().encode() == {"ARRAY": []}

def test_encode_object_is_not_wrapped():
    nested = Schema("address", {"city": [StringRange(6, 6)]})
    assert Object(nested).encode() == {"city": {"types": ["STRING(6)"]}}

def test_encode_schema():
    schema = Schema("root", {
        "name": [StringRange(3, 8)],
        "tags": [Array([Primitive("BOOL")])],
        "meta": [Object(Schema("meta", {"id": [Primitive("NUMBER")]})), Primitive("NULL")],
    })
    assert schema.encode() == {
        "name": {"types": ["STRING(3, 8)"]},
        "tags": {"types": [{"ARRAY": ["BOOL"]}]},
        "meta": {"types": [{"id": {"types": ["NUMBER"]}}, "NULL"]},
    }

def test_empty_schema_encodes_to_empty_object():
    assert Schema("root").encode() == {}

def test_equality_is_structural_and_per_variant():
    assert Primitive("BOOL") == Primitive("BOOL")
    assert Primitive("BOOL") != Primitive("NULL")
    assert StringRange(1, 2) != Array([])
    assert Array([Primitive("NULL")]) == Array([Primitive("NULL")])
    assert Object(Schema("a", {"x": [Primitive("NULL")]})) != Primitive("NULL")

def test_schema_name_is_ignored_by_equality():
    assert Schema("first", {"x": [Primitive("NUMBER")]}) == Schema("second", {"x": [Primitive("NUMBER")]})

def test_add_unique_keeps_first_seen_order():
    types = []
    for summary in [Primitive("NUMBER"), Primitive("NULL"), Primitive("NUMBER"), Array([]), Array([])]:
        add_unique(types, summary)
    assert types == [Primitive("NUMBER"), Primitive("NULL"), Array([])]

def test_array_equality_ignores_item_order():
    assert Array([Primitive("NUMBER"), Primitive("NULL")]) == Array([Primitive("NULL"), Primitive("NUMBER")])
    assert Array([Primitive("NUMBER")]) != Array([Primitive("NUMBER"), Primitive("NULL")])
    assert add_unique([Array([Primitive("BOOL"), StringRange(1, 2)])], Array([StringRange(1, 2), Primitive("BOOL")])) == [
        Array([Primitive("BOOL"), StringRange(1, 2)]),
    ]

def test_schema_equality_ignores_type_order():
    first = Schema("root", {"a": [Primitive("NUMBER"), Primitive("NULL")], "b": [StringRange(1, 1)]})
    second = Schema("root", {"b": [StringRange(1, 1)], "a": [Primitive("NULL"), Primitive("NUMBER")]})
    assert first == second
    assert first != Schema("root", {"a": [Primitive("NUMBER")], "b": [StringRange(1, 1)]})
    assert first != Schema("root", {"a": [Primitive("NUMBER"), Primitive("NULL")]})
