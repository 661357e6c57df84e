from collections import defaultdict
from itertools import groupby
from classes import Primitive, StringRange, Array, Object, add_unique, STRING, OBJECT, ARRAY
from schema import Schema

def group_shape_runs(shapes):
    ## Only consecutive shapes with the same key set share a group.
    ## A fingerprint seen again after a different one starts a new group.
    return [list(run) for _, run in groupby(shapes, key=lambda shape: shape.fingerprint())]

def _reduce_objects(name, shapes, merge_objects):
    if not shapes:
        return []

    if merge_objects: ## Union of every shape into a single nested schema
        return [Object(reduce_shapes(name, shapes, True))]

    return [Object(reduce_shapes(name, run, False)) for run in group_shape_runs(shapes)]

def _reduce_arrays(name, arrays, merge_objects): ## Every array seen for a field folds into one Array summary
    objects, others, lengths = [], [], []

    for items in arrays:
        for item in items:
            if item.kind == STRING:
                lengths.append(item.payload)
            elif item.kind == OBJECT:
                objects.append(item.payload)
            elif item.kind == ARRAY: ## Nested arrays are resolved on the spot
                add_unique(others, _reduce_arrays(name, [item.payload], merge_objects))
            else:
                add_unique(others, Primitive(item.kind))

    entries = _reduce_objects(name, objects, merge_objects)
    entries.extend(others)
    if lengths:
        entries.append(StringRange.from_lengths(lengths))

    return Array(entries)

def reduce_shapes(name, shapes, merge_objects=False):
    field_stats = defaultdict(lambda: {"primitives": [], "lengths": [], "objects": [], "arrays": []})

    for shape in shapes:
        for field in shape:
            stats = field_stats[field.name]
            kind, payload = field.value

            if kind == STRING:
                stats["lengths"].append(payload)
            elif kind == OBJECT:
                stats["objects"].append(payload)
            elif kind == ARRAY:
                stats["arrays"].append(payload)
            else:
                add_unique(stats["primitives"], Primitive(kind))

    fields = {}
    for field_name, stats in field_stats.items():
        types = []

        ## Fixed order: string range, objects, primitives, array
        if stats["lengths"]:
            types.append(StringRange.from_lengths(stats["lengths"]))
        types.extend(_reduce_objects(field_name, stats["objects"], merge_objects))
        types.extend(stats["primitives"])
        if stats["arrays"]:
            types.append(_reduce_arrays(field_name, stats["arrays"], merge_objects))

        fields[field_name] = types

    return Schema(name, fields)
