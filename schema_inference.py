from tqdm import tqdm
from classes import RawValue, ObjectShape, NULL, BOOL, NUMBER, STRING, OBJECT, ARRAY
from schema_processor import reduce_shapes
from utils import string_length, LENGTH_UNITS

ROOT_NAME = "root"

class InvalidTopLevelInput(ValueError): ## infer_schema got neither an object nor an array
    pass

def classify_value(value, length_unit="chars"):
    if value is None:
        return RawValue(NULL, None)
    elif isinstance(value, bool): ## bool is a subclass of int, check it first
        return RawValue(BOOL, None)
    elif isinstance(value, (int, float)):
        return RawValue(NUMBER, None)
    elif isinstance(value, str):
        return RawValue(STRING, string_length(value, length_unit))
    elif isinstance(value, dict):
        return RawValue(OBJECT, classify_object(value, length_unit))
    elif isinstance(value, (list, tuple)):
        return RawValue(ARRAY, tuple(classify_value(v, length_unit) for v in value))
    raise TypeError(f"Object of type {type(value).__name__} is not a JSON value")

def classify_object(obj, length_unit="chars"):
    shape = ObjectShape()
    for name, value in obj.items():
        shape.add_field(name, classify_value(value, length_unit))
    return shape

def _kind_name(value):
    if value is None:
        return "null"
    return type(value).__name__

def infer_schema(value, merge_objects=False, length_unit="chars", progress=False):
    if length_unit not in LENGTH_UNITS:
        raise ValueError(f"Unknown string length unit '{length_unit}', expected one of {', '.join(LENGTH_UNITS)}")

    if isinstance(value, dict):
        shapes = [classify_object(value, length_unit)]
    elif isinstance(value, (list, tuple)):
        ## Non-object elements contribute no shape
        shapes = [
            classify_object(item, length_unit)
            for item in tqdm(value, disable=not progress, desc="Classifying")
            if isinstance(item, dict)
        ]
    else:
        raise InvalidTopLevelInput(f"Invalid input JSON: expected an object or an array, got {_kind_name(value)}")

    return reduce_shapes(ROOT_NAME, shapes, merge_objects)
