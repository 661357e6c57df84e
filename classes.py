from collections import namedtuple
from utils import get_fingerprint

## JSON value kinds, also used as primitive tags in the output
NULL = "NULL"
BOOL = "BOOL"
NUMBER = "NUMBER"
STRING = "STRING"
OBJECT = "OBJECT"
ARRAY = "ARRAY"

PRIMITIVE_KINDS = (NULL, BOOL, NUMBER)

## Namedtuples are lighter than classes
## payload: None (primitives) | length (STRING) | ObjectShape (OBJECT) | tuple[RawValue] (ARRAY)
RawValue = namedtuple('RawValue', ['kind', 'payload'])
Field = namedtuple('Field', ['name', 'value'])

class ObjectShape:
    def __init__(self):
        self.fields: list[Field] = []

    def add_field(self, name, value): ## object.name -> RawValue
        self.fields.append(Field(name, value))

    def names(self):
        return [field.name for field in self.fields]

    def fingerprint(self): ## Only the key names matter, not their values
        return get_fingerprint(sorted(self.names()))

    def __iter__(self):
        return iter(self.fields)

    def __len__(self):
        return len(self.fields)

    def __repr__(self):
        return f"Shape({', '.join(f'{f.name}={f.value.kind}' for f in self.fields)})"

def same_items(left, right): ## Type lists are sets, order does not matter
    return len(left) == len(right) and all(item in right for item in left) and all(item in left for item in right)

class TypeSummary: ## Equal only to the same variant with equal content
    def _key(self):
        raise NotImplementedError

    def _same(self, other):
        return self._key() == other._key()

    def encode(self):
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, TypeSummary):
            return NotImplemented
        return type(self) is type(other) and self._same(other)

    __hash__ = None ## Object summaries wrap a mutable Schema

class Primitive(TypeSummary):
    def __init__(self, tag):
        self.tag = tag

    def _key(self):
        return self.tag

    def encode(self):
        return self.tag

    def __repr__(self):
        return f"Primitive({self.tag})"

class StringRange(TypeSummary):
    def __init__(self, min_length, max_length):
        self.min = min_length
        self.max = max_length

    @classmethod
    def from_lengths(cls, lengths):
        return cls(min(lengths), max(lengths))

    def _key(self):
        return (self.min, self.max)

    def encode(self):
        if self.min == self.max:
            return f"STRING({self.min})"
        return f"STRING({self.min}, {self.max})"

    def __repr__(self):
        return f"StringRange({self.min}, {self.max})"

class Array(TypeSummary):
    def __init__(self, items=None):
        self.items: list[TypeSummary] = list(items or [])

    def _key(self):
        return self.items

    def _same(self, other):
        return same_items(self.items, other.items)

    def encode(self):
        return {"ARRAY": [item.encode() for item in self.items]}

    def __repr__(self):
        return f"Array({self.items})"

class Object(TypeSummary):
    def __init__(self, schema):
        self.schema = schema

    def _key(self):
        return self.schema

    def encode(self): ## Nested schema goes in as is, no marker key
        return self.schema.encode()

    def __repr__(self):
        return f"Object({self.schema!r})"

def add_unique(types, summary): ## Insert if absent, keeps first-seen order
    if summary not in types:
        types.append(summary)
    return types
