from classes import same_items

## fields: field name -> list of type summaries, in first-seen order
## name: "root" or the owning field name, not part of equality
class Schema:
    def __init__(self, name, fields=None):
        self.name = name
        self.fields: dict[str, list] = dict(fields or {})

    def encode(self):
        return {
            field: {"types": [summary.encode() for summary in types]}
            for field, types in self.fields.items()
        }

    def __getitem__(self, field):
        return self.fields[field]

    def __contains__(self, field):
        return field in self.fields

    def __len__(self):
        return len(self.fields)

    def __eq__(self, other):
        if not isinstance(other, Schema):
            return NotImplemented
        return self.fields.keys() == other.fields.keys() and all(
            same_items(types, other.fields[field]) for field, types in self.fields.items()
        )

    __hash__ = None

    def __repr__(self):
        return f"Schema(name={self.name}, fields={self.fields})"
