import json
import hashlib

LENGTH_UNITS = ("chars", "bytes")

def string_length(value, unit="chars"):
    if unit == "chars": ## Unicode code points
        return len(value)
    elif unit == "bytes": ## UTF-8 encoded size
        return len(value.encode("utf-8", "surrogatepass"))
    raise ValueError(f"Unknown string length unit '{unit}', expected one of {', '.join(LENGTH_UNITS)}")

def read_json_file(filename):
    with open(filename, encoding='utf-8') as f:
        return json.load(f)

def write_json_file(filename, data, indent=2):
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent)
        f.write('\n')

def dump_json(data, indent=2):
    return json.dumps(data, indent=indent)

def get_fingerprint(names):
    json_str = json.dumps(list(names), separators=(',', ':'))
    return hashlib.md5(json_str.encode()).hexdigest()
