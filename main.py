import sys
import json
import argparse
from config import get_inference_config, get_output_config, DEFAULT_CONFIG_FILE
from schema_inference import infer_schema, InvalidTopLevelInput
from utils import read_json_file, write_json_file, dump_json, LENGTH_UNITS

def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Infer the field types of a JSON object or array of objects.")
    parser.add_argument("file", help="Path to the JSON file")
    parser.add_argument("-m", "--merge-objects", action="store_true", default=None,
                        help="Merge every object seen under a field into one schema")
    parser.add_argument("-o", "--output", help="Write the schema to this file instead of stdout")
    parser.add_argument("--compact", action="store_true", help="Emit the schema on a single line")
    parser.add_argument("--length-unit", choices=LENGTH_UNITS, help="Unit of string lengths (default: chars)")
    parser.add_argument("--progress", action="store_true", default=None, help="Show a progress bar")
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE, help="Configuration file (default: config.ini)")
    return parser.parse_args(argv)

def _log(message):
    print(message, file=sys.stderr)

def main(argv=None):
    args = _parse_args(argv)

    try:
        config = get_inference_config(args.config)
        output = get_output_config(args.config)
    except ValueError as e:
        _log(f"Invalid configuration: {e}")
        return 1

    ## Command line flags win over config.ini
    merge_objects = config['merge_objects'] if args.merge_objects is None else args.merge_objects
    length_unit = args.length_unit or config['length_unit']
    show_progress = config['show_progress'] if args.progress is None else args.progress
    output_file = args.output or output['file']
    indent = None if args.compact else output['indent']

    try:
        data = read_json_file(args.file)
    except OSError as e:
        _log(f"Unable to read file: {e}")
        return 1
    except json.JSONDecodeError as e:
        _log(f"Invalid JSON in {args.file}: {e}")
        return 1
    except UnicodeDecodeError as e:
        _log(f"Invalid UTF-8 in {args.file}: {e}")
        return 1

    if isinstance(data, list):
        instances = sum(1 for item in data if isinstance(item, dict))
        _log(f"Loaded {instances} object instances out of {len(data)} array elements")

    try:
        schema = infer_schema(data, merge_objects, length_unit, show_progress)
    except InvalidTopLevelInput as e:
        _log(str(e))
        return 1

    encoded = schema.encode()
    if output_file:
        try:
            write_json_file(output_file, encoded, indent)
        except OSError as e:
            _log(f"Unable to write file: {e}")
            return 1
        _log(f"Schema written to '{output_file}'")
    else:
        print(dump_json(encoded, indent))

    return 0

if __name__ == "__main__":
    sys.exit(main())
