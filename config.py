from configparser import ConfigParser
from utils import LENGTH_UNITS

DEFAULT_CONFIG_FILE = 'config.ini'

def _load_config(filename=DEFAULT_CONFIG_FILE):
    config = ConfigParser()
    config.read(filename) ## Missing file leaves the parser empty, fallbacks apply
    return config

def get_inference_config(filename=DEFAULT_CONFIG_FILE):
    config = _load_config(filename)
    params = {
        'merge_objects': config.getboolean('inference', 'merge_objects', fallback=False),
        'length_unit': config.get('inference', 'length_unit', fallback='chars').strip().lower(),
        'show_progress': config.getboolean('inference', 'show_progress', fallback=False),
    }

    if params['length_unit'] not in LENGTH_UNITS:
        raise ValueError(f"Invalid length_unit '{params['length_unit']}' in {filename}, expected one of {', '.join(LENGTH_UNITS)}")

    return params

def get_output_config(filename=DEFAULT_CONFIG_FILE):
    config = _load_config(filename)
    return {
        'indent': config.getint('output', 'indent', fallback=2),
        'file': config.get('output', 'file', fallback='').strip() or None,
    }
