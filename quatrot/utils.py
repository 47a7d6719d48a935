"""
Utilities: configuration loader
"""
import json


def load_config(path: str = "quatrot.json") -> dict:
    """
    Load JSON configuration and return a dict, or empty dict if it is missing,
    unreadable or not a JSON object.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except (OSError, ValueError):
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        return {}
    return config if isinstance(config, dict) else {}
