"""Configuration management."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")
    return data


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'display': {
            'unit': 'hours',
        },
        'export': {
            'output_dir': 'results',
            'json_indent': 2,
        },
        'storage': {
            'path': 'results/projects.json',
        },
        'logging': {
            'level': 'WARNING',
        },
    }


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively overlay ``override`` on a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def resolve_config(config_path: str = None) -> Dict[str, Any]:
    """Defaults overlaid with the file at ``config_path`` when it exists."""
    config = get_default_config()
    if config_path and Path(config_path).exists():
        config = merge_config(config, load_config(config_path))
    return config
