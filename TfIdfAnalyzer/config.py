"""
Configuration loading for the TF-IDF analyzer.
"""
import copy
import json
import os
from typing import Any, Dict

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")

DEFAULT_CONFIG = {
    "input": {
        "encoding": "utf-8"
    },
    "stop_words": {
        "list": [],
        "file": None
    },
    "analysis": {
        "clean_document": False
    }
}


def default_config() -> Dict[str, Any]:
    """Return a fresh copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(base.get(key), dict):
            # Sections only take dict overrides
            if isinstance(value, dict):
                _merge(base[key], value)
            else:
                print(f"Warning: Ignoring configuration section '{key}', expected an object")
        else:
            base[key] = value
    return base


def strip_comments(content: str) -> str:
    """
    Remove // line comments that are outside JSON strings.
    
    Args:
        content: Raw configuration text
    
    Returns:
        Text without comments and without blank lines
    """
    filtered_lines = []
    for line in content.splitlines():
        in_string = False
        escaped = False
        end = len(line)
        for i, char in enumerate(line):
            if escaped:
                escaped = False
            elif char == "\\" and in_string:
                escaped = True
            elif char == '"':
                in_string = not in_string
            elif not in_string and line.startswith("//", i):
                end = i
                break
        line_without_comment = line[:end]
        if line_without_comment.strip():
            filtered_lines.append(line_without_comment)
    return "\n".join(filtered_lines)


def load_config(config_file: str = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file, handling comments.
    
    Keys missing from the file fall back to DEFAULT_CONFIG. A relative stop words
    file is resolved against the directory of the configuration file.
    
    Args:
        config_file: Path to configuration file (defaults to the packaged config.json)
    
    Returns:
        Configuration dictionary
    """
    config_file = config_file or DEFAULT_CONFIG_PATH
    config = default_config()
    
    if not os.path.exists(config_file):
        print(f"Configuration file {config_file} not found. Using default configuration.")
        return config
    
    with open(config_file, "r", encoding="utf-8") as f:
        content = f.read()
    
    try:
        loaded = json.loads(strip_comments(content))
    except json.JSONDecodeError as e:
        print(f"Error loading configuration file: {e}")
        print("Using default configuration...")
        return config
    
    if not isinstance(loaded, dict):
        print("Error loading configuration file: expected a JSON object")
        print("Using default configuration...")
        return config
    
    _merge(config, loaded)
    
    stop_words_file = config["stop_words"].get("file")
    if stop_words_file and not os.path.isabs(stop_words_file):
        config["stop_words"]["file"] = os.path.join(
            os.path.dirname(os.path.abspath(config_file)), stop_words_file
        )
    
    return config
