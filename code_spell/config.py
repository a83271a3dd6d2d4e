"""
Code Spell Configuration Module
===============================
Centralized configuration for the spell checking engine.

Configuration can be set via:
1. Environment variables (SPELL_ENABLED=false)
2. Config file (code_spell_config.json)
3. Direct API calls (config.set('spelling.max_suggestions', 3))
"""

import os
import json
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, asdict

from config_logging import get_logger

logger = get_logger('code_spell')

# Default configuration path
CONFIG_FILE = Path(__file__).parent.parent / "code_spell_config.json"


@dataclass
class SpellingConfig:
    """Checker behaviour."""
    enabled: bool = True
    default_language: str = "python"
    max_suggestions: int = 5
    max_edit_distance: int = 3
    min_identifier_length: int = 3
    max_identifier_length: int = 20


@dataclass
class DebounceConfig:
    """Delay between the last edit and the next check."""
    delay_ms: int = 500


@dataclass
class CodeSpellConfig:
    """Master configuration."""
    spelling: SpellingConfig = field(default_factory=SpellingConfig)
    debounce: DebounceConfig = field(default_factory=DebounceConfig)


# Global configuration instance
_config: Optional[CodeSpellConfig] = None


def get_config() -> CodeSpellConfig:
    """Get the global configuration."""
    global _config
    if _config is None:
        _config = _load_config()
    return _config


def _load_config() -> CodeSpellConfig:
    """Load configuration from file and environment."""
    config = CodeSpellConfig()

    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE, 'r') as f:
                file_config = json.load(f)
            _apply_dict_to_config(config, file_config)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Could not load config file: {e}", path=str(CONFIG_FILE))

    _apply_env_to_config(config)

    return config


def _apply_dict_to_config(config: CodeSpellConfig, data: Dict[str, Any]):
    """Apply dictionary values to config object."""
    for section_name, section_data in data.items():
        if hasattr(config, section_name) and isinstance(section_data, dict):
            section = getattr(config, section_name)
            for key, value in section_data.items():
                if hasattr(section, key):
                    setattr(section, key, value)


def _apply_env_to_config(config: CodeSpellConfig):
    """Apply environment variables to config."""
    env_mappings = {
        'SPELL_ENABLED': ('spelling', 'enabled', _parse_bool),
        'SPELL_DEFAULT_LANGUAGE': ('spelling', 'default_language', str),
        'SPELL_MAX_SUGGESTIONS': ('spelling', 'max_suggestions', int),
        'SPELL_MAX_EDIT_DISTANCE': ('spelling', 'max_edit_distance', int),
        'SPELL_MIN_IDENTIFIER_LENGTH': ('spelling', 'min_identifier_length', int),
        'SPELL_MAX_IDENTIFIER_LENGTH': ('spelling', 'max_identifier_length', int),
        'SPELL_DEBOUNCE_MS': ('debounce', 'delay_ms', int),
    }

    for env_var, (section, key, converter) in env_mappings.items():
        value = os.environ.get(env_var)
        if value is not None:
            try:
                section_obj = getattr(config, section)
                setattr(section_obj, key, converter(value))
            except (ValueError, AttributeError) as e:
                logger.warning(f"Invalid env var {env_var}={value}: {e}")


def _parse_bool(value: str) -> bool:
    """Parse boolean from string."""
    return value.lower() in ('true', '1', 'yes', 'on')


def get(key: str, default: Any = None) -> Any:
    """
    Get a configuration value by dot-notation key.

    Example: get('spelling.max_suggestions') -> 5
    """
    obj = get_config()
    for part in key.split('.'):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            return default
    return obj


def set(key: str, value: Any):
    """
    Set a configuration value by dot-notation key.

    Example: set('debounce.delay_ms', 250)
    """
    config = get_config()
    parts = key.split('.')

    if len(parts) < 2:
        raise ValueError(f"Key must be in format 'section.key': {key}")

    section_name, attr_name = parts[0], parts[1]

    if hasattr(config, section_name):
        section = getattr(config, section_name)
        if hasattr(section, attr_name):
            setattr(section, attr_name, value)
        else:
            raise ValueError(f"Unknown config key: {attr_name}")
    else:
        raise ValueError(f"Unknown config section: {section_name}")


def save_config(path: Optional[Path] = None):
    """Save current configuration to file."""
    path = path or CONFIG_FILE
    with open(path, 'w') as f:
        json.dump(asdict(get_config()), f, indent=2)


def reset_config():
    """Reset configuration to defaults."""
    global _config
    _config = CodeSpellConfig()
