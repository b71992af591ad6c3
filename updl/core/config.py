"""
UPDL Configuration Management

Compiler configuration with JSON loading and validation.
"""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .exceptions import ConfigurationError, InvalidConfigError
from .constants import RESULTS_SCENE_SUFFIX, RESULTS_SPACE_TYPE, UPDL_CATEGORY


class CyclePolicy(Enum):
    """What the chain walk does when it reaches an already visited space."""
    TRUNCATE = "truncate"   # Stop the chain before the repeated space
    ERROR = "error"         # Raise SpaceChainCycleError


@dataclass
class CompilerConfig:
    """Settings that tune how flows are compiled."""

    cycle_policy: CyclePolicy = CyclePolicy.TRUNCATE
    results_space_type: str = RESULTS_SPACE_TYPE
    results_suffix: str = RESULTS_SCENE_SUFFIX
    updl_category: str = UPDL_CATEGORY

    @classmethod
    def from_dict(cls, data: dict) -> 'CompilerConfig':
        """Create CompilerConfig from dictionary."""
        config = cls()

        if 'cycle_policy' in data:
            try:
                config.cycle_policy = CyclePolicy(data['cycle_policy'])
            except ValueError:
                raise InvalidConfigError(
                    f"Unknown cycle policy: {data['cycle_policy']}",
                    {"allowed": [p.value for p in CyclePolicy]}
                )

        config.results_space_type = data.get('results_space_type', config.results_space_type)
        config.results_suffix = data.get('results_suffix', config.results_suffix)
        config.updl_category = data.get('updl_category', config.updl_category)

        if not config.results_suffix:
            raise InvalidConfigError("results_suffix must not be empty")

        return config

    def to_dict(self) -> Dict[str, Any]:
        return {
            'cycle_policy': self.cycle_policy.value,
            'results_space_type': self.results_space_type,
            'results_suffix': self.results_suffix,
            'updl_category': self.updl_category,
        }


def get_default_config() -> CompilerConfig:
    """Return a fresh configuration with default values."""
    return CompilerConfig()


def load_config(config_path: Union[str, Path, None] = None) -> CompilerConfig:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to configuration file. If None, uses default.

    Returns:
        Loaded CompilerConfig instance
    """
    if config_path is None:
        config_path = Path("config/updl_config.json")
    config_path = Path(config_path)

    if not config_path.exists():
        # Return default config if file doesn't exist
        return CompilerConfig()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfigError(f"Invalid JSON in config file: {e}")
    except OSError as e:
        raise ConfigurationError(f"Failed to load config: {e}")

    if not isinstance(data, dict):
        raise InvalidConfigError("Config file must contain a JSON object")

    return CompilerConfig.from_dict(data)


def save_config(config: CompilerConfig, config_path: Union[str, Path]) -> None:
    """Write configuration to a JSON file."""
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2)


# Global config instance
_config: Optional[CompilerConfig] = None


def get_config() -> CompilerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: CompilerConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
