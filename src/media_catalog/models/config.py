"""Configuration model for media catalog."""

from pathlib import Path
import json
from dataclasses import dataclass, field, fields, asdict

from ..exceptions import ConfigurationError


DEFAULT_DATA_FILE = "library_data.txt"


@dataclass
class Config:
    """Main configuration model."""
    data_file: Path = field(default_factory=lambda: Path(DEFAULT_DATA_FILE))
    max_year: int = 2024  # exclusive upper bound for new items
    encoding: str = "utf-8"

    @classmethod
    def default(cls) -> "Config":
        """Create a default configuration."""
        return cls()


def _config_to_dict(config: Config) -> dict:
    """Convert config to a JSON-serializable dict."""
    result = {}
    for key, value in asdict(config).items():
        result[key] = str(value) if isinstance(value, Path) else value
    return result


def _dict_to_config(data: dict) -> Config:
    """Build a Config from a dict, ignoring unknown keys.

    Raises:
        ConfigurationError: If a known key holds a value of the wrong type.
    """
    field_types = {f.name: f.type for f in fields(Config)}

    kwargs = {}
    for field_name, field_type in field_types.items():
        if field_name not in data:
            continue
        value = data[field_name]
        # JSON stores paths as strings; bool is an int subclass
        expected = str if field_type is Path else field_type
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ConfigurationError(
                f"Config field '{field_name}' must be {expected.__name__}, got {type(value).__name__}"
            )
        kwargs[field_name] = Path(value) if field_type is Path else value

    return Config(**kwargs)


def load_config(config_path: Path) -> Config:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r') as f:
            config_data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in config file {config_path}: {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a JSON object")

    return _dict_to_config(config_data)


def save_config(config: Config, config_path: Path) -> None:
    """Save configuration to JSON file."""
    config_dict = _config_to_dict(config)

    with open(config_path, 'w') as f:
        json.dump(config_dict, f, indent=2)


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    save_config(Config.default(), config_path)
