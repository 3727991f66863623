import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

import toml

CONFIG_ENV_VAR = "REDLINE_CONFIG"


@dataclass
class Config:
    """Declarative configuration class."""

    encoding: str = ""
    preview_lines: int = 3
    backup: bool = True
    raw_output: bool = False
    log_level: str = "WARNING"
    log_file: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create Config instance from dictionary."""
        return cls(**{key: value for key, value in data.items() if key in cls.__annotations__})

    def to_dict(self) -> dict:
        """Convert Config to dictionary."""
        return {key: value for key, value in asdict(self).items()}


def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".redline_config.toml"


class ConfigManager:
    """Manages configuration storage and retrieval (TOML version)."""

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else default_config_path()
        self.default_config = Config()

    def save_config(self, **kwargs) -> None:
        """Save configuration to the TOML file."""
        try:
            config = self.load_config()
            config_dict = config.to_dict()

            for key, value in kwargs.items():
                if value is not None and key in config_dict:
                    config_dict[key] = value

            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w", encoding="utf-8") as file_obj:
                toml.dump(config_dict, file_obj)

            self.config_file.chmod(0o600)
        except Exception as exc:
            raise Exception(f"Failed to save config: {str(exc)}") from exc

    def load_config(self) -> Config:
        """Load configuration from the TOML file, falling back to defaults."""
        try:
            if self.config_file.exists():
                with open(self.config_file, "r", encoding="utf-8") as file_obj:
                    config_dict = toml.load(file_obj)
                combined_config = {**self.default_config.to_dict(), **config_dict}
                return Config.from_dict(combined_config)
            return Config()
        except Exception as exc:
            raise Exception(f"Failed to load config: {str(exc)}") from exc
