"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from suggest_message.llm.minimax import MiniMaxClient

ENV_API_KEY = "MINIMAX_CP_KEY"
ENV_ENDPOINT = "MINIMAX_ENDPOINT"
ENV_MODEL = "MINIMAX_MODEL"


class ConfigError(Exception):
    """Raised when required configuration is missing."""
    pass


@dataclass
class Config:
    """Settings with sensible defaults. The API key only comes from the environment."""
    endpoint: str = MiniMaxClient.DEFAULT_ENDPOINT
    model: str = MiniMaxClient.DEFAULT_MODEL
    max_tokens: int = MiniMaxClient.MAX_TOKENS
    timeout: float = 120.0
    api_key: Optional[str] = field(default=None, repr=False)

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.endpoint, str) or not self.endpoint.startswith(("https://", "http://")):
            warnings.append(f"Invalid endpoint '{self.endpoint}', using '{defaults.endpoint}'")
            self.endpoint = defaults.endpoint

        if not isinstance(self.model, str) or not self.model.strip():
            warnings.append(f"Invalid model '{self.model}', using '{defaults.model}'")
            self.model = defaults.model

        if not isinstance(self.max_tokens, int) or isinstance(self.max_tokens, bool) or self.max_tokens <= 0:
            warnings.append(f"Invalid max_tokens '{self.max_tokens}', using {defaults.max_tokens}")
            self.max_tokens = defaults.max_tokens

        if not isinstance(self.timeout, (int, float)) or isinstance(self.timeout, bool) or self.timeout <= 0:
            warnings.append(f"Invalid timeout '{self.timeout}', using {defaults.timeout}")
            self.timeout = defaults.timeout

        return warnings

    def apply_env(self, environ=None) -> 'Config':
        """Environment variables win over file values."""
        environ = os.environ if environ is None else environ
        if environ.get(ENV_ENDPOINT):
            self.endpoint = environ[ENV_ENDPOINT]
        if environ.get(ENV_MODEL):
            self.model = environ[ENV_MODEL]
        self.api_key = environ.get(ENV_API_KEY) or None
        return self

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigError(f"Missing {ENV_API_KEY} env var.")
        return self.api_key

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()} - {"api_key"}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Finds and loads the optional JSON config file."""

    CONFIG_FILENAME = ".suggestmsgrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
                break
        else:
            self._config = Config()

        self._config.apply_env()
        for warning in self._config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()
        if not isinstance(data, dict):
            print(f"Warning: Could not load {path}: expected a JSON object", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigError",
    "ConfigManager",
    "load_config",
    "get_config_path",
    "ENV_API_KEY",
    "ENV_ENDPOINT",
    "ENV_MODEL",
]
