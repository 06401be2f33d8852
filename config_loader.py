"""YAML config loader with dotted overrides support."""
import yaml
from pathlib import Path
from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, Field

from settings import get_settings


class ParsingConfig(BaseModel):
    """How a query string is turned into parameters."""
    model_config = {"validate_assignment": True}

    # reverse: last pair in the string becomes the first parameter (legacy)
    order: Literal["reverse", "natural"] = "reverse"
    # permissive: "flag" -> key "flag", value ""; strict: raise QueryParseError
    malformed_pairs: Literal["permissive", "strict"] = "permissive"


class MutationConfig(BaseModel):
    """Parameter list mutation settings."""
    model_config = {"validate_assignment": True}

    # False: add_param keeps arguments appended before a bad one
    atomic_add: bool = False


class ManagerConfig(BaseModel):
    """Complete URL manager configuration."""
    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    mutation: MutationConfig = Field(default_factory=MutationConfig)


DEFAULT_CONFIG_PATH = Path(__file__).parent / "config" / "urlmanager.yaml"


class ConfigLoader:
    """Load configuration from YAML with overrides."""

    def __init__(self, config_path: Path = None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config: Optional[ManagerConfig] = None
        self._overrides: Dict[str, Any] = {}

    def load(self) -> ManagerConfig:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            # Return default config if file doesn't exist
            self._config = ManagerConfig()
            self._apply_overrides()
            return self._config

        with open(self.config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        self._config = ManagerConfig(**data)
        self._apply_overrides()
        return self._config

    def set_overrides(self, overrides: Dict[str, Any]) -> None:
        """Set overrides to apply on top of YAML config."""
        self._overrides = overrides
        if self._config:
            self._apply_overrides()

    def _apply_overrides(self) -> None:
        if not self._config or not self._overrides:
            return

        for key, value in self._overrides.items():
            self._set_nested(key, value)

    def _set_nested(self, key: str, value: Any) -> None:
        """Set a nested config value using dot notation."""
        parts = key.split(".")
        obj = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise KeyError(f"Unknown config section: {part}")

        final_key = parts[-1]
        if not hasattr(obj, final_key):
            raise KeyError(f"Unknown config key: {key}")

        # Convert value to appropriate type
        current = getattr(obj, final_key)
        if isinstance(current, bool):
            value = str(value).lower() in ("true", "1", "yes")
        elif isinstance(current, int):
            value = int(value)
        elif isinstance(current, float):
            value = float(value)
        setattr(obj, final_key, value)

    def reload(self) -> ManagerConfig:
        """Reload configuration from file."""
        return self.load()

    @property
    def config(self) -> ManagerConfig:
        """Get current config, loading if necessary."""
        if self._config is None:
            self.load()
        return self._config


# Global config loader instance
_loader: Optional[ConfigLoader] = None


def get_config_loader() -> ConfigLoader:
    """Get global config loader instance."""
    global _loader
    if _loader is None:
        _loader = ConfigLoader(get_settings().config_path)
    return _loader


def get_config() -> ManagerConfig:
    """Get current manager config."""
    return get_config_loader().config
