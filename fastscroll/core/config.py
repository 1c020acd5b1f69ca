from typing import Any
import json
import os
from pydantic import BaseModel, Field, ValidationError, field_validator
from loguru import logger
from .events import Signal
from .options import DEFAULT_FALLBACK_SECTION, SortMode, FractionPolicy


# --- Settings Models ---
class AppListSettings(BaseModel):
    num_apps_per_row: int = Field(0, ge=0)
    sort_mode: SortMode = SortMode.FIRST_CHAR
    fraction_policy: FractionPolicy = FractionPolicy.DISTRIBUTE_BY_NUM_SECTIONS
    fallback_section: str = DEFAULT_FALLBACK_SECTION

    @field_validator("fallback_section")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("fallback_section must not be empty")
        return value


class GeneralSettings(BaseModel):
    debug_mode: bool = False
    log_dir: str = "logs"


class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    applist: AppListSettings = Field(default_factory=AppListSettings)


# --- Manager ---
class ConfigManager:
    """
    Manages application configuration with persistence and reactivity.
    """
    def __init__(self, filepath: str = "config.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = Signal("ConfigChanged")
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and emit change event."""
        if not hasattr(self._data, section):
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        raw = section_obj.model_dump()
        raw[key] = value
        try:
            validated = type(section_obj).model_validate(raw)
        except ValidationError as e:
            raise ValueError(f"Invalid value for {section}.{key}: {value!r}") from e

        setattr(self._data, section, validated)
        self._save()
        self.on_changed.emit(section, key, getattr(validated, key))

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if os.path.isfile(self.filepath):
            try:
                if self.filepath.endswith('.toml'):
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
            except (OSError, ValueError) as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
                self._save()
        else:
            self._save()

    def _save(self):
        """Persist current config to JSON file."""
        if self.filepath.endswith('.toml'):
            # tomllib is read-only; TOML files are never rewritten.
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(mode="json"), f, indent=4)
        except OSError as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
