"""
Config Manager

Loads config.yaml (with include: support) and parses it into the typed
AppConfig models. Range and consistency checks live in the models, so any
invalid value surfaces here as ValueError at startup.
"""

import yaml
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from models.config import (
    AnimationConfig,
    ApiConfig,
    AppConfig,
    CalibrationConfig,
    DiagnosticsConfig,
    LoggingConfig,
    ShadingConfig,
    StripConfig,
    TorusConfig,
)
from models.enums import (
    ExportTarget,
    LogCategory,
    LogLevel,
    PanelRotation,
    StripDriver,
    WiringTopology,
)
from models.grid import GridConfig
from utils.enum_helper import EnumHelper
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)


# section name → (model class, {field: enum class})
SECTIONS: Dict[str, tuple] = {
    "grid": (GridConfig, {"wiring": WiringTopology, "rotation": PanelRotation}),
    "torus": (TorusConfig, {}),
    "shading": (ShadingConfig, {}),
    "animation": (AnimationConfig, {}),
    "strip": (StripConfig, {"driver": StripDriver}),
    "diagnostics": (DiagnosticsConfig, {"target": ExportTarget}),
    "api": (ApiConfig, {}),
    "calibration": (CalibrationConfig, {}),
    "logging": (LoggingConfig, {"level": LogLevel}),
}


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes the include: directive to merge modular
    YAML files. Falls back to factory defaults when the main file cannot be
    read. Parsing errors are never masked by the fallback.

    Example:
        config_manager = ConfigManager()
        app_config = config_manager.load()

        raw = config_manager.data["torus"]  # raw dict
    """

    def __init__(
        self,
        config_path="config/config.yaml",
        defaults_path="config/factory_defaults.yaml",
        base_dir: Optional[Path] = None,
    ):
        """
        Args:
            config_path: Path to main config.yaml (relative to base_dir)
            defaults_path: Path to factory defaults fallback
            base_dir: Directory relative paths resolve against (default: src/)
        """
        self.base_dir = Path(base_dir) if base_dir else Path(__file__).parent.parent
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}
        self.config: Optional[AppConfig] = None

    def load(self) -> AppConfig:
        """
        Load and parse configuration

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Fallback to factory defaults on read/YAML failure
        4. Parse into AppConfig (ValueError on invalid values)
        """
        self.data = self._load_raw()
        self.config = self.parse(self.data)

        grid = self.config.grid
        log.info(
            "Configuration loaded",
            grid=f"{grid.width}x{grid.height}",
            wiring=grid.wiring.value,
            driver=self.config.strip.driver.value,
        )
        return self.config

    def _load_raw(self) -> Dict[str, Any]:
        full_path = self.base_dir / self.config_path
        try:
            main_config = self._read_yaml(full_path)

            if "include" in main_config:
                log.info("Using include-based configuration")
                includes = main_config.pop("include")
                merged = self._load_with_includes(includes, full_path.parent)
                merged.update(main_config)
                return merged

            log.info("Using monolithic configuration", path=str(full_path))
            return main_config

        except (OSError, yaml.YAMLError) as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")
            return self._read_yaml(self.base_dir / self.factory_defaults_path)

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict[str, Any]:
        """
        Load and merge multiple YAML files from include list

        Later files override earlier ones section by section.
        """
        merged: Dict[str, Any] = {}

        for filename in include_list:
            file_data = self._read_yaml(config_dir / filename)
            merged.update(file_data)
            log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))

        return merged

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise yaml.YAMLError(f"{path.name}: top level must be a mapping")
        return data

    # === Parsing ===

    @classmethod
    def parse(cls, data: Dict[str, Any]) -> AppConfig:
        """Build AppConfig from a raw dict. Missing sections use defaults."""
        for key in data:
            if key not in SECTIONS:
                log.warn(f"Ignoring unknown config section '{key}'")

        sections = {
            name: cls._parse_section(name, data.get(name), model, enums)
            for name, (model, enums) in SECTIONS.items()
        }
        return AppConfig(**sections)

    @staticmethod
    def _parse_section(name: str, raw: Any, model: Type, enums: Dict[str, Type]):
        if raw is None:
            return model()
        if not isinstance(raw, dict):
            raise ValueError(f"Config section '{name}' must be a mapping, got {type(raw).__name__}")

        known = {f.name for f in fields(model)}
        kwargs = {}
        for key, value in raw.items():
            if key not in known:
                log.warn(f"Ignoring unknown key '{name}.{key}'")
                continue
            if key in enums and value is not None:
                value = EnumHelper.parse(enums[key], value)
            kwargs[key] = value

        return model(**kwargs)

