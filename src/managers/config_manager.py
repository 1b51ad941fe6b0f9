"""
Config Manager

Layout configuration manager with include system support.
Loads modular YAML files, validates them and builds layout objects.
"""

import random
import yaml
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from config import CONFIG_DIR
from managers.pixel_location_manager import PixelLocationManager
from models.color_container import ColorContainer
from models.errors import InvalidConfigurationError
from models.location import Rotation
from schemas.layout import LayoutSchema
from utils.logger import Logger, get_logger, LogCategory
from utils.serialization import Serializer

log = get_logger().for_category(LogCategory.CONFIG)


class ConfigManager:
    """
    Layout configuration manager with include system support

    Loads layout.yaml and processes include: directive to load modular YAML
    files (e.g. locations in one file, palettes in another).

    Example:
        config = ConfigManager()
        config.load()

        manager = config.build_pixel_location_manager()
        palette = config.get_palette("sunset")
        buckets = manager.group_pixels_by_axis(config.sweep_rotation, config.sweep_step_size)
    """

    def __init__(
        self,
        config_path: Union[str, Path] = "layout.yaml",
        defaults_path: Optional[Union[str, Path]] = "factory_defaults.yaml",
    ):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main layout.yaml (relative paths resolve against
                         the installed config package)
            defaults_path: Path to factory defaults fallback, or None to fail
                           hard when the main config cannot be loaded
        """
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path) if defaults_path else None
        self.data: Dict = {}
        self.layout: Optional[LayoutSchema] = None

    def load(self) -> Dict:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main layout.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat as monolithic config
        4. Fallback to factory defaults on failure (when configured)
        5. Validate merged data

        Returns:
            Merged config data dict

        Raises:
            InvalidConfigurationError: If no usable configuration could be loaded
        """
        try:
            self.data = self._load_file(CONFIG_DIR / self.config_path)
            self.layout = self._validate(self.data)
        except (OSError, yaml.YAMLError, InvalidConfigurationError) as ex:
            log.error("Failed to load layout config", error=str(ex), error_type=type(ex).__name__)
            if self.factory_defaults_path is None:
                if isinstance(ex, InvalidConfigurationError):
                    raise
                raise InvalidConfigurationError(
                    f"Cannot load layout config: {ex}",
                    path=str(self.config_path),
                ) from ex

            log.warn("Falling back to factory defaults")
            try:
                self.data = self._load_file(CONFIG_DIR / self.factory_defaults_path)
                self.layout = self._validate(self.data)
            except (OSError, yaml.YAMLError) as fallback_ex:
                log.error("Failed to load factory defaults", error=str(fallback_ex))
                raise InvalidConfigurationError(
                    f"Cannot load factory defaults: {fallback_ex}",
                    path=str(self.factory_defaults_path),
                ) from fallback_ex

        log.info(
            "Layout config loaded",
            num_leds=self.layout.num_leds,
            palettes=len(self.layout.palettes),
        )
        return self.data

    def _load_file(self, path: Path) -> Dict:
        with open(path, "r", encoding="utf-8") as f:
            main_config = yaml.safe_load(f) or {}

        if not isinstance(main_config, dict):
            raise InvalidConfigurationError(
                f"Expected a mapping at the top of {path.name}, got {type(main_config).__name__}",
                path=str(path),
            )

        if 'include' in main_config:
            log.info("Using include-based configuration")
            return self._load_with_includes(main_config['include'], path.parent)

        log.info("Using monolithic configuration")
        return main_config

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """
        Load and merge multiple YAML files from include list

        Later files override keys of earlier ones.

        Args:
            include_list: List of filenames to load (e.g., ["locations.yaml", "palettes.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict
        """
        merged = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    file_data = yaml.safe_load(f)
                    if file_data and not isinstance(file_data, dict):
                        raise InvalidConfigurationError(
                            f"Expected a mapping at the top of {filename}, got {type(file_data).__name__}",
                            path=str(filepath),
                        )
                    if file_data:
                        merged.update(file_data)
                        log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise
            except yaml.YAMLError as ex:
                log.error(f"Error loading {filename}", error=str(ex))
                raise

        log.info("Config merge complete", total_keys=len(merged), keys=str(list(merged.keys())[:10]))
        return merged

    @staticmethod
    def _validate(data: Dict) -> LayoutSchema:
        try:
            return LayoutSchema.model_validate(data)
        except ValidationError as ex:
            raise InvalidConfigurationError(
                "Layout config failed validation",
                errors=[f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in ex.errors()],
            ) from ex

    def _require_layout(self) -> LayoutSchema:
        if self.layout is None:
            raise RuntimeError("ConfigManager.load() must be called first")
        return self.layout

    # ===== Layout Access API =====

    def build_pixel_location_manager(
        self,
        logger: Optional[Logger] = None,
        rng: Optional[random.Random] = None,
    ) -> PixelLocationManager:
        """
        Build the PixelLocationManager described by the loaded layout

        Raises:
            InvalidConfigurationError: Duplicate locations
            OutOfRangeError: Fewer locations than pixels
        """
        layout = self._require_layout()
        locations = None
        if layout.locations is not None:
            locations = [Serializer.location_from_list(coords) for coords in layout.locations]
        return PixelLocationManager(locations, layout.num_leds, logger=logger, rng=rng)

    @property
    def palette_names(self) -> List[str]:
        return list(self._require_layout().palettes.keys())

    def get_palette(self, name: str) -> ColorContainer:
        """
        Get a named palette as a new ColorContainer

        Raises:
            KeyError: If palette doesn't exist
        """
        return ColorContainer.from_list(self._require_layout().palettes[name])

    @property
    def sweep_rotation(self) -> Rotation:
        return Serializer.rotation_from_degrees(self._require_layout().sweep.rotation_degrees)

    @property
    def sweep_step_size(self) -> float:
        return self._require_layout().sweep.step_size
