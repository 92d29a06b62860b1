import json
import logging
from pathlib import Path
from typing import Dict, Any, Union

from pydantic import ValidationError

from ..data_models import WaitSettings

# Relative to the working directory of the calling application, not to this package
DEFAULT_SETTINGS_FILE = Path('config') / 'settings.json'

logger = logging.getLogger(__name__)

class ConfigLoader:
    def __init__(self, settings_file: Union[str, Path] = DEFAULT_SETTINGS_FILE):
        """
        Initializes the ConfigLoader.

        Args:
            settings_file (Union[str, Path], optional): Path to the settings JSON file.
                                                        Defaults to 'config/settings.json' under the
                                                        current working directory.
        """
        self.settings_file: Path = Path(settings_file).resolve()
        # Relative paths inside the settings (e.g. log files) are resolved against this
        self.base_dir: Path = self.settings_file.parent
        self.settings: Dict[str, Any] = self._load_json(self.settings_file, default_value={})

        if not self.settings:
            logger.warning(f"Settings file '{self.settings_file}' was not found or is empty/invalid. Using empty settings.")

    def _load_json(self, file_path: Path, default_value: Dict) -> Any:
        """
        Loads a JSON file.

        Args:
            file_path (Path): The path to the JSON file.
            default_value (Dict): The default value to return if loading fails.

        Returns:
            Any: The loaded JSON data or the default value.
        """
        if not file_path.exists():
            logger.error(f"Configuration file not found: {file_path}")
            return default_value
        if not file_path.is_file():
            logger.error(f"Configuration path is not a file: {file_path}")
            return default_value

        try:
            with file_path.open('r', encoding='utf-8') as f:
                data = json.load(f)
                logger.debug(f"Successfully loaded JSON from {file_path}")
        except json.JSONDecodeError as e:
            logger.error(f"Could not decode JSON from {file_path}: {e}")
            return default_value
        except OSError as e:
            logger.error(f"Could not read {file_path}: {e}")
            return default_value

        if not isinstance(data, dict):
            logger.error(f"Expected a JSON object at the top of {file_path}, found {type(data).__name__}.")
            return default_value
        return data

    def get_settings(self) -> Dict[str, Any]:
        """Returns all loaded settings."""
        return self.settings

    def get_setting(self, path_str: str, default: Any = None) -> Any:
        """
        Retrieves a setting value using a dot-separated path.

        Args:
            path_str (str): Dot-separated path to the setting (e.g., "logging.level").
            default (Any, optional): Default value if the setting is not found. Defaults to None.

        Returns:
            Any: The setting value or the default.
        """
        current_level: Any = self.settings
        for key in path_str.split('.'):
            if not isinstance(current_level, dict):
                # Path leads to a non-dict item before all keys are consumed
                logger.warning(f"Invalid path '{path_str}' at key '{key}'. Expected a dictionary, found {type(current_level)}.")
                return default
            if key not in current_level:
                logger.debug(f"Setting '{path_str}' not found. Returning default: {default}")
                return default
            current_level = current_level[key]
        return current_level

    def resolve_path(self, path_str: Union[str, Path]) -> Path:
        """Resolves a path from the settings relative to the settings file's directory."""
        path = Path(path_str)
        return path if path.is_absolute() else self.base_dir / path

    def get_logging_setting(self, setting_name: str, default: Any = None) -> Any:
        """Retrieves a specific setting from the 'logging' block."""
        return self.get_setting(f'logging.{setting_name}', default)

    def get_wait_setting(self, setting_name: str, default: Any = None) -> Any:
        """Retrieves a specific setting from the 'waits' block."""
        return self.get_setting(f'waits.{setting_name}', default)

    def get_wait_settings(self) -> WaitSettings:
        """
        Builds the WaitSettings used by components from the 'waits' block.

        Raises:
            pydantic.ValidationError: if the block holds invalid values (e.g. a negative timeout).
        """
        block = self.get_setting('waits', {})
        if not isinstance(block, dict):
            logger.warning(f"'waits' in config is not an object: {block}. Using defaults.")
            return WaitSettings()
        try:
            return WaitSettings(**block)
        except ValidationError:
            logger.error(f"Invalid 'waits' block in {self.settings_file}: {block}")
            raise
