"""
Configuration Module for the Invoice Field Extraction System.

Settings live in ``settings.yaml`` next to this module. The extraction
core never reads configuration by itself: the command line and the
text-acquisition layer pull values from here and hand them down.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_SETTINGS = Path(__file__).parent / "settings.yaml"
PROJECT_ROOT = Path(__file__).parent.parent


class ConfigurationManager:
    """
    Process-wide holder of the YAML settings.

    The first instantiation decides which file is loaded; later calls
    return the same object until ``reset()`` is called. Values are read
    with dotted keys that walk the nested sections.

    Attributes:
        config_path (Path): Settings file currently loaded.

    Example:
        >>> settings = ConfigurationManager()
        >>> settings.get("ocr.tesseract.lang")
        'spa+eng'
        >>> settings.get("extraction.vat_rates")
        [21, 10, 4]
    """

    _instance: Optional['ConfigurationManager'] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[str] = None) -> 'ConfigurationManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Load the settings on first use.

        Args:
            config_path: YAML file to load instead of the bundled
                        ``settings.yaml``. Ignored once loaded.
        """
        if self._initialized:
            return

        self.config_path = Path(config_path) if config_path else DEFAULT_SETTINGS
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """
        Read and parse the settings file.

        Raises:
            FileNotFoundError: If the settings file is missing.
            yaml.YAMLError: If the file is not valid YAML.
        """
        if not self.config_path.is_file():
            raise FileNotFoundError(f"Settings file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            self._config = yaml.safe_load(f) or {}

        self._resolve_paths()

    def _resolve_paths(self) -> None:
        # Relative log paths are anchored at the project root
        log_file = self._config.get('logging', {}).get('file', {})
        path = log_file.get('path')
        if path and not Path(path).is_absolute():
            log_file['path'] = str(PROJECT_ROOT / path)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a setting by dotted key.

        Args:
            key: Dotted path such as "extraction.vat_tolerance".
            default: Returned when any part of the path is missing.

        Returns:
            The setting, or ``default``.

        Example:
            >>> settings.get("output.confidence_warning_threshold")
            0.5
            >>> settings.get("nonexistent.key", "fallback")
            'fallback'
        """
        node: Any = self._config
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_all(self) -> Dict[str, Any]:
        """Shallow copy of every loaded setting."""
        return self._config.copy()

    def reload(self) -> None:
        """Re-read the current settings file."""
        self._load_config()

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded settings so the next call can pick another file."""
        cls._instance = None


def get_config(key: str, default: Any = None) -> Any:
    """Shortcut for ``ConfigurationManager().get(key, default)``."""
    return ConfigurationManager().get(key, default)


__all__ = ['ConfigurationManager', 'get_config']
