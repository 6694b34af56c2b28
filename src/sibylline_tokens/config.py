"""Configuration loader for helper recognizers.

Loads ``helpers.yaml`` with priority resolution:
1. User config: ~/.config/{app_name}/helpers.yaml (highest priority)
2. Project config: .{app_name}/helpers.yaml in current directory
3. Package defaults: shipped with sibylline-tokens (fallback)

The first file found wins. A config file may set the default helper
``order`` and define extra regex ``patterns``::

    order: [urls, emails, hashtags]
    patterns:
      hashtags:
        kind: hashtag
        pattern: '#\\p{L}[\\p{L}\\d_]*'
        ignore_case: false
"""

from __future__ import annotations

import logging
from pathlib import Path

import regex

from .helpers.base import PatternHelper

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "helpers.yaml"

# Lazy import yaml to avoid startup cost
_yaml = None


def _get_yaml():
    """Lazy-load PyYAML."""
    global _yaml
    if _yaml is None:
        import yaml

        _yaml = yaml
    return _yaml


def _get_package_defaults_path() -> Path:
    """Get path to package default helper config using importlib.resources."""
    try:
        from importlib.resources import files

        return files("sibylline_tokens.helper_data") / "_defaults"
    except (ImportError, TypeError):
        # Fallback for editable installs
        return Path(__file__).parent / "helper_data" / "_defaults"


class HelperConfig:
    """Load helper settings from config files with priority resolution.

    Config locations are checked in priority order:
    1. ~/.config/{app_name}/ - User overrides
    2. .{app_name}/ - Project-specific settings
    3. Package defaults - Shipped with sibylline-tokens
    """

    def __init__(self, app_name: str = "sibylline-tokens", path: Path | str | None = None):
        """Initialize and load the config.

        Args:
            app_name: Application name for config directory resolution.
            path: Explicit config file. Skips the location search when given.
        """
        self._app_name = app_name
        self._config_locations = [
            Path.home() / ".config" / app_name,  # User overrides
            Path.cwd() / f".{app_name}",  # Project config
        ]

        self.source: Path | None = None
        self._order: tuple[str, ...] | None = None
        self._helpers: dict[str, PatternHelper] = {}

        config_file = Path(path) if path is not None else self._find_config_file()
        if config_file is not None:
            self._load(config_file)

    def _find_config_file(self):
        """Find the config file, checking locations in priority order.

        Returns:
            Path (or importlib traversable) of the config file, or None.
        """
        for config_dir in self._config_locations:
            config_file = config_dir / CONFIG_FILENAME
            if config_file.exists():
                return config_file

        default_file = _get_package_defaults_path() / CONFIG_FILENAME
        if default_file.is_file():
            return default_file

        return None

    def _load(self, config_file) -> None:
        yaml = _get_yaml()

        try:
            data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Skipping unreadable helper config %s: %s", config_file, exc)
            return

        self.source = config_file
        if not data:
            return
        if not isinstance(data, dict):
            logger.warning("Ignoring helper config %s: expected a mapping", config_file)
            return

        order = data.get("order")
        if isinstance(order, list):
            self._order = tuple(str(name) for name in order)
        elif order is not None:
            logger.warning("Ignoring helper order in %s: expected a list", config_file)

        patterns = data.get("patterns") or {}
        if not isinstance(patterns, dict):
            logger.warning("Ignoring helper patterns in %s: expected a mapping", config_file)
            return

        for name, entry in patterns.items():
            helper = self._build_helper(str(name), entry or {})
            if helper is not None:
                self._helpers[helper.name] = helper

    def _build_helper(self, name: str, entry) -> PatternHelper | None:
        if not isinstance(entry, dict):
            logger.warning("Skipping helper %r: expected a mapping", name)
            return None

        pattern = entry.get("pattern")
        if not pattern:
            logger.warning("Skipping helper %r: no pattern", name)
            return None

        flags = regex.IGNORECASE if entry.get("ignore_case") else 0
        try:
            return PatternHelper(name=name, pattern=pattern, kind=entry.get("kind"), flags=flags)
        except regex.error as exc:
            logger.warning("Skipping helper %r: invalid pattern: %s", name, exc)
            return None

    @property
    def order(self) -> tuple[str, ...] | None:
        """Helper order from the config, or None if it does not set one."""
        return self._order

    def get_helpers(self) -> dict[str, PatternHelper]:
        """Get the pattern helpers defined in the config.

        Returns:
            Dict mapping helper names to helpers.
        """
        return self._helpers.copy()
