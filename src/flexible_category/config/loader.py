"""
Configuration Loader - Site Config File Plus Profiles.

A site config is one YAML file. Profiles live in a ``profiles``
directory beside it and are merged over the file in the order given:
mappings merge key by key (so ``messages`` overrides accumulate),
``plugins`` lists are extended without duplicates, and any other value
is replaced. The result is validated into a CategoryPageConfig.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import yaml

from flexible_category.config.models import CategoryPageConfig

logger = logging.getLogger(__name__)

PROFILE_DIR = "profiles"
ADDITIVE_LISTS = frozenset({"plugins"})


class ConfigLoader:
    """Loads one site config file and its profiles."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        """
        Initialize config loader.

        Args:
            config_path: Site config file; profiles are looked up in
                the ``profiles`` directory next to it
        """
        self.config_path = Path(config_path)
        self.profile_dir = self.config_path.parent / PROFILE_DIR

    def available_profiles(self) -> List[str]:
        """Names of the profiles shipped beside the config file."""
        if not self.profile_dir.is_dir():
            return []
        return sorted(p.stem for p in self.profile_dir.glob("*.yaml"))

    def load(self, profiles: Sequence[str] = ()) -> CategoryPageConfig:
        """
        Load the config file with the given profiles merged over it.

        Raises:
            FileNotFoundError: If the config file or a profile doesn't exist
            ValueError: If a file does not hold a mapping
            ValidationError: If the merged config is invalid
        """
        config_dict = _read_mapping(self.config_path)
        for name in profiles:
            config_dict = merge_config(config_dict, self._read_profile(name))

        config = CategoryPageConfig.model_validate(config_dict)
        logger.info(
            f"Loaded config {self.config_path}"
            + (f" with profiles {list(profiles)}" if profiles else "")
        )
        return config

    def _read_profile(self, name: str) -> Dict[str, Any]:
        path = self.profile_dir / f"{name}.yaml"
        if not path.is_file():
            raise FileNotFoundError(
                f"Profile not found: {name} (available: {self.available_profiles()})"
            )
        return _read_mapping(path)


def merge_config(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Merge a profile over a config dict; neither input is modified."""
    result = dict(base)
    for key, value in overlay.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = merge_config(current, value)
        elif key in ADDITIVE_LISTS and isinstance(current, list) and isinstance(value, list):
            result[key] = current + [v for v in value if v not in current]
        else:
            result[key] = value
    return result


def _read_mapping(path: Path) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


def load_config(
    config_path: Union[str, Path],
    profile: Optional[Union[str, Sequence[str]]] = None,
) -> CategoryPageConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Site config file
        profile: Profile name, or names applied in order

    Returns:
        Validated CategoryPageConfig object
    """
    if profile is None:
        profiles: Sequence[str] = ()
    elif isinstance(profile, str):
        profiles = (profile,)
    else:
        profiles = tuple(profile)
    return ConfigLoader(config_path).load(profiles)
