"""Prompt configuration: defaults, parsing and locating the config file."""

import os
import sys
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import tomli_w

from .colors import BaseColor, Color, ColoredTag, ColorIntensity

APP_DIR_NAME = "git-radar"
CONFIG_FILE_NAME = "config.toml"


class ConfigError(ValueError):
    """Raised when a configuration value has the wrong shape."""


def _vivid(color: BaseColor) -> Color:
    return Color(color, ColorIntensity.VIVID)


def _tag(tag: str, color: BaseColor) -> ColoredTag:
    return ColoredTag(_vivid(color), tag)


@dataclass
class Parts:
    """Which sections of the prompt are shown."""

    show_repo_indicator: bool = True
    show_merge_branch_commits_diff: bool = True
    show_local_branch: bool = True
    show_commits_to_origin: bool = True
    show_local_changes_state: bool = True
    show_stashes: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Parts":
        """Build from a mapping; missing keys keep their defaults."""
        values = {}
        for item in fields(cls):
            if item.name not in data:
                continue
            value = data[item.name]
            if not isinstance(value, bool):
                raise ConfigError(f"{item.name} must be a boolean, got {value!r}")
            values[item.name] = value
        return cls(**values)

    def to_dict(self) -> dict[str, bool]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass
class Config:
    """All settings that shape the rendered prompt."""

    parts: Parts = field(default_factory=Parts)

    repo_indicator: str = "ᚴ"

    no_tracked_upstream_string: ColoredTag = _tag("upstream", BaseColor.RED)
    no_tracked_upstream_indicator: ColoredTag = _tag("\u26A1", BaseColor.RED)

    merge_branch_commits_indicator: str = "\U0001D62E"
    merge_branch_commits_only_push: ColoredTag = _tag("\u2190", BaseColor.GREEN)
    merge_branch_commits_only_pull: ColoredTag = _tag("\u2192", BaseColor.GREEN)
    merge_branch_commits_both_pull_push: ColoredTag = _tag("\u21C4", BaseColor.GREEN)
    merge_branch_ignore_branches: list[str] = field(
        default_factory=lambda: ["gh-pages"]
    )

    local_branch_name_prefix: str = "["
    local_branch_name_suffix: str = "]"
    local_detached_prefix: str = "detached@"
    local_branch_color: Color = _vivid(BaseColor.NO_COLOR)
    local_detached_color: Color = _vivid(BaseColor.YELLOW)

    local_commits_push_suffix: ColoredTag = _tag("\u2191", BaseColor.GREEN)
    local_commits_pull_suffix: ColoredTag = _tag("\u2193", BaseColor.RED)
    local_commits_push_pull_infix: ColoredTag = _tag("\u296F", BaseColor.GREEN)

    change_index_add_suffix: ColoredTag = _tag("A", BaseColor.GREEN)
    change_index_mod_suffix: ColoredTag = _tag("M", BaseColor.GREEN)
    change_index_del_suffix: ColoredTag = _tag("D", BaseColor.GREEN)
    change_local_add_suffix: ColoredTag = _tag("A", BaseColor.WHITE)
    change_local_mod_suffix: ColoredTag = _tag("M", BaseColor.RED)
    change_local_del_suffix: ColoredTag = _tag("D", BaseColor.RED)
    change_renamed_suffix: ColoredTag = _tag("R", BaseColor.GREEN)
    change_conflicted_suffix: ColoredTag = _tag("C", BaseColor.GREEN)

    stash_suffix: ColoredTag = _tag("≡", BaseColor.GREEN)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """Build from a parsed TOML table; missing keys keep their defaults."""
        if not isinstance(data, Mapping):
            raise ConfigError("configuration must be a table")
        values = {
            item.name: _convert(item.name, item.type, data[item.name])
            for item in fields(cls)
            if item.name in data
        }
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return {item.name: _export(getattr(self, item.name)) for item in fields(self)}

    def to_toml(self) -> str:
        return tomli_w.dumps(self.to_dict())


def _convert(name: str, expected: Any, value: Any) -> Any:
    if expected is str:
        if isinstance(value, str):
            return value
    elif expected == list[str]:
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return list(value)
    elif expected in (Parts, Color, ColoredTag):
        if isinstance(value, Mapping):
            try:
                return expected.from_dict(value)
            except ValueError as exc:
                raise ConfigError(f"invalid value for {name!r}: {exc}") from exc
    raise ConfigError(f"invalid value for {name!r}: {value!r}")


def _export(value: Any) -> Any:
    if isinstance(value, (Parts, Color, ColoredTag)):
        return value.to_dict()
    if isinstance(value, list):
        return list(value)
    return value


def _config_dir() -> Path | None:
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else None
    if sys.platform != "darwin":
        xdg = os.environ.get("XDG_CONFIG_HOME")
        if xdg and os.path.isabs(xdg):
            return Path(xdg)
    try:
        home = Path.home()
    except RuntimeError:
        return None
    if sys.platform == "darwin":
        return home / "Library" / "Application Support"
    return home / ".config"


def config_file_path() -> Path | None:
    """Location of the user's configuration file, or None if it cannot be found."""
    base = _config_dir()
    if base is None:
        return None
    return base / APP_DIR_NAME / CONFIG_FILE_NAME


def load_config(path: str | os.PathLike[str]) -> Config:
    """Read a TOML configuration file."""
    with open(path, "rb") as handle:
        return Config.from_dict(tomllib.load(handle))


def get_app_config() -> Config:
    """Load the user's configuration, falling back to the defaults."""
    path = config_file_path()
    if path is not None and path.exists():
        return load_config(path)
    return Config()