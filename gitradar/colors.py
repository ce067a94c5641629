"""Colours, coloured tags and shell kinds used to render the prompt."""

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


class BaseColor(enum.Enum):
    """A base terminal colour."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    NO_COLOR = "nocolor"


class ColorIntensity(enum.Enum):
    """Whether a colour is drawn bright or plain."""

    DULL = "dull"
    VIVID = "vivid"


class Shell(enum.Enum):
    """The environment the prompt is rendered for."""

    BASH = "bash"
    ZSH = "zsh"
    TMUX = "tmux"
    NONE = "none"
    OTHER = "other"


_ANSI_DIGITS = {
    BaseColor.BLACK: 0,
    BaseColor.RED: 1,
    BaseColor.GREEN: 2,
    BaseColor.YELLOW: 3,
    BaseColor.BLUE: 4,
    BaseColor.MAGENTA: 5,
    BaseColor.CYAN: 6,
    BaseColor.WHITE: 7,
}

TERMINAL_RESET = "\x1b[0;39m"
TMUX_RESET = "#[fg=default]"


def _parse_enum(enum_type: type[enum.Enum], value: Any, field_name: str) -> Any:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string, got {value!r}")
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        raise ValueError(
            f"unknown {field_name} {value!r} (expected one of: {allowed})"
        ) from None


def _require(data: Mapping[str, Any], key: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a table, got {data!r}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


@dataclass(frozen=True)
class Color:
    """A base colour together with its intensity."""

    color: BaseColor
    intensity: ColorIntensity

    def terminal_start_code(self) -> str:
        """ANSI escape sequence that switches to this colour."""
        if self.color is BaseColor.NO_COLOR:
            return TERMINAL_RESET
        digit = _ANSI_DIGITS[self.color]
        if self.intensity is ColorIntensity.VIVID:
            return f"\x1b[1;3{digit}m"
        return f"\x1b[3{digit}m"

    def tmux_start_code(self) -> str:
        """tmux style directive that switches to this colour."""
        if self.color is BaseColor.NO_COLOR:
            return TMUX_RESET
        prefix = "bright" if self.intensity is ColorIntensity.VIVID else ""
        return f"#[fg={prefix}{self.color.value}]"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Color":
        """Build a colour from a mapping with ``color`` and ``intensity`` keys."""
        return cls(
            color=_parse_enum(BaseColor, _require(data, "color"), "color"),
            intensity=_parse_enum(
                ColorIntensity, _require(data, "intensity"), "intensity"
            ),
        )

    def to_dict(self) -> dict[str, str]:
        return {"color": self.color.value, "intensity": self.intensity.value}


@dataclass(frozen=True)
class ColoredTag:
    """A piece of text drawn in a given colour."""

    color: Color
    tag: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ColoredTag":
        """Build a tag from a flat mapping of ``color``, ``intensity`` and ``tag``."""
        tag = _require(data, "tag")
        if not isinstance(tag, str):
            raise ValueError(f"tag must be a string, got {tag!r}")
        return cls(color=Color.from_dict(data), tag=tag)

    def to_dict(self) -> dict[str, str]:
        return {**self.color.to_dict(), "tag": self.tag}