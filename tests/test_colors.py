import pytest

from gitradar.colors import BaseColor, Color, ColoredTag, ColorIntensity, Shell

VIVID = ColorIntensity.VIVID
DULL = ColorIntensity.DULL


@pytest.mark.parametrize(
    "base, intensity, expected",
    [
        (BaseColor.BLACK, VIVID, "\x1b[1;30m"),
        (BaseColor.RED, VIVID, "\x1b[1;31m"),
        (BaseColor.GREEN, VIVID, "\x1b[1;32m"),
        (BaseColor.YELLOW, VIVID, "\x1b[1;33m"),
        (BaseColor.BLUE, VIVID, "\x1b[1;34m"),
        (BaseColor.MAGENTA, VIVID, "\x1b[1;35m"),
        (BaseColor.CYAN, VIVID, "\x1b[1;36m"),
        (BaseColor.WHITE, VIVID, "\x1b[1;37m"),
        (BaseColor.BLACK, DULL, "\x1b[30m"),
        (BaseColor.RED, DULL, "\x1b[31m"),
        (BaseColor.GREEN, DULL, "\x1b[32m"),
        (BaseColor.YELLOW, DULL, "\x1b[33m"),
        (BaseColor.BLUE, DULL, "\x1b[34m"),
        (BaseColor.MAGENTA, DULL, "\x1b[35m"),
        (BaseColor.CYAN, DULL, "\x1b[36m"),
        (BaseColor.WHITE, DULL, "\x1b[37m"),
        (BaseColor.NO_COLOR, VIVID, "\x1b[0;39m"),
        (BaseColor.NO_COLOR, DULL, "\x1b[0;39m"),
    ],
)
def test_terminal_start_code(base, intensity, expected):
    assert Color(base, intensity).terminal_start_code() == expected


@pytest.mark.parametrize(
    "base, intensity, expected",
    [
        (BaseColor.BLACK, VIVID, "#[fg=brightblack]"),
        (BaseColor.RED, VIVID, "#[fg=brightred]"),
        (BaseColor.GREEN, VIVID, "#[fg=brightgreen]"),
        (BaseColor.YELLOW, VIVID, "#[fg=brightyellow]"),
        (BaseColor.BLUE, VIVID, "#[fg=brightblue]"),
        (BaseColor.MAGENTA, VIVID, "#[fg=brightmagenta]"),
        (BaseColor.CYAN, VIVID, "#[fg=brightcyan]"),
        (BaseColor.WHITE, VIVID, "#[fg=brightwhite]"),
        (BaseColor.BLACK, DULL, "#[fg=black]"),
        (BaseColor.RED, DULL, "#[fg=red]"),
        (BaseColor.GREEN, DULL, "#[fg=green]"),
        (BaseColor.YELLOW, DULL, "#[fg=yellow]"),
        (BaseColor.BLUE, DULL, "#[fg=blue]"),
        (BaseColor.MAGENTA, DULL, "#[fg=magenta]"),
        (BaseColor.CYAN, DULL, "#[fg=cyan]"),
        (BaseColor.WHITE, DULL, "#[fg=white]"),
        (BaseColor.NO_COLOR, VIVID, "#[fg=default]"),
        (BaseColor.NO_COLOR, DULL, "#[fg=default]"),
    ],
)
def test_tmux_start_code(base, intensity, expected):
    assert Color(base, intensity).tmux_start_code() == expected


@pytest.mark.parametrize("base", list(BaseColor))
@pytest.mark.parametrize("intensity", list(ColorIntensity))
def test_color_dict_round_trip(base, intensity):
    color = Color(base, intensity)
    assert Color.from_dict(color.to_dict()) == color


def test_no_color_serialises_lowercase():
    data = Color(BaseColor.NO_COLOR, DULL).to_dict()
    assert data == {"color": "nocolor", "intensity": "dull"}


def test_color_from_dict_rejects_unknown_color():
    with pytest.raises(ValueError):
        Color.from_dict({"color": "purple", "intensity": "vivid"})


def test_color_from_dict_rejects_missing_intensity():
    with pytest.raises(ValueError):
        Color.from_dict({"color": "red"})


def test_color_from_dict_rejects_non_string():
    with pytest.raises(ValueError):
        Color.from_dict({"color": ["red"], "intensity": "vivid"})


def test_colored_tag_is_flat():
    tag = ColoredTag(Color(BaseColor.GREEN, VIVID), "A")
    data = tag.to_dict()
    assert data["tag"] == "A"
    assert set(data) == {"color", "intensity", "tag"}
    assert ColoredTag.from_dict(data) == tag


def test_colored_tag_requires_tag():
    with pytest.raises(ValueError):
        ColoredTag.from_dict({"color": "red", "intensity": "vivid"})


def test_colored_tag_rejects_non_string_tag():
    with pytest.raises(ValueError):
        ColoredTag.from_dict({"color": "red", "intensity": "vivid", "tag": 3})


@pytest.mark.parametrize("name", ["bash", "zsh", "tmux", "none", "other"])
def test_shell_values(name):
    assert Shell(name).value == name