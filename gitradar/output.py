"""Writing coloured prompt text with shell-specific escape markers."""

from .colors import TERMINAL_RESET, TMUX_RESET, Color, ColoredTag, Shell


def _apply_shell_markers(shell: Shell, marker: str) -> str:
    if shell is Shell.ZSH:
        return f"%{{{marker}%}}"
    if shell is Shell.BASH:
        return f"\x01{marker}\x02"
    return marker


def _start_marker(shell: Shell, color: Color) -> str:
    if shell is Shell.TMUX:
        return color.tmux_start_code()
    if shell is Shell.NONE:
        return ""
    return _apply_shell_markers(shell, color.terminal_start_code())


def _end_marker(shell: Shell) -> str:
    if shell is Shell.TMUX:
        return TMUX_RESET
    if shell is Shell.NONE:
        return ""
    return _apply_shell_markers(shell, TERMINAL_RESET)


def tell_string_in_color(shell: Shell, color: Color, text: str) -> str:
    """Return ``text`` wrapped in the colour markers appropriate for ``shell``."""
    return f"{_start_marker(shell, color)}{text}{_end_marker(shell)}"


class TerminalOutput:
    """Accumulates prompt text, inserting a single space where a delimiter is pending."""

    def __init__(self, shell: Shell) -> None:
        self.shell = shell
        self._parts: list[str] = []
        self._pending_delimiter = False

    def _flush_delimiter(self) -> None:
        if self._pending_delimiter:
            self._parts.append(" ")
            self._pending_delimiter = False

    def write(self, text: object) -> None:
        """Append plain text (any object is converted with ``str``)."""
        self._flush_delimiter()
        self._parts.append(str(text))

    def string_in_color(self, color: Color, text: str) -> None:
        self.start_color_marker(color)
        self._parts.append(text)
        self.end_color_marker()

    def colored_tag(self, colored_tag: ColoredTag) -> None:
        self.string_in_color(colored_tag.color, colored_tag.tag)

    def start_color_marker(self, color: Color) -> None:
        self._flush_delimiter()
        self._parts.append(_start_marker(self.shell, color))

    def end_color_marker(self) -> None:
        self._flush_delimiter()
        self._parts.append(_end_marker(self.shell))

    def add_delimiter(self) -> None:
        """Request a space before whatever is written next."""
        self._pending_delimiter = True

    def getvalue(self) -> str:
        return "".join(self._parts)