"""Parsing of ``git status --porcelain`` output into change counts."""

import re
from collections.abc import Iterator

from .repo import GitFileState, GitLocalRepoChanges

# Each rule is (allowed first characters, allowed second characters, state),
# tried in order; the first rule that matches the line's two leading
# characters decides its state.
_Rule = tuple[str, str, GitFileState]

_INDEX_RULES: tuple[_Rule, ...] = (
    ("D", "DU", GitFileState.CONFLICT),
    ("A", "AU", GitFileState.CONFLICT),
    ("U", "AUD", GitFileState.CONFLICT),
    ("R", "DM ", GitFileState.RENAMED),
    ("M", "DM ", GitFileState.INDEX_MOD),
    ("A", "DM ", GitFileState.INDEX_ADD),
    ("D", "M ", GitFileState.INDEX_DEL),
)

_LOCAL_RULES: tuple[_Rule, ...] = (
    ("MARC ", "M", GitFileState.LOCAL_MOD),
    ("?", "?", GitFileState.LOCAL_ADD),
    ("MARC ", "D", GitFileState.LOCAL_DEL),
)

# One record: a leading character (which may itself be a line break), the
# rest of the line, and a mandatory line ending.  A final line without a
# line ending, or a bare carriage return inside a line, ends the parse.
_RECORD = re.compile(r"(.)([^\r\n]*)(?:\r\n|\n)", re.DOTALL)


def _classify(rules: tuple[_Rule, ...], line: str | bytes) -> GitFileState:
    if isinstance(line, (bytes, bytearray)):
        line = bytes(line).decode("latin-1")
    if len(line) >= 2:
        first, second = line[0], line[1]
        for firsts, seconds, state in rules:
            if first in firsts and second in seconds:
                return state
    return GitFileState.SKIP


def index_file_state(line: str | bytes) -> GitFileState:
    """Classify a status line by its staged (index) change."""
    return _classify(_INDEX_RULES, line)


def local_file_state(line: str | bytes) -> GitFileState:
    """Classify a status line by its working-tree change."""
    return _classify(_LOCAL_RULES, line)


def _records(text: str) -> Iterator[str]:
    pos = 0
    while (match := _RECORD.match(text, pos)) is not None:
        yield match.group(1) + match.group(2)
        pos = match.end()


def parse_status(data: str | bytes) -> GitLocalRepoChanges:
    """Count working-tree and index changes in porcelain status output."""
    if isinstance(data, (bytes, bytearray)):
        text = bytes(data).decode("latin-1")
    else:
        text = data
    lines = list(_records(text))
    local = GitLocalRepoChanges.from_states(local_file_state(line) for line in lines)
    index = GitLocalRepoChanges.from_states(index_file_state(line) for line in lines)
    return local + index