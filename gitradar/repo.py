"""Repository state types and branch name helpers."""

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field, fields


class GitFileState(enum.Enum):
    """The classification of one line of porcelain status output."""

    LOCAL_MOD = enum.auto()
    LOCAL_ADD = enum.auto()
    LOCAL_DEL = enum.auto()
    INDEX_MOD = enum.auto()
    INDEX_ADD = enum.auto()
    INDEX_DEL = enum.auto()
    RENAMED = enum.auto()
    CONFLICT = enum.auto()
    SKIP = enum.auto()


_COUNTER_FIELDS = {
    GitFileState.LOCAL_MOD: "local_mod",
    GitFileState.LOCAL_ADD: "local_add",
    GitFileState.LOCAL_DEL: "local_del",
    GitFileState.INDEX_MOD: "index_mod",
    GitFileState.INDEX_ADD: "index_add",
    GitFileState.INDEX_DEL: "index_del",
    GitFileState.RENAMED: "renamed",
    GitFileState.CONFLICT: "conflict",
}


@dataclass
class GitLocalRepoChanges:
    """Counts of changed files by kind."""

    local_mod: int = 0
    local_add: int = 0
    local_del: int = 0
    index_mod: int = 0
    index_add: int = 0
    index_del: int = 0
    renamed: int = 0
    conflict: int = 0

    @classmethod
    def from_states(cls, states: Iterable[GitFileState]) -> "GitLocalRepoChanges":
        """Count file states; ``SKIP`` entries are ignored."""
        counts: dict[str, int] = {}
        for state in states:
            name = _COUNTER_FIELDS.get(state)
            if name is not None:
                counts[name] = counts.get(name, 0) + 1
        return cls(**counts)

    def __add__(self, other: "GitLocalRepoChanges") -> "GitLocalRepoChanges":
        if not isinstance(other, GitLocalRepoChanges):
            return NotImplemented
        return GitLocalRepoChanges(
            **{
                item.name: getattr(self, item.name) + getattr(other, item.name)
                for item in fields(self)
            }
        )


@dataclass
class GitRepoState:
    """Everything the prompt needs to know about the current repository."""

    git_local_repo_changes: GitLocalRepoChanges = field(
        default_factory=GitLocalRepoChanges
    )
    local_branch: str = ""
    commit_short_sha: str = ""
    commit_tag: str = ""
    remote: str = ""
    remote_tracking_branch: str = ""
    stash_count: int = 0
    commits_to_pull: int = 0
    commits_to_push: int = 0
    merge_branch_commits_to_pull: int = 0
    merge_branch_commits_to_push: int = 0


def build_fully_qualified_remote_branch_name(remote: str, remote_branch_name: str) -> str:
    """Join a remote and a branch, dropping a leading ``refs/heads/``."""
    branch = remote_branch_name.removeprefix("refs/heads/")
    return f"{remote}/{branch}"