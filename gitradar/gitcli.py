"""Gathering repository state by running the ``git`` command line tool."""

from .process import run_ignoring_exit_code, run_with_exit_code
from .repo import GitRepoState, build_fully_qualified_remote_branch_name
from .repo import GitLocalRepoChanges  # noqa: F401  (re-exported type of a field)
from .status import parse_status

GIT = "git"
DEFAULT_MERGE_BRANCH = "origin/master"


def _git_text(*args: str) -> str:
    return run_ignoring_exit_code(GIT, args).decode("utf-8").rstrip()


def _git_count(*args: str) -> int:
    return int(_git_text(*args))


def _remote_tracking_config_key(local_branch_name: str) -> str:
    return f"branch.{local_branch_name}.remote"


def _remote_branch_config_key(local_branch_name: str) -> str:
    return f"branch.{local_branch_name}.merge"


def _merge_base_diff(from_commit: str, to_commit: str) -> str:
    return f"{from_commit}...{to_commit}"


def local_branch_name() -> str:
    """Name of the checked-out branch, or an empty string when detached."""
    return _git_text("symbolic-ref", "--short", "HEAD")


def merge_base(local_branch_name: str) -> str:
    """Merge base of ``origin/master`` and the given branch, or an empty string."""
    return _git_text("merge-base", DEFAULT_MERGE_BRANCH, local_branch_name)


def remote_name(local_branch_name: str) -> str:
    """Remote the branch tracks, or an empty string."""
    return _git_text("config", "--get", _remote_tracking_config_key(local_branch_name))


def remote_branch_name(local_branch_name: str) -> str:
    """Upstream ref the branch merges from, or an empty string."""
    return _git_text("config", "--get", _remote_branch_config_key(local_branch_name))


def porcelain_status() -> bytes:
    """Raw ``git status --porcelain`` output."""
    return run_ignoring_exit_code(GIT, ["status", "--porcelain"])


def rev_to_push(from_commit: str, to_commit: str) -> int:
    """Non-merge commits reachable from ``to_commit`` but not ``from_commit``."""
    return _git_count(
        "rev-list",
        "--no-merges",
        "--right-only",
        "--count",
        _merge_base_diff(from_commit, to_commit),
    )


def rev_to_pull(from_commit: str, to_commit: str) -> int:
    """Non-merge commits reachable from ``from_commit`` but not ``to_commit``."""
    return _git_count(
        "rev-list",
        "--no-merges",
        "--left-only",
        "--count",
        _merge_base_diff(from_commit, to_commit),
    )


def stash_count() -> int:
    """Number of stash entries."""
    return run_ignoring_exit_code(GIT, ["stash", "list"]).count(b"\n")


def commit_short_sha() -> str:
    """Abbreviated hash of HEAD, or an empty string."""
    return _git_text("rev-parse", "--short", "HEAD")


def commit_tag() -> str:
    """Tag pointing exactly at HEAD, or an empty string."""
    return _git_text("describe", "--exact-match", "--tags")


def check_in_git_directory() -> bool:
    """Whether the current directory is inside a git repository."""
    code, _ = run_with_exit_code(GIT, ["rev-parse", "--git-dir"])
    return code == 0


def get_git_repo_state() -> GitRepoState:
    """Collect everything the prompt shows about the current repository."""
    branch = local_branch_name()
    state = GitRepoState(
        local_branch=branch,
        git_local_repo_changes=parse_status(porcelain_status()),
        remote=remote_name(branch),
        stash_count=stash_count(),
        commit_short_sha=commit_short_sha(),
        commit_tag=commit_tag(),
    )

    if state.remote:
        state.remote_tracking_branch = remote_branch_name(branch)
        base = merge_base(branch)
        full_remote_branch = build_fully_qualified_remote_branch_name(
            state.remote, state.remote_tracking_branch
        )

        state.commits_to_pull = rev_to_pull(full_remote_branch, "HEAD")
        state.commits_to_push = rev_to_push(full_remote_branch, "HEAD")

        if base:
            state.merge_branch_commits_to_pull = rev_to_pull(
                DEFAULT_MERGE_BRANCH, full_remote_branch
            )
            state.merge_branch_commits_to_push = rev_to_push(
                DEFAULT_MERGE_BRANCH, full_remote_branch
            )

    return state