import subprocess
from unittest import mock

import pytest

from gitradar import gitcli
from gitradar.repo import GitRepoState
from gitradar.status import parse_status


def _fake_git(responses):
    calls = []

    def run(cmd, **kwargs):
        calls.append(list(cmd))
        code, out = responses.get(tuple(cmd[1:]), (1, b""))
        return subprocess.CompletedProcess(cmd, code, stdout=out)

    return run, calls


STATUS = b" M a.txt\n?? b.txt\nA  c.txt\n"

FULL_REPO = {
    ("symbolic-ref", "--short", "HEAD"): (0, b"feature\n"),
    ("status", "--porcelain"): (0, STATUS),
    ("config", "--get", "branch.feature.remote"): (0, b"origin\n"),
    ("stash", "list"): (0, b"stash@{0}: WIP\nstash@{1}: WIP\n"),
    ("rev-parse", "--short", "HEAD"): (0, b"abc1234\n"),
    ("describe", "--exact-match", "--tags"): (128, b"ignored"),
    ("config", "--get", "branch.feature.merge"): (0, b"refs/heads/feature\n"),
    ("merge-base", "origin/master", "feature"): (0, b"deadbeef\n"),
    ("rev-list", "--no-merges", "--left-only", "--count", "origin/feature...HEAD"): (0, b"1\n"),
    ("rev-list", "--no-merges", "--right-only", "--count", "origin/feature...HEAD"): (0, b"2\n"),
    ("rev-list", "--no-merges", "--left-only", "--count", "origin/master...origin/feature"): (0, b"3\n"),
    ("rev-list", "--no-merges", "--right-only", "--count", "origin/master...origin/feature"): (0, b"4\n"),
}


def test_local_branch_name_trims_and_runs_git():
    run, calls = _fake_git({("symbolic-ref", "--short", "HEAD"): (0, b"main\n")})
    with mock.patch("subprocess.run", side_effect=run):
        assert gitcli.local_branch_name() == "main"
    assert calls == [["git", "symbolic-ref", "--short", "HEAD"]]


def test_failed_command_yields_empty_string():
    run, _ = _fake_git({("symbolic-ref", "--short", "HEAD"): (128, b"junk\n")})
    with mock.patch("subprocess.run", side_effect=run):
        assert gitcli.local_branch_name() == ""


def test_remote_lookups_use_branch_config_keys():
    run, _ = _fake_git(
        {
            ("config", "--get", "branch.dev.remote"): (0, b"upstream\n"),
            ("config", "--get", "branch.dev.merge"): (0, b"refs/heads/dev\n"),
        }
    )
    with mock.patch("subprocess.run", side_effect=run):
        assert gitcli.remote_name("dev") == "upstream"
        assert gitcli.remote_branch_name("dev") == "refs/heads/dev"


def test_rev_counts_parse_numbers():
    run, _ = _fake_git(FULL_REPO)
    with mock.patch("subprocess.run", side_effect=run):
        assert gitcli.rev_to_pull("origin/feature", "HEAD") == 1
        assert gitcli.rev_to_push("origin/feature", "HEAD") == 2


def test_rev_count_without_output_raises():
    run, _ = _fake_git({})
    with mock.patch("subprocess.run", side_effect=run):
        with pytest.raises(ValueError):
            gitcli.rev_to_push("a", "b")


def test_stash_count_counts_lines():
    run, _ = _fake_git(FULL_REPO)
    with mock.patch("subprocess.run", side_effect=run):
        assert gitcli.stash_count() == 2


def test_porcelain_status_returns_raw_bytes():
    run, _ = _fake_git(FULL_REPO)
    with mock.patch("subprocess.run", side_effect=run):
        assert gitcli.porcelain_status() == STATUS


@pytest.mark.parametrize("code, expected", [(0, True), (128, False)])
def test_check_in_git_directory(code, expected):
    run, _ = _fake_git({("rev-parse", "--git-dir"): (code, b".git\n")})
    with mock.patch("subprocess.run", side_effect=run):
        assert gitcli.check_in_git_directory() is expected


def test_check_in_git_directory_without_git_raises():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("git")):
        with pytest.raises(FileNotFoundError):
            gitcli.check_in_git_directory()


def test_full_repo_state():
    run, _ = _fake_git(FULL_REPO)
    with mock.patch("subprocess.run", side_effect=run):
        state = gitcli.get_git_repo_state()
    assert state.local_branch == "feature"
    assert state.remote == "origin"
    assert state.remote_tracking_branch == "refs/heads/feature"
    assert state.commit_short_sha == "abc1234"
    assert state.commit_tag == ""
    assert state.stash_count == 2
    assert state.git_local_repo_changes == parse_status(STATUS)
    assert (state.commits_to_pull, state.commits_to_push) == (1, 2)
    assert (state.merge_branch_commits_to_pull, state.merge_branch_commits_to_push) == (3, 4)


def test_no_merge_base_skips_merge_branch_counts():
    responses = dict(FULL_REPO)
    responses[("merge-base", "origin/master", "feature")] = (1, b"")
    run, _ = _fake_git(responses)
    with mock.patch("subprocess.run", side_effect=run):
        state = gitcli.get_git_repo_state()
    assert state.commits_to_pull == 1
    assert state.merge_branch_commits_to_pull == 0
    assert state.merge_branch_commits_to_push == 0


def test_no_remote_leaves_counts_at_defaults():
    responses = {
        ("symbolic-ref", "--short", "HEAD"): (0, b"main\n"),
        ("rev-parse", "--short", "HEAD"): (0, b"abc1234\n"),
        ("describe", "--exact-match", "--tags"): (0, b"v1.0\n"),
    }
    run, calls = _fake_git(responses)
    with mock.patch("subprocess.run", side_effect=run):
        state = gitcli.get_git_repo_state()
    assert state == GitRepoState(
        local_branch="main", commit_short_sha="abc1234", commit_tag="v1.0"
    )
    assert not any(call[1] == "rev-list" for call in calls)