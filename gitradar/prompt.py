"""Assembling the prompt string from configuration and repository state."""

from .colors import ColoredTag, Shell
from .config import Config
from .output import TerminalOutput
from .repo import GitRepoState


def _add_state_elem(output: TerminalOutput, count: int, colored_tag: ColoredTag) -> None:
    if count > 0:
        output.write(count)
        output.colored_tag(colored_tag)


class Prompt:
    """A renderable prompt for one shell, configuration and repository state."""

    def __init__(self, shell: Shell, config: Config, repo_state: GitRepoState) -> None:
        self.shell = shell
        self.config = config
        self.repo_state = repo_state

    def _add_repo_indicator(self, output: TerminalOutput) -> None:
        output.write(self.config.repo_indicator)
        output.add_delimiter()

    def _add_no_tracked_upstream_indicator(self, output: TerminalOutput) -> None:
        if not self.repo_state.remote_tracking_branch:
            output.colored_tag(self.config.no_tracked_upstream_string)
            output.add_delimiter()
            output.colored_tag(self.config.no_tracked_upstream_indicator)
            output.add_delimiter()

    def _add_merge_branch_commits(self, output: TerminalOutput) -> None:
        config = self.config
        push = self.repo_state.merge_branch_commits_to_push
        pull = self.repo_state.merge_branch_commits_to_pull

        if push > 0 and pull > 0:
            output.write(config.merge_branch_commits_indicator)
            output.add_delimiter()
            output.write(pull)
            output.colored_tag(config.merge_branch_commits_both_pull_push)
            output.add_delimiter()
            output.write(push)
            output.add_delimiter()
        elif pull > 0:
            output.write(config.merge_branch_commits_indicator)
            output.add_delimiter()
            output.colored_tag(config.merge_branch_commits_only_pull)
            output.add_delimiter()
            output.write(pull)
            output.add_delimiter()
        elif push > 0:
            output.write(config.merge_branch_commits_indicator)
            output.add_delimiter()
            output.colored_tag(config.merge_branch_commits_only_push)
            output.add_delimiter()
            output.write(push)
            output.add_delimiter()

    def _add_local_branch_name(self, output: TerminalOutput) -> None:
        config = self.config
        state = self.repo_state
        output.write(config.local_branch_name_prefix)

        if state.local_branch:
            output.string_in_color(config.local_branch_color, state.local_branch)
        else:
            detached_at = state.commit_tag or state.commit_short_sha
            output.string_in_color(
                config.local_detached_color,
                f"{config.local_detached_prefix}{detached_at}",
            )

        output.write(config.local_branch_name_suffix)
        output.add_delimiter()

    def _add_local_commits(self, output: TerminalOutput) -> None:
        config = self.config
        push = self.repo_state.commits_to_push
        pull = self.repo_state.commits_to_pull

        if push > 0 and pull > 0:
            output.write(pull)
            output.colored_tag(config.local_commits_push_pull_infix)
            output.write(push)
            output.add_delimiter()
        elif pull > 0:
            output.write(pull)
            output.colored_tag(config.local_commits_pull_suffix)
            output.add_delimiter()
        elif push > 0:
            output.write(push)
            output.colored_tag(config.local_commits_push_suffix)
            output.add_delimiter()

    def _add_repo_state(self, output: TerminalOutput) -> None:
        config = self.config
        changes = self.repo_state.git_local_repo_changes

        _add_state_elem(output, changes.index_add, config.change_index_add_suffix)
        _add_state_elem(output, changes.index_del, config.change_index_del_suffix)
        _add_state_elem(output, changes.index_mod, config.change_index_mod_suffix)
        _add_state_elem(output, changes.renamed, config.change_renamed_suffix)
        output.add_delimiter()

        _add_state_elem(output, changes.local_del, config.change_local_del_suffix)
        _add_state_elem(output, changes.local_mod, config.change_local_mod_suffix)
        output.add_delimiter()

        _add_state_elem(output, changes.local_add, config.change_local_add_suffix)
        output.add_delimiter()

        _add_state_elem(output, changes.conflict, config.change_conflicted_suffix)
        output.add_delimiter()

    def _add_stashes(self, output: TerminalOutput) -> None:
        _add_state_elem(output, self.repo_state.stash_count, self.config.stash_suffix)

    def _show_merge_branch_indicator(self) -> bool:
        return (
            self.config.parts.show_merge_branch_commits_diff
            and self.repo_state.local_branch
            not in self.config.merge_branch_ignore_branches
        )

    def render(self) -> str:
        """Build the full prompt text."""
        output = TerminalOutput(self.shell)
        parts = self.config.parts

        output.end_color_marker()
        if parts.show_repo_indicator:
            self._add_repo_indicator(output)
        if self._show_merge_branch_indicator():
            self._add_no_tracked_upstream_indicator(output)
            self._add_merge_branch_commits(output)
        if parts.show_local_branch:
            self._add_local_branch_name(output)
        if parts.show_commits_to_origin:
            self._add_local_commits(output)
        if parts.show_local_changes_state:
            self._add_repo_state(output)
        if parts.show_stashes:
            self._add_stashes(output)

        return output.getvalue()

    def __str__(self) -> str:
        return self.render()