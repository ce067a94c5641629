# gitradar

gitradar prints a short, coloured summary of the git repository you are
standing in, meant to be embedded in a shell or tmux prompt. It shows:

- a repository indicator,
- how far your branch's upstream is ahead of or behind `origin/master`
  (or that no upstream is tracked),
- the local branch name, or the tag or short commit hash when detached,
- commits to push to and pull from the upstream,
- counts of staged, unstaged, untracked and conflicted files,
- the number of stashes.

Outside a git repository it prints nothing. All information is gathered by
running the `git` command line tool, which must be on your `PATH`.

## Installation

```
pip install .
```

## Usage

```
gitradar [--show-config] [--version] [bash|zsh|tmux|none|other]
```

The positional argument selects how colour codes are wrapped:

- `bash` wraps escape codes in `\x01` / `\x02` so readline measures the prompt correctly,
- `zsh` wraps them in `%{` / `%}`,
- `tmux` emits `#[fg=...]` style codes,
- `none` emits no colour codes at all,
- `other` (the default) emits raw ANSI escape codes.

If git cannot be started or the configuration file is invalid, an error
message is written to standard error and the exit status is 1.

### Bash

```
PS1='$(gitradar bash) \$ '
```

### Zsh

```
setopt PROMPT_SUBST
PROMPT='$(gitradar zsh) %# '
```

### tmux

```
set -g status-right '#(cd #{pane_current_path}; gitradar tmux)'
```

## Configuration

Settings are read from `git-radar/config.toml` inside your user
configuration directory:

- Linux and other Unix systems: `$XDG_CONFIG_HOME/git-radar/config.toml`,
  or `~/.config/git-radar/config.toml` when that variable is unset,
- macOS: `~/Library/Application Support/git-radar/config.toml`,
- Windows: `%APPDATA%\git-radar\config.toml`.

If the file does not exist, the defaults are used. Any key left out keeps
its default. To print the complete effective configuration, as a starting
point for your own file:

```
gitradar --show-config
```

Each part of the prompt can be switched off in the `[parts]` table:

```toml
[parts]
show_repo_indicator = true
show_merge_branch_commits_diff = true
show_local_branch = true
show_commits_to_origin = true
show_local_changes_state = true
show_stashes = false
```

Tags carry a symbol and a colour. Colours are one of `black`, `red`,
`green`, `yellow`, `blue`, `magenta`, `cyan`, `white` or `nocolor`, with an
intensity of `vivid` or `dull`:

```toml
repo_indicator = "git"
merge_branch_ignore_branches = ["gh-pages", "docs"]

[stash_suffix]
tag = "S"
color = "yellow"
intensity = "dull"

[local_branch_color]
color = "cyan"
intensity = "vivid"
```

The ahead/behind comparison with `origin/master` is skipped on branches
listed in `merge_branch_ignore_branches`.

## Library use

The prompt can also be built from Python:

```python
from gitradar.colors import Shell
from gitradar.config import get_app_config
from gitradar.gitcli import check_in_git_directory, get_git_repo_state
from gitradar.prompt import Prompt

if check_in_git_directory():
    print(Prompt(Shell.NONE, get_app_config(), get_git_repo_state()).render())
```

Other useful pieces:

- `gitradar.config.load_config(path)` reads a specific TOML file into a
  `Config`; `Config.to_toml()` writes one back out.
- `gitradar.status.parse_status(data)` turns `git status --porcelain`
  output into a `GitLocalRepoChanges` with per-kind counts.
- `gitradar.output.tell_string_in_color(shell, color, text)` wraps text in
  the colour markers for a given `Shell`.

## Limitations

The comparison branch is always `origin/master`; a remote's default branch
is not detected.