"""Command line entry point that prints the git prompt."""

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version

from .colors import Shell
from .config import get_app_config
from .gitcli import check_in_git_directory, get_git_repo_state
from .prompt import Prompt


def _version() -> str:
    try:
        return version("gitradar")
    except PackageNotFoundError:
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-radar",
        description="Print a compact summary of the current git repository.",
    )
    parser.add_argument("--version", action="version", version=_version())
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="print the effective configuration as TOML and exit",
    )
    parser.add_argument(
        "shell",
        nargs="?",
        default=Shell.OTHER.value,
        choices=[shell.value for shell in Shell],
        help="shell or environment the prompt is rendered for",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        if args.show_config:
            print(get_app_config().to_toml())
            return 0

        if not check_in_git_directory():
            return 0

        config = get_app_config()
        repo_state = get_git_repo_state()
        sys.stdout.write(Prompt(Shell(args.shell), config, repo_state).render())
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())