"""Compact git repository status for shell and tmux prompts."""

__version__ = "0.1.2"