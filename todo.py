#!/usr/bin/env python3
"""
todo - simple priority-ordered task list for the terminal

Tasks live in $TODO_FILE, or $HOME/todo.json when it is not set.

Usage:
    todo add -t "Buy #milk" [-p 1-5] [-d "description"]
    todo list [--all] [--done] [--started] [--verbose]
    todo start -t <id>
    todo complete -t <id>
    todo remove -t <id>
"""

import sys

from config import Config
from core.cli_interface import cli
from utils.logging_config import setup_logging


def main():
    """Entry point"""
    setup_logging(level=Config.get_log_level(), log_file=Config.get_log_file())
    try:
        cli()
    except KeyboardInterrupt:
        print("\n\nInterrupted")
        sys.exit(130)


if __name__ == '__main__':
    main()
