"""Command-line entry point: opens the Bluetooth menu."""

from __future__ import annotations

import argparse

from wofibt.controller import Controller
from wofibt.ui import UI


def main(argv=None) -> int:
    """Show the Bluetooth menu and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="wofi-bluetooth",
        description="Manage Bluetooth from a wofi menu.",
    )
    parser.parse_args(argv)
    UI(Controller()).show_main_menu()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())