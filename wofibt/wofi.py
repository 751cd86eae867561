"""Showing a menu with wofi and reading back the chosen entry."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

WOFI_COMMAND = "wofi -d -i --no-sort -p"

ACTION_DISABLE_BLUETOOTH = "  Disable Bluetooth"
ACTION_ENABLE_BLUETOOTH = "󰂲  Enable Bluetooth"
ACTION_ENABLE_DISCOVERABLE = "  Enable discoverable"
ACTION_DISABLE_DISCOVERABLE = "  Disable discoverable"
ACTION_ENABLE_PAIRABLE = "󰌺  Enable pairable"
ACTION_DISABLE_PAIRABLE = "  Disable pairable"
ACTION_SCAN = "󱉶  Scan"
ACTION_GO_BACK = "Back"

DEVICE_ACTION_PAIR = "󰌺  Pair"
DEVICE_ACTION_UNPAIR = "  Unpair"
DEVICE_ACTION_TRUST = "󱚩  Trust"
DEVICE_ACTION_UNTRUST = "󱎚  Untrust"
DEVICE_ACTION_CONNECT = "󰂲  Connect"
DEVICE_ACTION_DISCONNECT = "󰂱  Disconnect"


def build_command(options: Sequence[str], prompt: str) -> str:
    """Return the shell pipeline that feeds the options to wofi."""
    joined = "\n".join(options)
    escaped = joined.replace("'", "'\\''")
    return f"echo -e '{escaped}' | {WOFI_COMMAND} \"{prompt}\" -L {len(options) + 1}"


def prompt_menu(options: Sequence[str], prompt: str) -> str:
    """Show the options in wofi and return the chosen one, or "" if none."""
    try:
        result = subprocess.run(
            ["bash", "-c", build_command(options, prompt)],
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
    except OSError:
        return ""
    if result.returncode != 0:
        return ""
    return (result.stdout or "").strip()