"""The wofi menus for the controller and for single devices."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from contextlib import suppress

from wofibt.controller import Controller
from wofibt.shell import CommandError
from wofibt.wofi import (
    ACTION_DISABLE_BLUETOOTH,
    ACTION_DISABLE_DISCOVERABLE,
    ACTION_DISABLE_PAIRABLE,
    ACTION_ENABLE_BLUETOOTH,
    ACTION_ENABLE_DISCOVERABLE,
    ACTION_ENABLE_PAIRABLE,
    ACTION_GO_BACK,
    ACTION_SCAN,
    DEVICE_ACTION_CONNECT,
    DEVICE_ACTION_DISCONNECT,
    DEVICE_ACTION_PAIR,
    DEVICE_ACTION_TRUST,
    DEVICE_ACTION_UNPAIR,
    DEVICE_ACTION_UNTRUST,
    prompt_menu,
)

MAIN_MENU_TITLE = "Bluetooth"
SCAN_DURATION_SECONDS = 10
SCAN_START_DELAY = 0.5

Prompt = Callable[[Sequence[str], str], str]


class UI:
    """Shows menus and carries out the chosen actions."""

    def __init__(self, controller: Controller, prompt: Prompt = prompt_menu) -> None:
        self.controller = controller
        self._prompt = prompt

    def show_main_menu(self) -> None:
        """Show the main menu until the user closes it."""
        controller = self.controller
        simple_actions = {
            ACTION_DISABLE_BLUETOOTH: lambda: controller.set_power(False),
            ACTION_ENABLE_BLUETOOTH: lambda: controller.set_power(True),
            ACTION_DISABLE_DISCOVERABLE: lambda: controller.set_discoverable(False),
            ACTION_ENABLE_DISCOVERABLE: lambda: controller.set_discoverable(True),
            # The pairable labels map to these states as the menu has always done.
            ACTION_ENABLE_PAIRABLE: lambda: controller.set_pairable(False),
            ACTION_DISABLE_PAIRABLE: lambda: controller.set_pairable(True),
        }
        while True:
            action = self._prompt(self.main_menu_options(), MAIN_MENU_TITLE)
            if not action:
                return
            if action in simple_actions:
                with suppress(CommandError):
                    simple_actions[action]()
                continue
            if action == ACTION_SCAN:
                with suppress(CommandError):
                    controller.set_scanning(SCAN_DURATION_SECONDS)
                time.sleep(SCAN_START_DELAY)
                continue
            device = self._find_device(action)
            if device is None or not self._device_loop(device):
                return

    def main_menu_options(self) -> list[str]:
        """Return the entries of the main menu for the current state."""
        controller = self.controller
        if not controller.is_powered():
            return [ACTION_ENABLE_BLUETOOTH]
        try:
            devices = controller.get_devices()
        except CommandError as exc:
            print("Error getting all devices:", exc)
            devices = []
        pairable = ACTION_DISABLE_PAIRABLE if controller.is_pairable() else ACTION_ENABLE_PAIRABLE
        discoverable = (
            ACTION_DISABLE_DISCOVERABLE
            if controller.is_discoverable()
            else ACTION_ENABLE_DISCOVERABLE
        )
        return [device.name for device in devices] + [
            ACTION_SCAN,
            ACTION_DISABLE_BLUETOOTH,
            pairable,
            discoverable,
        ]

    def show_device_menu(self, device) -> None:
        """Show the menu for one device; "Back" returns to the main menu."""
        if self._device_loop(device):
            self.show_main_menu()

    def device_menu_options(self, device) -> list[str]:
        """Return the entries of a device's menu for its current state."""
        connection = DEVICE_ACTION_DISCONNECT if device.is_connected() else DEVICE_ACTION_CONNECT
        pairing = DEVICE_ACTION_UNPAIR if device.is_paired() else DEVICE_ACTION_PAIR
        trust = DEVICE_ACTION_UNTRUST if device.is_trusted() else DEVICE_ACTION_TRUST
        return [connection, pairing, trust, ACTION_GO_BACK]

    def _find_device(self, name: str):
        try:
            devices = self.controller.get_devices()
        except CommandError:
            return None
        return next((device for device in devices if device.name == name), None)

    def _device_loop(self, device) -> bool:
        """Run a device's menu; True means the user asked to go back."""
        actions = {
            DEVICE_ACTION_CONNECT: device.connect,
            DEVICE_ACTION_DISCONNECT: device.disconnect,
            DEVICE_ACTION_PAIR: device.pair,
            DEVICE_ACTION_UNPAIR: device.unpair,
            DEVICE_ACTION_TRUST: lambda: device.set_trust(True),
            DEVICE_ACTION_UNTRUST: lambda: device.set_trust(False),
        }
        while True:
            action = self._prompt(self.device_menu_options(device), device.name)
            if action == ACTION_GO_BACK:
                return True
            handler = actions.get(action)
            if handler is None:
                return False
            with suppress(CommandError):
                handler()