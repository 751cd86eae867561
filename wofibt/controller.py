"""The local Bluetooth controller, driven through bluetoothctl and rfkill."""

from __future__ import annotations

import subprocess
import time

from wofibt.device import Device, DeviceStatus, DeviceType
from wofibt.shell import CommandError, run_command

STATE_ON = "on"
STATE_OFF = "off"

_SCAN_SCRIPT = """
\t\t\techo -e 'power on\\nscan on\\n' | bluetoothctl
\t\t\tsleep 5
\t\t\techo -e 'scan off\\ndevices\\nquit' | bluetoothctl
\t\t"""


def _state(on: bool) -> str:
    return STATE_ON if on else STATE_OFF


def parse_devices(output: str, status: DeviceStatus) -> list[Device]:
    """Parse the "Device <mac> <name>" lines of bluetoothctl output."""
    devices = []
    for line in output.splitlines():
        if not line.startswith("Device "):
            continue
        parts = line.split(" ", 2)
        if len(parts) >= 3:
            devices.append(Device.create(parts[2], parts[1], line, status, DeviceType.LAPTOP))
    return devices


class Controller:
    """Queries and changes the state of the Bluetooth controller."""

    def _show_contains(self, text: str, what: str) -> bool:
        try:
            output = run_command("bluetoothctl", "show")
        except CommandError as exc:
            print(f"Error checking {what} state:", exc)
            return False
        return text in output

    def is_powered(self) -> bool:
        return self._show_contains("Powered: yes", "power")

    def set_power(self, on: bool) -> None:
        """Power the controller on or off, unblocking it first if needed."""
        if on:
            try:
                output = run_command("rfkill", "list", "bluetooth")
            except CommandError as exc:
                output = exc.output
            if "blocked: yes" in output:
                try:
                    run_command("rfkill", "unblock", "bluetooth")
                except CommandError:
                    pass
                time.sleep(3)
        run_command("bluetoothctl", "power", _state(on))

    def set_scanning(self, duration_seconds: int) -> None:
        """Start a short scan in the background and return at once."""
        try:
            run_command("pkill", "-f", "bluetoothctl scan on")
        except CommandError:
            pass
        run_command("bluetoothctl", "scan", "off")
        command = ("bash", "-c", _SCAN_SCRIPT)
        try:
            subprocess.Popen(list(command))
        except OSError as exc:
            raise CommandError(command, str(exc)) from exc

    def is_pairable(self) -> bool:
        return self._show_contains("Pairable: yes", "pairable")

    def set_pairable(self, on: bool) -> None:
        run_command("bluetoothctl", "pairable", _state(on))

    def is_discoverable(self) -> bool:
        return self._show_contains("Discoverable: yes", "discoverable")

    def set_discoverable(self, on: bool) -> None:
        run_command("bluetoothctl", "discoverable", _state(on))

    def get_devices(self) -> list[Device]:
        """Return connected devices first, then the other known devices."""
        connected_output = run_command("bluetoothctl", "devices", "Connected")
        all_output = run_command("bluetoothctl", "devices")
        devices = parse_devices(connected_output, DeviceStatus.CONNECTED)
        for device in parse_devices(all_output, DeviceStatus.PAIRED):
            if not any(device.equals(other) for other in devices):
                devices.append(device)
        return devices