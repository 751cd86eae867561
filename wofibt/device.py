"""Bluetooth devices as listed by bluetoothctl, and the actions on them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from wofibt.shell import CommandError, run_command


class DeviceStatus(IntEnum):
    CONNECTED = 0
    PAIRED = 1
    DISCOVERED = 2


class DeviceType(IntEnum):
    PHONE = 3
    HEADPHONES = 4
    LAPTOP = 5
    TV = 6
    CONTROLLER = 7


GLYPH_CONNECTED = "󰂱"
GLYPH_LAPTOP = ""
GLYPH_PHONE = ""
GLYPH_CONTROLLER = "󰊴"
GLYPH_HEADPHONES = "󰋋"
GLYPH_TV = "󰍹"
GLYPH_GENERIC = "󰾰"

_GLYPHS = {
    DeviceType.LAPTOP: GLYPH_LAPTOP,
    DeviceType.PHONE: GLYPH_PHONE,
    DeviceType.CONTROLLER: GLYPH_CONTROLLER,
    DeviceType.HEADPHONES: GLYPH_HEADPHONES,
    DeviceType.TV: GLYPH_TV,
}


def device_glyph(device_type) -> str:
    """Return the icon for a device type, or the generic icon if unknown."""
    return _GLYPHS.get(device_type, GLYPH_GENERIC)


def display_name(name: str, status: DeviceStatus, device_type) -> str:
    """Return the menu label for a device: its icon, two spaces, its name."""
    glyph = GLYPH_CONNECTED if status == DeviceStatus.CONNECTED else device_glyph(device_type)
    return f"{glyph}  {name}"


def _info(mac: str, what: str) -> str | None:
    try:
        return run_command("bluetoothctl", "info", mac)
    except CommandError as exc:
        print(f"Error checking device {what}:", exc)
        return None


@dataclass(frozen=True)
class Device:
    """A Bluetooth device known to the controller."""

    name: str
    mac: str
    line: str
    status: DeviceStatus
    type: DeviceType

    @classmethod
    def create(cls, name, mac, raw_line, status, device_type) -> "Device":
        """Build a device whose name carries the icon for its status and type."""
        # The stored type is always PHONE; only the label reflects device_type.
        return cls(
            display_name(name, status, device_type),
            mac,
            raw_line,
            status,
            DeviceType.PHONE,
        )

    def equals(self, other: "Device") -> bool:
        """Two devices are the same device when their addresses match."""
        return self.mac == other.mac

    def is_connected(self) -> bool:
        output = _info(self.mac, "connection")
        return output is not None and "Connected: yes" in output

    def connect(self) -> None:
        run_command("bluetoothctl", "connect", self.mac)

    def disconnect(self) -> None:
        run_command("bluetoothctl", "disconnect", self.mac)

    def is_paired(self) -> bool:
        output = _info(self.mac, "pairing")
        return output is not None and "Paired: yes" in output

    def pair(self) -> None:
        run_command("bluetoothctl", "pair", self.mac)

    def unpair(self) -> None:
        run_command("bluetoothctl", "remove", self.mac)

    def is_trusted(self) -> bool:
        output = _info(self.mac, "trust")
        return output is not None and "Trusted: yes" in output

    def set_trust(self, trusted: bool) -> None:
        run_command("bluetoothctl", "trust" if trusted else "untrust", self.mac)