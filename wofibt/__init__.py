"""A wofi menu for managing Bluetooth devices through bluetoothctl."""

__version__ = "0.1.0"