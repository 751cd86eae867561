# wofibt

A small Bluetooth menu for Wayland desktops. It opens a `wofi` dmenu that
lists your known Bluetooth devices and the controller's actions. It runs
`bluetoothctl` to carry out whatever you choose.

## Requirements

These programs must be on your `PATH`:

- `wofi`
- `bluetoothctl` (from BlueZ)
- `rfkill`, `pkill` and `bash`

Install a Nerd Font so that the menu glyphs render.

## Installation

```
pip install .
```

## Usage

```
wofibt
```

The same entry point is also available as `python -m wofibt.cli`. It takes
no options apart from `--help`. Bind it to a key in your compositor, for
example in Sway or Hyprland.

### Main menu

When the controller is powered off, the menu has a single entry, **Enable
Bluetooth**. If `rfkill` reports Bluetooth as blocked, this entry unblocks it
and waits three seconds before powering the controller on.

When the controller is on, the menu lists:

- Every device that `bluetoothctl devices` reports. Connected devices come
  first and carry the "connected" glyph. The other devices follow.
- **Scan**, which stops any running scan and then starts a background scan of
  about five seconds. The menu returns at once.
- **Disable Bluetooth**.
- **Enable pairable** or **Disable pairable**, whichever matches the current
  state.
- **Enable discoverable** or **Disable discoverable**, whichever matches the
  current state.

After each controller action, the main menu is shown again. Choosing a device
opens that device's menu.

### Device menu

- **Connect** or **Disconnect**
- **Pair** or **Unpair** (unpairing runs `bluetoothctl remove`)
- **Trust** or **Untrust**
- **Back**, which returns to the main menu

Each entry reflects the device's current state. The menu is shown again after
every action.

### Closing the menu

The program ends when you close a menu without choosing anything, for example
with Escape.

## Known limitations

- **Pairable entries are inverted.** Choosing "Enable pairable" runs
  `bluetoothctl pairable off`, and choosing "Disable pairable" runs
  `bluetoothctl pairable on`.
- **No device-type detection.** Devices that are not connected all get the
  same glyph.
- **No error messages from actions.** When an action's command fails, the menu
  simply reappears.

## Using it from Python

```python
from wofibt.controller import Controller
from wofibt.shell import CommandError
from wofibt.ui import UI

controller = Controller()
try:
    for device in controller.get_devices():
        print(device.name, device.mac, device.status.name)
except CommandError as exc:
    print("bluetoothctl failed:", exc)

UI(controller).show_main_menu()
```

The Python API is spread over these modules:

- `wofibt.controller`
  - `Controller` queries and changes the controller's state with
    `is_powered`, `set_power`, `is_pairable`, `set_pairable`,
    `is_discoverable`, `set_discoverable`, `set_scanning` and `get_devices`.
  - `parse_devices(output, status)` turns `Device <mac> <name>` lines into
    `Device` objects.
- `wofibt.device`
  - `Device` offers `connect`, `disconnect`, `pair`, `unpair`, `set_trust`,
    `is_connected`, `is_paired` and `is_trusted`.
  - `DeviceStatus` and `DeviceType` are enums.
  - `device_glyph` and `display_name` build the menu labels.
- `wofibt.wofi`
  - `prompt_menu(options, prompt)` shows a wofi menu and returns the chosen
    entry, or `""` if nothing was chosen.
  - `build_command(options, prompt)` returns the shell pipeline that it runs.
- `wofibt.ui`
  - `UI(controller, prompt=prompt_menu)` drives the menus. You can pass a
    different `prompt` callable.
- `wofibt.shell`
  - `run_command(*args)` runs a command and returns its output. It raises
    `CommandError` if the command cannot start or exits non-zero.

## Running the tests

```
pip install ".[test]"
pytest
```