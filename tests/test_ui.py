from unittest import mock

import pytest

from wofibt.shell import CommandError
from wofibt.ui import UI
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
)


def _error():
    return CommandError(("bluetoothctl",), "exit status 1")


class FakeDevice:
    def __init__(self, name, connected=False, paired=False, trusted=False, fail=False):
        self.name = name
        self.mac = "00:00:00:00:00:01"
        self.connected = connected
        self.paired = paired
        self.trusted = trusted
        self.fail = fail
        self.calls = []

    def is_connected(self):
        return self.connected

    def is_paired(self):
        return self.paired

    def is_trusted(self):
        return self.trusted

    def _record(self, call):
        self.calls.append(call)
        if self.fail:
            raise _error()

    def connect(self):
        self._record("connect")

    def disconnect(self):
        self._record("disconnect")

    def pair(self):
        self._record("pair")

    def unpair(self):
        self._record("unpair")

    def set_trust(self, trusted):
        self._record(("trust", trusted))


class FakeController:
    def __init__(self, powered=True, pairable=False, discoverable=False, devices=(), fail_devices=False):
        self.powered = powered
        self.pairable = pairable
        self.discoverable = discoverable
        self.devices = list(devices)
        self.fail_devices = fail_devices
        self.calls = []

    def is_powered(self):
        return self.powered

    def is_pairable(self):
        return self.pairable

    def is_discoverable(self):
        return self.discoverable

    def get_devices(self):
        if self.fail_devices:
            raise _error()
        return self.devices

    def set_power(self, on):
        self.calls.append(("power", on))

    def set_pairable(self, on):
        self.calls.append(("pairable", on))

    def set_discoverable(self, on):
        self.calls.append(("discoverable", on))

    def set_scanning(self, seconds):
        self.calls.append(("scan", seconds))


class ScriptedPrompt:
    def __init__(self, *answers):
        self.answers = list(answers)
        self.shown = []

    def __call__(self, options, prompt):
        self.shown.append((list(options), prompt))
        return self.answers.pop(0) if self.answers else ""


def test_main_menu_options_when_powered_off():
    ui = UI(FakeController(powered=False), ScriptedPrompt())
    assert ui.main_menu_options() == [ACTION_ENABLE_BLUETOOTH]


def test_main_menu_options_when_powered_on():
    devices = [FakeDevice("dev one"), FakeDevice("dev two")]
    ui = UI(FakeController(devices=devices), ScriptedPrompt())
    assert ui.main_menu_options() == [
        "dev one",
        "dev two",
        ACTION_SCAN,
        ACTION_DISABLE_BLUETOOTH,
        ACTION_ENABLE_PAIRABLE,
        ACTION_ENABLE_DISCOVERABLE,
    ]


def test_main_menu_options_reflect_pairable_and_discoverable():
    ui = UI(FakeController(pairable=True, discoverable=True), ScriptedPrompt())
    assert ui.main_menu_options()[-2:] == [ACTION_DISABLE_PAIRABLE, ACTION_DISABLE_DISCOVERABLE]


def test_main_menu_options_survive_device_error(capsys):
    ui = UI(FakeController(fail_devices=True), ScriptedPrompt())
    assert ui.main_menu_options()[0] == ACTION_SCAN
    assert "Error getting all devices:" in capsys.readouterr().out


def test_main_menu_closed_returns():
    prompt = ScriptedPrompt("")
    ui = UI(FakeController(), prompt)
    ui.show_main_menu()
    assert len(prompt.shown) == 1
    assert prompt.shown[0][1] == "Bluetooth"


@pytest.mark.parametrize(
    "action, call",
    [
        (ACTION_ENABLE_BLUETOOTH, ("power", True)),
        (ACTION_DISABLE_BLUETOOTH, ("power", False)),
        (ACTION_ENABLE_DISCOVERABLE, ("discoverable", True)),
        (ACTION_DISABLE_DISCOVERABLE, ("discoverable", False)),
        (ACTION_ENABLE_PAIRABLE, ("pairable", False)),
        (ACTION_DISABLE_PAIRABLE, ("pairable", True)),
    ],
)
def test_main_menu_actions_then_show_again(action, call):
    controller = FakeController()
    prompt = ScriptedPrompt(action, "")
    UI(controller, prompt).show_main_menu()
    assert controller.calls == [call]
    assert len(prompt.shown) == 2


def test_main_menu_scan_waits_and_reshows():
    controller = FakeController()
    prompt = ScriptedPrompt(ACTION_SCAN, "")
    with mock.patch("time.sleep") as sleep:
        UI(controller, prompt).show_main_menu()
    assert controller.calls == [("scan", 10)]
    sleep.assert_called_once_with(0.5)
    assert len(prompt.shown) == 2


def test_main_menu_unknown_choice_returns():
    prompt = ScriptedPrompt("nothing like this", ACTION_SCAN)
    controller = FakeController()
    UI(controller, prompt).show_main_menu()
    assert len(prompt.shown) == 1
    assert controller.calls == []


def test_choosing_device_opens_its_menu_and_back_returns():
    device = FakeDevice("my device")
    prompt = ScriptedPrompt("my device", ACTION_GO_BACK, "")
    UI(FakeController(devices=[device]), prompt).show_main_menu()
    titles = [title for _, title in prompt.shown]
    assert titles == ["Bluetooth", "my device", "Bluetooth"]


def test_device_menu_options_for_fresh_device():
    ui = UI(FakeController(), ScriptedPrompt())
    assert ui.device_menu_options(FakeDevice("d")) == [
        DEVICE_ACTION_CONNECT,
        DEVICE_ACTION_PAIR,
        DEVICE_ACTION_TRUST,
        ACTION_GO_BACK,
    ]


def test_device_menu_options_for_known_device():
    ui = UI(FakeController(), ScriptedPrompt())
    device = FakeDevice("d", connected=True, paired=True, trusted=True)
    assert ui.device_menu_options(device) == [
        DEVICE_ACTION_DISCONNECT,
        DEVICE_ACTION_UNPAIR,
        DEVICE_ACTION_UNTRUST,
        ACTION_GO_BACK,
    ]


def test_device_menu_runs_actions_and_reshows():
    device = FakeDevice("d")
    prompt = ScriptedPrompt(
        DEVICE_ACTION_CONNECT,
        DEVICE_ACTION_DISCONNECT,
        DEVICE_ACTION_PAIR,
        DEVICE_ACTION_UNPAIR,
        DEVICE_ACTION_TRUST,
        DEVICE_ACTION_UNTRUST,
        "",
    )
    UI(FakeController(), prompt).show_device_menu(device)
    assert device.calls == [
        "connect",
        "disconnect",
        "pair",
        "unpair",
        ("trust", True),
        ("trust", False),
    ]
    assert all(title == "d" for _, title in prompt.shown)


def test_device_menu_ignores_command_errors():
    device = FakeDevice("d", fail=True)
    prompt = ScriptedPrompt(DEVICE_ACTION_CONNECT, "")
    UI(FakeController(), prompt).show_device_menu(device)
    assert device.calls == ["connect"]
    assert len(prompt.shown) == 2


def test_device_menu_back_shows_main_menu():
    prompt = ScriptedPrompt(ACTION_GO_BACK, "")
    UI(FakeController(powered=False), prompt).show_device_menu(FakeDevice("d"))
    assert prompt.shown[1] == ([ACTION_ENABLE_BLUETOOTH], "Bluetooth")