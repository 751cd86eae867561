[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wofibt"
version = "0.1.0"
description = "A wofi menu for managing Bluetooth devices through bluetoothctl"
requires-python = ">=3.10"
dependencies = []
keywords = ["bluetooth", "wofi", "wayland", "bluetoothctl", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers :: Applets",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wofibt = "wofibt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wofibt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
