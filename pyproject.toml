[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ffbwheel"
version = "0.1.0"
description = "Building blocks for a force-feedback steering wheel: HID PID report layouts, MF4015 motor driver over CAN, force effects and pedal/button input filtering"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "force-feedback",
    "ffb",
    "hid",
    "pid",
    "joystick",
    "steering-wheel",
    "can",
    "mf4015",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware :: Universal Serial Bus (USB) :: Human Interface Device (HID)",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ffbwheel"]

[tool.pytest.ini_options]
addopts = "-ra"
