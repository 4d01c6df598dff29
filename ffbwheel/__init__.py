"""Force-feedback wheel building blocks: HID PID report layouts, MF4015 motor driver, force effects and input filtering."""

__version__ = "0.1.0"