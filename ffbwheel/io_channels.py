"""Pedal and shift-button channels with their conversion functions."""

from typing import Callable

from .adinput import ADInputChannel
from .config import BRAKE_INVERT, Adc, Input
from .digital_input import DigitalInputChannel


def constrain(value: int, low: int, high: int) -> int:
    """Clamp value into [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def arduino_map(value: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Linearly re-map an integer range, truncating toward zero."""
    numerator = (value - in_min) * (out_max - out_min)
    denominator = in_max - in_min
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient + out_min


def transform_accel(value: int) -> int:
    """Convert averaged accelerator ADC counts to the HID range."""
    value = constrain(value, Adc.ACCEL_MIN, Adc.ACCEL_MAX)
    return arduino_map(value, Adc.ACCEL_MIN, Adc.ACCEL_MAX, Adc.ACCEL_HID_MIN, Adc.ACCEL_HID_MAX)


def transform_brake(value: int, invert: bool = BRAKE_INVERT) -> int:
    """Convert averaged brake ADC counts to the HID range, optionally inverted."""
    value = constrain(value, Adc.BRAKE_MIN, Adc.BRAKE_MAX)
    if invert:
        return arduino_map(value, Adc.BRAKE_MIN, Adc.BRAKE_MAX, Adc.BRAKE_HID_MAX, Adc.BRAKE_HID_MIN)
    return arduino_map(value, Adc.BRAKE_MIN, Adc.BRAKE_MAX, Adc.BRAKE_HID_MIN, Adc.BRAKE_HID_MAX)


def make_accel_channel(read: Callable[[], int]) -> ADInputChannel:
    """Accelerator channel averaging over the configured sample count."""
    return ADInputChannel(read, Adc.AVERAGE_COUNT, transform_accel)


def make_brake_channel(read: Callable[[], int]) -> ADInputChannel:
    """Brake channel averaging over the configured sample count."""
    return ADInputChannel(read, Adc.AVERAGE_COUNT, transform_brake)


def make_shift_channel(read: Callable[[], int]) -> DigitalInputChannel:
    """Debounced shift-button channel."""
    return DigitalInputChannel(read, Input.BUTTON_DEBOUNCE_THRESHOLD)