"""Report identifiers, effect enumerations and binary report layouts for the FFB joystick."""

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Tuple

HID_FFB_REPORT_SIZE = 64
MAX_EFFECTS = 10


class OutputReportId(IntEnum):
    """Host-to-device output report IDs."""

    SET_EFFECT = 0x01
    SET_ENVELOPE = 0x02
    SET_CONDITION = 0x03
    SET_PERIODIC = 0x04
    SET_CONSTANT_FORCE = 0x05
    SET_RAMP_FORCE = 0x06
    CUSTOM_FORCE_DATA = 0x07
    DOWNLOAD_FORCE_SAMPLE = 0x08
    EFFECT_OPERATION = 0x0A
    PID_BLOCK_FREE = 0x0B
    DEVICE_CONTROL = 0x0C
    DEVICE_GAIN = 0x0D
    SET_CUSTOM_FORCE = 0x0E


class InputReportId(IntEnum):
    """Device-to-host input report IDs."""

    GAMEPAD_INPUT = 0x01
    PID_STATE = 0x02


class FeatureReportId(IntEnum):
    """Feature report IDs used during effect creation."""

    CREATE_NEW_EFFECT = 0x05
    PID_BLOCK_LOAD = 0x06
    PID_POOL = 0x07


class EffectType(IntEnum):
    """Effect type as enumerated in the report descriptor (1-based)."""

    CONSTANT = 0x01
    RAMP = 0x02
    SQUARE = 0x03
    SINE = 0x04
    TRIANGLE = 0x05
    SAW_UP = 0x06
    SAW_DOWN = 0x07
    SPRING = 0x08
    DAMPER = 0x09
    INERTIA = 0x0A
    FRICTION = 0x0B
    CUSTOM = 0x0C

    @property
    def usage(self) -> int:
        """The Physical Interface page usage for this effect type."""
        return _EFFECT_USAGES[self]


_EFFECT_USAGES = {
    EffectType.CONSTANT: 0x26,
    EffectType.RAMP: 0x27,
    EffectType.SQUARE: 0x30,
    EffectType.SINE: 0x31,
    EffectType.TRIANGLE: 0x32,
    EffectType.SAW_UP: 0x33,
    EffectType.SAW_DOWN: 0x34,
    EffectType.SPRING: 0x40,
    EffectType.DAMPER: 0x41,
    EffectType.INERTIA: 0x42,
    EffectType.FRICTION: 0x43,
    EffectType.CUSTOM: 0x28,
}


class EffectOperation(IntEnum):
    """Effect operation codes."""

    START = 0x01
    SOLO = 0x02
    STOP = 0x03


class DeviceControl(IntEnum):
    """PID device control commands."""

    ENABLE_ACTUATORS = 0x01
    DISABLE_ACTUATORS = 0x02
    STOP_ALL_EFFECTS = 0x03
    DEVICE_RESET = 0x04
    DEVICE_PAUSE = 0x05
    DEVICE_CONTINUE = 0x06


class BlockLoadStatus(IntEnum):
    """Result of a PID block load."""

    SUCCESS = 0x01
    FULL = 0x02
    ERROR = 0x03


def _pack(layout: struct.Struct, *values: int) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise ValueError(f"report field out of range: {exc}") from exc


def _unpack(layout: struct.Struct, report_id: int, data: bytes) -> Tuple[int, ...]:
    """Unpack a report whose first byte is its ID; trailing bytes are ignored."""
    data = bytes(data)
    if len(data) < layout.size:
        raise ValueError(
            f"report 0x{report_id:02X} needs {layout.size} bytes, got {len(data)}"
        )
    fields = layout.unpack_from(data)
    if fields[0] != report_id:
        raise ValueError(
            f"expected report ID 0x{report_id:02X}, got 0x{fields[0]:02X}"
        )
    return fields[1:]


# --- Input reports (payload only; the report ID travels separately) ---

_GAMEPAD = struct.Struct("<hhHHH")


@dataclass
class GamepadReport:
    """Joystick input: steering, dummy Y, accelerator, brake and 16 buttons."""

    steer: int = 0
    dummy_y: int = 0
    accel: int = 0
    brake: int = 0
    buttons: int = 0

    def to_bytes(self) -> bytes:
        """Payload of input report 0x01, without the report ID."""
        return _pack(
            _GAMEPAD, self.steer, self.dummy_y, self.accel, self.brake, self.buttons
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "GamepadReport":
        """Decode a payload produced by to_bytes()."""
        data = bytes(data)
        if len(data) != _GAMEPAD.size:
            raise ValueError(
                f"gamepad report is {_GAMEPAD.size} bytes, got {len(data)}"
            )
        return cls(*_GAMEPAD.unpack(data))


@dataclass(frozen=True)
class PIDStateReport:
    """PID state input report: device flags and the playing state of one block."""

    effect_block_index: int = 0
    playing: bool = False
    device_paused: bool = False
    actuators_enabled: bool = True
    safety_switch: bool = False
    actuator_override: bool = False
    actuator_power: bool = False

    def to_bytes(self) -> bytes:
        """Payload of input report 0x02, without the report ID."""
        status = (
            int(self.device_paused)
            | int(self.actuators_enabled) << 1
            | int(self.safety_switch) << 2
            | int(self.actuator_override) << 3
            | int(self.actuator_power) << 4
        )
        effect_state = int(self.playing) | ((self.effect_block_index & 0x7F) << 1)
        return bytes([status, effect_state])


# --- Output reports (the buffer starts with the report ID) ---


@dataclass(frozen=True)
class SetEffectReport:
    """Set Effect output report (0x01)."""

    REPORT_ID: ClassVar[int] = OutputReportId.SET_EFFECT
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<BBBHHHBBBBB")

    effect_block_index: int
    effect_type: int
    duration: int
    trigger_repeat_interval: int
    sample_period: int
    gain: int
    trigger_button: int
    enable_axis: int
    direction_x: int
    direction_y: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "SetEffectReport":
        """Decode from a buffer that begins with the report ID."""
        return cls(*_unpack(cls._LAYOUT, cls.REPORT_ID, data))


@dataclass(frozen=True)
class SetEnvelopeReport:
    """Set Envelope output report (0x02)."""

    REPORT_ID: ClassVar[int] = OutputReportId.SET_ENVELOPE
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<BBHHII")

    effect_block_index: int
    attack_level: int
    fade_level: int
    attack_time: int
    fade_time: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "SetEnvelopeReport":
        """Decode from a buffer that begins with the report ID."""
        return cls(*_unpack(cls._LAYOUT, cls.REPORT_ID, data))


@dataclass(frozen=True)
class SetConditionReport:
    """Set Condition output report (0x03), shared by spring, damper, inertia and friction."""

    REPORT_ID: ClassVar[int] = OutputReportId.SET_CONDITION
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<BBBhhhHHH")

    effect_block_index: int
    parameter_block_offset: int
    cp_offset: int
    positive_coefficient: int
    negative_coefficient: int
    positive_saturation: int
    negative_saturation: int
    dead_band: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "SetConditionReport":
        """Decode from a buffer that begins with the report ID."""
        return cls(*_unpack(cls._LAYOUT, cls.REPORT_ID, data))


@dataclass(frozen=True)
class SetPeriodicReport:
    """Set Periodic output report (0x04), shared by the periodic waveforms."""

    REPORT_ID: ClassVar[int] = OutputReportId.SET_PERIODIC
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<BBHhHI")

    effect_block_index: int
    magnitude: int
    offset: int
    phase: int
    period: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "SetPeriodicReport":
        """Decode from a buffer that begins with the report ID."""
        return cls(*_unpack(cls._LAYOUT, cls.REPORT_ID, data))


@dataclass(frozen=True)
class SetConstantForceReport:
    """Set Constant Force output report (0x05)."""

    REPORT_ID: ClassVar[int] = OutputReportId.SET_CONSTANT_FORCE
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<BBh")

    effect_block_index: int
    magnitude: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "SetConstantForceReport":
        """Decode from a buffer that begins with the report ID."""
        return cls(*_unpack(cls._LAYOUT, cls.REPORT_ID, data))


@dataclass(frozen=True)
class EffectOperationReport:
    """Effect Operation output report (0x0A)."""

    REPORT_ID: ClassVar[int] = OutputReportId.EFFECT_OPERATION
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<BBBB")

    effect_block_index: int
    operation: int
    loop_count: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "EffectOperationReport":
        """Decode from a buffer that begins with the report ID."""
        return cls(*_unpack(cls._LAYOUT, cls.REPORT_ID, data))


@dataclass(frozen=True)
class PIDBlockFreeReport:
    """PID Block Free output report (0x0B)."""

    REPORT_ID: ClassVar[int] = OutputReportId.PID_BLOCK_FREE
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<BB")

    effect_block_index: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "PIDBlockFreeReport":
        """Decode from a buffer that begins with the report ID."""
        return cls(*_unpack(cls._LAYOUT, cls.REPORT_ID, data))


@dataclass(frozen=True)
class DeviceControlReport:
    """PID Device Control output report (0x0C)."""

    REPORT_ID: ClassVar[int] = OutputReportId.DEVICE_CONTROL
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<BB")

    control: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "DeviceControlReport":
        """Decode from a buffer that begins with the report ID."""
        return cls(*_unpack(cls._LAYOUT, cls.REPORT_ID, data))


@dataclass(frozen=True)
class DeviceGainReport:
    """Device Gain output report (0x0D)."""

    REPORT_ID: ClassVar[int] = OutputReportId.DEVICE_GAIN
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<BB")

    device_gain: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "DeviceGainReport":
        """Decode from a buffer that begins with the report ID."""
        return cls(*_unpack(cls._LAYOUT, cls.REPORT_ID, data))


@dataclass(frozen=True)
class SetCustomForceReport:
    """Set Custom Force output report (0x0E)."""

    REPORT_ID: ClassVar[int] = OutputReportId.SET_CUSTOM_FORCE
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<BBBH")

    effect_block_index: int
    sample_count: int
    sample_period: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "SetCustomForceReport":
        """Decode from a buffer that begins with the report ID."""
        return cls(*_unpack(cls._LAYOUT, cls.REPORT_ID, data))


# --- Feature reports (the reply starts with the report ID) ---

_CREATE_NEW_EFFECT = struct.Struct("<BBH")
_PID_BLOCK_LOAD = struct.Struct("<BBBH")
_PID_POOL = struct.Struct("<BHBB")


@dataclass(frozen=True)
class CreateNewEffectFeature:
    """Create New Effect feature report (0x05)."""

    effect_type: int = 0
    byte_count: int = 0

    def to_bytes(self) -> bytes:
        """Reply bytes, beginning with the report ID."""
        return _pack(
            _CREATE_NEW_EFFECT,
            FeatureReportId.CREATE_NEW_EFFECT,
            self.effect_type,
            self.byte_count,
        )


@dataclass(frozen=True)
class PIDBlockLoadFeature:
    """PID Block Load feature report (0x06): the slot given to a new effect."""

    effect_block_index: int = 0
    load_status: int = BlockLoadStatus.FULL
    ram_pool_available: int = 0

    def to_bytes(self) -> bytes:
        """Reply bytes, beginning with the report ID."""
        return _pack(
            _PID_BLOCK_LOAD,
            FeatureReportId.PID_BLOCK_LOAD,
            self.effect_block_index,
            self.load_status,
            self.ram_pool_available,
        )


@dataclass(frozen=True)
class PIDPoolFeature:
    """PID Pool feature report (0x07): device capacity."""

    ram_pool_size: int = 0
    simultaneous_effects: int = 0
    # bit 0: device-managed pool, bit 1: shared parameter blocks
    memory_management: int = 0

    def to_bytes(self) -> bytes:
        """Reply bytes, beginning with the report ID."""
        return _pack(
            _PID_POOL,
            FeatureReportId.PID_POOL,
            self.ram_pool_size,
            self.simultaneous_effects,
            self.memory_management,
        )


# --- Parsed state ---


@dataclass
class PidDebugInfo:
    """Summary of the most recently parsed PID output report."""

    last_report_id: int = 0
    is_constant_force: bool = False
    magnitude: int = 0
    device_gain: int = 0
    operation: int = 0
    effect_block_index: int = 0
    updated: bool = False


@dataclass
class EffectState:
    """Parameters of one effect slot as handed to the control loop."""

    magnitude: int = 0
    gain: int = 0
    type: int = 0
    cp_offset: int = 0
    positive_coeff: int = 0
    periodic_magnitude: int = 0
    periodic_offset: int = 0
    periodic_phase: int = 0
    periodic_period: int = 0
    active: bool = False
    is_callback_test: bool = False