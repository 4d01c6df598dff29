# ffbwheel

`ffbwheel` holds the building blocks of a force-feedback steering wheel
controller with accelerator and brake pedals and two shift buttons: the binary
layouts of the USB HID PID (Physical Interface Device) reports, a driver for an
MF4015 steering motor on a CAN bus, force-effect and PID computations, and
filtered pedal and button inputs.

Hardware access is kept behind small interfaces — a CAN bus object and plain
callables that return pin readings — so everything runs on an ordinary
computer.

## Modules

- `ffbwheel.config` — settings: `Pin`, `Steer` (CAN ID, angle and torque
  limits, effect coefficients), `Timing`, `Adc`, `Input`, `Hid`, plus
  `SERIAL_BAUDRATE`, `BRAKE_INVERT` and `PHYSICAL_INPUT_DEBUG_ENABLE`.
- `ffbwheel.timing` — `IntervalTrigger` and `OneShotTrigger`, non-blocking
  timers over a wrapping 32-bit clock; `monotonic_us()` and `monotonic_ms()`
  are the default clocks.
- `ffbwheel.adinput` — `ADInputChannel`, a moving average over a window of raw
  readings with an optional transform; it reports 0 until the window is full.
- `ffbwheel.digital_input` — `DigitalInputChannel`, a debounced input that
  starts released (`HIGH`) and changes state only after a run of consistent
  readings.
- `ffbwheel.io_channels` — `constrain`, `arduino_map`, the pedal transforms
  `transform_accel` and `transform_brake`, and the factories
  `make_accel_channel`, `make_brake_channel` and `make_shift_channel`.
- `ffbwheel.control` — `PhysicalEffect` (friction, spring, damper and inertia
  as a restoring force) and a `PID` controller; both saturate at ±32767.
- `ffbwheel.shared_data` — `SharedData` (target torque, loop count, last loop
  time) with a fixed binary layout via `to_bytes()` / `from_bytes()`.
- `ffbwheel.config_manager` — `ConfigManager`, which saves `SharedData` to a
  file (`config.bin` by default) and loads it back; `load()` returns `None`
  when the file does not exist and raises `ConfigError` on a short file or an
  I/O failure.
- `ffbwheel.can_interface` — `CANInterface`, the abstract CAN bus, `CanFrame`,
  and `MemoryCANBus`, which records sent frames in `sent` and replays frames
  queued with `inject()`.
- `ffbwheel.mf4015` — `MF4015Driver`: motor on/off/stop, torque commands with
  sign inversion, clamping and a hysteresis cut-off outside the usable steering
  range, and decoding of replies into `MotorStatus`.
- `ffbwheel.motor_link` — `MotorLink`, a plainer command set for the same
  motor that clamps torque and tracks only the last encoder value via `poll()`.
- `ffbwheel.hid_reports` — report ID enums (`OutputReportId`, `InputReportId`,
  `FeatureReportId`), `EffectType`, `EffectOperation`, `DeviceControl`,
  `BlockLoadStatus`, the input reports `GamepadReport` and `PIDStateReport`,
  the output-report decoders (`SetEffectReport`, `SetConditionReport`,
  `SetConstantForceReport`, `EffectOperationReport`, and the rest), the
  feature replies `CreateNewEffectFeature`, `PIDBlockLoadFeature` and
  `PIDPoolFeature`, and the state records `PidDebugInfo` and `EffectState`.
- `ffbwheel.hid_items` — `HidItem`, `ItemType`, `iter_items()` to decode the
  short items of a HID report descriptor and `encode_items()` to write them
  back.

## Requirements

Python 3.10 or later. No third-party packages are needed at run time; the
tests use pytest.

## Examples

Driving the motor over an in-memory bus:

```python
from ffbwheel.can_interface import MemoryCANBus
from ffbwheel.config import Steer
from ffbwheel.mf4015 import MF4015Driver

bus = MemoryCANBus()
bus.begin()
motor = MF4015Driver(bus, Steer.CAN_ID)
motor.enable()
motor.set_torque(200)
print(bus.sent)

# A torque-control reply carries temperature, current, speed and encoder.
motor.parse_frame(Steer.CAN_ID, bytes([0xA1, 30, 0, 0, 0, 0, 0xFF, 0x7F]))
print(motor.steer_value(), motor.status())  # 0 at the centre position
```

Decoding a PID output report and building an input report:

```python
from ffbwheel.hid_reports import GamepadReport, SetConstantForceReport

report = SetConstantForceReport.from_bytes(bytes([0x05, 0x01, 0x88, 0x13]))
print(report.effect_block_index, report.magnitude)  # 1 5000

payload = GamepadReport(steer=-1200, accel=30000, buttons=0b01).to_bytes()
print(GamepadReport.from_bytes(payload))
```

Listing the items of a descriptor fragment:

```python
from ffbwheel.hid_items import iter_items

for item in iter_items(bytes([0x05, 0x01, 0x09, 0x04, 0xA1, 0x01])):
    print(item.name, item.value)
```

Filtering pedal input:

```python
from ffbwheel.io_channels import make_accel_channel

samples = iter([300] * 8)
accel = make_accel_channel(lambda: next(samples))
accel.init()
for _ in range(8):
    accel.sample()
print(accel.value())  # averaged reading mapped into 0..65535
```

A spring effect pulling back toward centre:

```python
from ffbwheel.config import Steer, Timing
from ffbwheel.control import PhysicalEffect

effect = PhysicalEffect(
    Steer.FRICTION_COEFF, Steer.SPRING_COEFF, Steer.DAMPER_COEFF,
    Steer.INERTIA_COEFF, Timing.STEAR_CONT_INTERVAL_US,
)
effect.update(1000)
print(effect.effect())
```

## What the package does not do

- It does not talk to a USB host. There is no HID transport, no complete
  report descriptor to present to the host, and nothing that answers feature
  requests or allocates effect blocks; `hid_reports` only defines and decodes
  the report layouts.
- It has no effect engine that turns decoded PID reports into running effects,
  and no control loop that ties pedals, buttons, effects and the motor
  together. Those pieces have to be assembled by the caller from the classes
  above.
- It has no CAN controller driver for real hardware; supply your own
  `CANInterface` implementation, or use `MemoryCANBus`.
- It installs no command-line program.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.