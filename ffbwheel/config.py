"""Project-wide settings: pin assignment, motor limits, timing and input ranges."""

SERIAL_BAUDRATE = 115200

# Invert the brake reading so that pressing the pedal increases the value.
BRAKE_INVERT = True

# Emit the periodic physical-input debug lines from the control loop.
PHYSICAL_INPUT_DEBUG_ENABLE = True


class Pin:
    """GPIO pin assignment."""

    SPI_INT = 1
    SPI_SCK = 2
    SPI_TX = 3
    SPI_RX = 4
    CAN_CS = 5

    SHIFT_UP = 14  # active low
    SHIFT_DOWN = 15  # active low

    ACCEL = 26  # ADC0
    BRAKE = 28  # ADC2


class Steer:
    """Steering motor, CAN and force-effect settings."""

    CAN_ID = 0x141
    DEVICE_ID = 1

    # 16-bit encoder: 65536 counts per revolution.
    ENCODER_COUNTS_PER_DEG = 65536.0 / 360.0

    # Usable angle on each side of centre, in degrees.
    ANGLE_RANGE_DEG = 30.0

    ANGLE_MIN = -int(ANGLE_RANGE_DEG * ENCODER_COUNTS_PER_DEG)
    ANGLE_MAX = int(ANGLE_RANGE_DEG * ENCODER_COUNTS_PER_DEG)
    ANGLE_CENTER = 0x7FFF

    TORQUE_MIN = -1000
    TORQUE_MAX = 1000

    SPRING_COEFF = 0.01 * TORQUE_MAX / ANGLE_MAX
    FRICTION_COEFF = 0.0
    DAMPER_COEFF = 0.0001
    INERTIA_COEFF = 0.0


class Timing:
    """Loop periods."""

    SAMPLING_INTERVAL_US = 250
    STEAR_CONT_INTERVAL_US = 1000
    HIDREPO_INTERVAL_MS = 1
    USB_POLL_INTERVAL_MS = 5


class Adc:
    """Analogue pedal ranges (10-bit ADC counts) and HID output ranges."""

    ACCEL_MIN = 180
    ACCEL_MAX = 400
    ACCEL_HID_MIN = 0
    ACCEL_HID_MAX = 65535

    BRAKE_MIN = 100
    BRAKE_MAX = 750
    BRAKE_HID_MIN = 0
    BRAKE_HID_MAX = 65535

    BUFFER_SIZE = 12
    AVERAGE_COUNT = 8


class Input:
    """Digital input settings."""

    BUTTON_DEBOUNCE_THRESHOLD = 4


class Hid:
    """USB HID layout counts."""

    BUTTON_COUNT = 2
    AXIS_COUNT = 3