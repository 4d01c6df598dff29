import struct

import pytest

from ffbwheel.hid_reports import (
    BlockLoadStatus,
    CreateNewEffectFeature,
    DeviceControl,
    DeviceControlReport,
    DeviceGainReport,
    EffectOperation,
    EffectOperationReport,
    EffectType,
    FeatureReportId,
    GamepadReport,
    HID_FFB_REPORT_SIZE,
    OutputReportId,
    PIDBlockFreeReport,
    PIDBlockLoadFeature,
    PIDPoolFeature,
    PIDStateReport,
    SetConditionReport,
    SetConstantForceReport,
    SetCustomForceReport,
    SetEffectReport,
    SetEnvelopeReport,
    SetPeriodicReport,
)


@pytest.mark.parametrize(
    "effect, usage",
    [
        (EffectType.CONSTANT, 0x26),
        (EffectType.RAMP, 0x27),
        (EffectType.SQUARE, 0x30),
        (EffectType.SPRING, 0x40),
        (EffectType.FRICTION, 0x43),
        (EffectType.CUSTOM, 0x28),
    ],
)
def test_effect_type_usage(effect, usage):
    assert effect.usage == usage


def test_gamepad_round_trip():
    report = GamepadReport(steer=-32767, dummy_y=0, accel=65535, brake=12, buttons=3)
    encoded = report.to_bytes()
    assert len(encoded) == 10
    assert GamepadReport.from_bytes(encoded) == report


def test_gamepad_is_little_endian():
    encoded = GamepadReport(steer=-1, buttons=0x0102).to_bytes()
    assert encoded[:2] == b"\xff\xff"
    assert encoded[-2:] == b"\x02\x01"


def test_gamepad_out_of_range_raises():
    with pytest.raises(ValueError):
        GamepadReport(accel=70000).to_bytes()


def test_gamepad_wrong_length_raises():
    with pytest.raises(ValueError):
        GamepadReport.from_bytes(bytes(9))


def test_pid_state_payload():
    encoded = PIDStateReport(effect_block_index=3, playing=True).to_bytes()
    assert encoded == bytes([0x02, 0x07])


def test_pid_state_masks_block_index():
    high = PIDStateReport(effect_block_index=0x81).to_bytes()
    low = PIDStateReport(effect_block_index=1).to_bytes()
    assert high == low


def test_set_effect_parse():
    data = struct.pack(
        "<BBBHHHBBBBB",
        OutputReportId.SET_EFFECT, 2, EffectType.CONSTANT, 1000, 5, 7, 255, 1, 3, 64, 32,
    )
    report = SetEffectReport.from_bytes(data)
    assert report.effect_block_index == 2
    assert report.effect_type == EffectType.CONSTANT
    assert report.duration == 1000
    assert report.trigger_repeat_interval == 5
    assert report.sample_period == 7
    assert report.gain == 255
    assert report.trigger_button == 1
    assert report.enable_axis == 3
    assert report.direction_x == 64
    assert report.direction_y == 32


def test_set_effect_ignores_padding():
    data = struct.pack(
        "<BBBHHHBBBBB", OutputReportId.SET_EFFECT, 1, 4, 0, 0, 0, 128, 0, 0, 0, 0
    )
    padded = data + bytes(HID_FFB_REPORT_SIZE - len(data))
    assert SetEffectReport.from_bytes(padded) == SetEffectReport.from_bytes(data)


def test_set_effect_short_buffer_raises():
    with pytest.raises(ValueError):
        SetEffectReport.from_bytes(bytes([OutputReportId.SET_EFFECT, 1]))


def test_wrong_report_id_raises():
    with pytest.raises(ValueError):
        SetConstantForceReport.from_bytes(bytes([OutputReportId.DEVICE_GAIN, 1, 0, 0]))


def test_set_envelope_parse():
    data = struct.pack("<BBHHII", OutputReportId.SET_ENVELOPE, 4, 10000, 500, 200, 300)
    report = SetEnvelopeReport.from_bytes(data)
    assert (report.effect_block_index, report.attack_level, report.fade_level) == (4, 10000, 500)
    assert (report.attack_time, report.fade_time) == (200, 300)


def test_set_condition_parse_signed():
    data = struct.pack(
        "<BBBhhhHHH", OutputReportId.SET_CONDITION, 1, 0, -10000, 5000, -5000, 10000, 9000, 100
    )
    report = SetConditionReport.from_bytes(data)
    assert report.cp_offset == -10000
    assert report.positive_coefficient == 5000
    assert report.negative_coefficient == -5000
    assert report.positive_saturation == 10000
    assert report.negative_saturation == 9000
    assert report.dead_band == 100


def test_set_periodic_parse():
    data = struct.pack("<BBHhHI", OutputReportId.SET_PERIODIC, 2, 10000, -2000, 35999, 32767)
    report = SetPeriodicReport.from_bytes(data)
    assert report.magnitude == 10000
    assert report.offset == -2000
    assert report.phase == 35999
    assert report.period == 32767


def test_set_constant_force_parse():
    data = struct.pack("<BBh", OutputReportId.SET_CONSTANT_FORCE, 1, -10000)
    report = SetConstantForceReport.from_bytes(data)
    assert report.effect_block_index == 1
    assert report.magnitude == -10000


def test_effect_operation_parse():
    data = bytes([OutputReportId.EFFECT_OPERATION, 3, EffectOperation.STOP, 9])
    report = EffectOperationReport.from_bytes(data)
    assert report.effect_block_index == 3
    assert report.operation == EffectOperation.STOP
    assert report.loop_count == 9


def test_small_output_reports_parse():
    assert PIDBlockFreeReport.from_bytes(bytes([OutputReportId.PID_BLOCK_FREE, 5])).effect_block_index == 5
    control = DeviceControlReport.from_bytes(
        bytes([OutputReportId.DEVICE_CONTROL, DeviceControl.DEVICE_RESET])
    )
    assert control.control == DeviceControl.DEVICE_RESET
    assert DeviceGainReport.from_bytes(bytes([OutputReportId.DEVICE_GAIN, 200])).device_gain == 200


def test_set_custom_force_parse():
    data = struct.pack("<BBBH", OutputReportId.SET_CUSTOM_FORCE, 2, 12, 1000)
    report = SetCustomForceReport.from_bytes(data)
    assert (report.effect_block_index, report.sample_count, report.sample_period) == (2, 12, 1000)


def test_create_new_effect_feature_bytes():
    assert CreateNewEffectFeature().to_bytes() == bytes(
        [FeatureReportId.CREATE_NEW_EFFECT, 0, 0, 0]
    )


def test_pid_block_load_feature_bytes():
    encoded = PIDBlockLoadFeature(3, BlockLoadStatus.SUCCESS, 70).to_bytes()
    assert encoded == bytes(
        [FeatureReportId.PID_BLOCK_LOAD, 3, BlockLoadStatus.SUCCESS, 70, 0]
    )


def test_pid_pool_feature_bytes():
    encoded = PIDPoolFeature(ram_pool_size=100, simultaneous_effects=10).to_bytes()
    assert encoded == bytes([FeatureReportId.PID_POOL, 100, 0, 10, 0])


def test_feature_out_of_range_raises():
    with pytest.raises(ValueError):
        PIDPoolFeature(ram_pool_size=70000).to_bytes()