import pytest

from signlights.power import (
    LOW_POWER_THRESHOLD,
    NORMAL_POWER_THRESHOLD,
    LoopTelemetry,
    PowerMonitor,
    PowerTransition,
    battery_voltage,
)


def test_battery_voltage_zero():
    assert battery_voltage(0) == 0


def test_battery_voltage_is_proportional():
    assert battery_voltage(1024) == pytest.approx(2 * battery_voltage(512))


def test_battery_voltage_increases():
    readings = [battery_voltage(level) for level in range(0, 1025, 64)]
    assert readings == sorted(readings)
    assert len(set(readings)) == len(readings)


def test_full_scale_is_above_normal_threshold():
    assert battery_voltage(1024) > NORMAL_POWER_THRESHOLD


def test_enter_low_power_once():
    monitor = PowerMonitor()
    assert monitor.check(LOW_POWER_THRESHOLD - 0.5) is PowerTransition.ENTER_LOW_POWER
    assert monitor.in_low_power is True
    assert monitor.check(LOW_POWER_THRESHOLD - 0.5) is PowerTransition.NONE


def test_hysteresis_keeps_low_power_between_thresholds():
    monitor = PowerMonitor()
    monitor.check(LOW_POWER_THRESHOLD - 1)
    middle = (LOW_POWER_THRESHOLD + NORMAL_POWER_THRESHOLD) / 2
    assert monitor.check(middle) is PowerTransition.NONE
    assert monitor.in_low_power is True


def test_exit_low_power_above_normal():
    monitor = PowerMonitor()
    monitor.check(LOW_POWER_THRESHOLD - 1)
    assert monitor.check(NORMAL_POWER_THRESHOLD + 0.1) is PowerTransition.EXIT_LOW_POWER
    assert monitor.in_low_power is False


def test_normal_voltage_no_transition():
    monitor = PowerMonitor()
    assert monitor.check(NORMAL_POWER_THRESHOLD + 1) is PowerTransition.NONE
    assert monitor.in_low_power is False


def test_custom_thresholds():
    monitor = PowerMonitor(3.0, 4.0)
    assert monitor.check(3.5) is PowerTransition.NONE
    assert monitor.check(2.9) is PowerTransition.ENTER_LOW_POWER
    assert monitor.check(4.1) is PowerTransition.EXIT_LOW_POWER


def test_telemetry_not_due_at_interval_boundary():
    telemetry = LoopTelemetry(2000)
    assert telemetry.tick(1000) is None
    assert telemetry.tick(2000) is None


def test_telemetry_report_after_interval():
    telemetry = LoopTelemetry(2000)
    telemetry.tick(1000)
    report = telemetry.tick(2001)
    assert report.iterations == 2
    assert report.elapsed_ms == 2001
    assert report.timestamp == 2001
    assert report.average_ms == pytest.approx(2001 / 2)


def test_telemetry_resets_after_report():
    telemetry = LoopTelemetry(100)
    telemetry.tick(101)
    assert telemetry.iterations == 0
    assert telemetry.tick(150) is None
    report = telemetry.tick(202)
    assert report.iterations == 2
    assert report.elapsed_ms == 202 - 101


def test_telemetry_report_text():
    telemetry = LoopTelemetry(10)
    report = telemetry.tick(20)
    assert str(report).startswith("1 iterations done in 20 msec")