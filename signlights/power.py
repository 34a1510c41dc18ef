"""Battery monitoring and loop timing shared by the sign controllers."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

__all__ = [
    "LOW_POWER_THRESHOLD",
    "NORMAL_POWER_THRESHOLD",
    "VOLTAGE_MULTIPLIER",
    "ADC_REFERENCE_VOLTS",
    "ADC_STEPS",
    "TELEMETRY_INTERVAL",
    "TIMESTAMP_UPDATE_INTERVAL",
    "LEGACY_SIGN_TYPE",
    "LEGACY_DEFAULT_BRIGHTNESS",
    "battery_voltage",
    "PowerTransition",
    "PowerMonitor",
    "TelemetryReport",
    "LoopTelemetry",
]

# Volts below which a sign goes into low power mode.
LOW_POWER_THRESHOLD = 6.7
# Volts above which a sign recovers from low power mode.
NORMAL_POWER_THRESHOLD = 7.2
# Scale factor of the voltage divider in front of the analog input.
VOLTAGE_MULTIPLIER = 4.83
# The analog input reads 0 to 1024 steps for 0 to 3.3 volts.
ADC_REFERENCE_VOLTS = 3.3
ADC_STEPS = 1024

# Milliseconds between loop timing reports.
TELEMETRY_INTERVAL = 2000
# Milliseconds between updates of the published timestamp.
TIMESTAMP_UPDATE_INTERVAL = 500

# Sign type of the stand-alone legacy sign and its default brightness.
LEGACY_SIGN_TYPE = 16
LEGACY_DEFAULT_BRIGHTNESS = 255


def battery_voltage(raw_level: int) -> float:
    """Battery voltage for a raw reading of the voltage input."""
    return raw_level * VOLTAGE_MULTIPLIER * ADC_REFERENCE_VOLTS / ADC_STEPS


class PowerTransition(Enum):
    """Change of power mode decided by a voltage reading."""

    NONE = "none"
    ENTER_LOW_POWER = "enter_low_power"
    EXIT_LOW_POWER = "exit_low_power"


class PowerMonitor:
    """Switches into low power mode below one threshold and out above another.

    Between the two thresholds the current mode is kept.
    """

    def __init__(
        self,
        low_threshold: float = LOW_POWER_THRESHOLD,
        normal_threshold: float = NORMAL_POWER_THRESHOLD,
    ) -> None:
        self.low_threshold = low_threshold
        self.normal_threshold = normal_threshold
        self.in_low_power = False

    def check(self, voltage: float) -> PowerTransition:
        """Update the mode for a new voltage reading and report any change."""
        transition = PowerTransition.NONE
        if voltage < self.low_threshold and not self.in_low_power:
            self.in_low_power = True
            transition = PowerTransition.ENTER_LOW_POWER
        if voltage > self.normal_threshold and self.in_low_power:
            self.in_low_power = False
            transition = PowerTransition.EXIT_LOW_POWER
        return transition


@dataclass(frozen=True)
class TelemetryReport:
    """Loop timing over one reporting interval."""

    iterations: int
    elapsed_ms: int
    timestamp: int

    @property
    def average_ms(self) -> float:
        """Average milliseconds per loop iteration."""
        return self.elapsed_ms / self.iterations

    def __str__(self) -> str:
        return (
            f"{self.iterations} iterations done in {self.elapsed_ms} msec; "
            f"avg msec per iteration: {self.average_ms:.2f}"
        )


class LoopTelemetry:
    """Counts loop iterations and reports their timing once per interval."""

    def __init__(self, interval: int = TELEMETRY_INTERVAL) -> None:
        self.interval = interval
        self.iterations = 0
        self.last_report = 0

    def tick(self, now: int) -> Optional[TelemetryReport]:
        """Count one iteration at ``now`` ms; return a report when one is due."""
        self.iterations += 1
        if now <= self.last_report + self.interval:
            return None
        report = TelemetryReport(
            iterations=self.iterations,
            elapsed_ms=now - self.last_report,
            timestamp=now,
        )
        self.last_report = now
        self.iterations = 0
        return report