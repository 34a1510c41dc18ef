"""Start-up settings of a secondary sign controller."""

from collections.abc import Iterable

from .colors import color
from .protocol import PRIMARY_CONTROLLER_UUID, SECONDARY_CONTROLLER_UUID

__all__ = [
    "DEFAULT_BRIGHTNESS",
    "DEFAULT_BRIGHTNESS_LOW",
    "DEFAULT_SPEED",
    "PIT_SIGN_TYPE",
    "LOCAL_NAME_PREFIX",
    "DEFAULT_COLOR",
    "PIT_SIGN_COLOR",
    "selector_value",
    "local_name",
    "service_uuid",
    "default_brightness",
]

DEFAULT_BRIGHTNESS = 170
DEFAULT_BRIGHTNESS_LOW = 20
DEFAULT_SPEED = 90

# The pit sign runs at full brightness and has its own power LED.
PIT_SIGN_TYPE = 10

LOCAL_NAME_PREFIX = "3181 LED Controller "

# Solid color shown before any connection: pink, or red on the pit sign.
DEFAULT_COLOR = color(230, 22, 161)
PIT_SIGN_COLOR = color(255, 0, 0)


def selector_value(active_pins: Iterable[bool]) -> int:
    """Byte read from selector pins, most significant first; True is active."""
    value = 0
    for active in active_pins:
        value = ((value << 1) + (1 if active else 0)) & 0xFF
    return value


def local_name(position: int, sign_type: int) -> str:
    """Advertised name of a sign: the prefix, then ``<position>-<type>``."""
    return f"{LOCAL_NAME_PREFIX}{position}-{sign_type}"


def service_uuid(position: int) -> str:
    """Service a sign offers; position 0 means the sign stands alone."""
    return PRIMARY_CONTROLLER_UUID if position == 0 else SECONDARY_CONTROLLER_UUID


def default_brightness(sign_type: int, low_brightness: bool) -> int:
    """Initial brightness; the pit sign always starts at full brightness."""
    if sign_type == PIT_SIGN_TYPE:
        return 255
    return DEFAULT_BRIGHTNESS_LOW if low_brightness else DEFAULT_BRIGHTNESS