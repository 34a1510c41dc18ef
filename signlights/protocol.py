"""Service and characteristic identifiers used by the sign controllers."""

__all__ = [
    "PRIMARY_CONTROLLER_UUID",
    "SECONDARY_CONTROLLER_UUID",
    "BRIGHTNESS_CHARACTERISTIC_UUID",
    "SPEED_CHARACTERISTIC_UUID",
    "BATTERY_VOLTAGE_CHARACTERISTIC_UUID",
    "SIGN_CONFIGURATION_CHARACTERISTIC_UUID",
    "OFFSET_DATA_CHARACTERISTIC_UUID",
    "SYNC_DATA_CHARACTERISTIC_UUID",
    "PATTERN_DATA_CHARACTERISTIC_UUID",
    "COLOR_PATTERN_LIST_CHARACTERISTIC_UUID",
    "DISPLAY_PATTERN_LIST_CHARACTERISTIC_UUID",
    "TIMESTAMP_CHARACTERISTIC_UUID",
    "MAX_STRING_LENGTH",
]

PRIMARY_CONTROLLER_UUID = "99be4fac-c708-41e5-a149-74047f554cc1"
SECONDARY_CONTROLLER_UUID = "1221ca8d-4172-4946-bcd1-f9e4b40ba6b0"

BRIGHTNESS_CHARACTERISTIC_UUID = "5eccb54e-465f-47f4-ac50-6735bfc0e730"
SPEED_CHARACTERISTIC_UUID = "b975e425-62e4-4b08-a652-d64ad5097815"
BATTERY_VOLTAGE_CHARACTERISTIC_UUID = "ea0a95bc-7561-4b1e-8925-7973b3ad7b9a"
SIGN_CONFIGURATION_CHARACTERISTIC_UUID = "ca6e4cfc-e50a-46a3-9576-101d4e938b77"
OFFSET_DATA_CHARACTERISTIC_UUID = "3ba9c4fc-a442-4126-a844-80b0d5fba61a"
SYNC_DATA_CHARACTERISTIC_UUID = "2541ad55-ea7e-4afd-9810-06731a76d8dc"
PATTERN_DATA_CHARACTERISTIC_UUID = "20450d4f-d882-4fee-8be0-bbf82707dc79"
COLOR_PATTERN_LIST_CHARACTERISTIC_UUID = "504850ed-f4e7-497a-a1e3-cc70afa56901"
DISPLAY_PATTERN_LIST_CHARACTERISTIC_UUID = "c999ee9b-294e-4889-8cba-1eb2f515b054"
TIMESTAMP_CHARACTERISTIC_UUID = "b4fdd203-81d2-46fd-a76c-3e5d5ec2b242"

# Longest string a list characteristic can carry.
MAX_STRING_LENGTH = 510