"""Protocol constants and enumerations for the headphone link."""

from __future__ import annotations

from enum import IntEnum

APP_VERSION = "1.3.13"
APP_NAME = f"Sony Headphones Client v{APP_VERSION}"
APP_CONFIG_NAME = "sonyheadphonesclient.toml"

MAX_BLUETOOTH_MESSAGE_SIZE = 2048
START_MARKER = 62
END_MARKER = 60

MAC_ADDR_STR_SIZE = 17

# RFCOMM "Serial HPC" service advertised by the headphones.
SERVICE_UUID = "956C7B26-D49A-4BA8-B03F-B17D393CB6E2"
SERVICE_UUID_BYTES = bytes(
    [
        0x95, 0x6C, 0x7B, 0x26, 0xD4, 0x9A, 0x4B, 0xA8,
        0xB0, 0x3F, 0xB1, 0x7D, 0x39, 0x3C, 0xB6, 0xE2,
    ]
)


class DataType(IntEnum):
    """Frame data type; unrecognised values map to UNKNOWN."""

    DATA = 0
    ACK = 1
    DATA_MC_NO1 = 2
    DATA_ICD = 9
    DATA_EV = 10
    DATA_MDR = 12
    DATA_COMMON = 13
    DATA_MDR_NO2 = 14
    SHOT = 16
    SHOT_MC_NO1 = 18
    SHOT_ICD = 25
    SHOT_EV = 26
    SHOT_MDR = 28
    SHOT_COMMON = 29
    SHOT_MDR_NO2 = 30
    LARGE_DATA_COMMON = 45
    UNKNOWN = -1

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class NcAsmEffect(IntEnum):
    OFF = 0
    ON = 1


class NcAsmSettingType(IntEnum):
    NOISE_CANCELLING = 0
    AMBIENT_SOUND = 1


class AsmId(IntEnum):
    NORMAL = 0
    VOICE = 1


class CommandType(IntEnum):
    """First payload byte of a command; unrecognised values map to UNKNOWN."""

    INIT_REQUEST = 0x00
    INIT_RESPONSE = 0x01

    BATTERY_LEVEL_GET = 0x22
    BATTERY_LEVEL_RET = 0x23

    POWER_OFF = 0x24

    CONNECTED_DEVICES_GET = 0x36
    CONNECTED_DEVICES_RET = 0x37
    CONNECTED_DEVICES_SET = 0x38
    CONNECTED_DEVICES_NOTIFY = 0x39

    MULTIPOINT_DEVICE_GET = 0x3A
    MULTIPOINT_DEVICE_RET = 0x3B
    MULTIPOINT_DEVICE_SET = 0x3C
    MULTIPOINT_DEVICE_NOTIFY = 0x3D

    VOICEGUIDANCE_PARAM_GET = 0x46
    VOICEGUIDANCE_PARAM_RET = 0x47
    VOICEGUIDANCE_PARAM_SET = 0x48
    VOICEGUIDANCE_PARAM_NOTIFY = 0x49

    EQUALIZER_GET = 0x56
    EQUALIZER_RET = 0x57
    EQUALIZER_SET = 0x58
    EQUALIZER_NOTIFY = 0x59

    PLAYBACK_SND_PRESSURE_GET = 0x5A
    PLAYBACK_SND_PRESSURE_RET = 0x5B

    NCASM_PARAM_GET = 0x66
    NCASM_PARAM_RET = 0x67
    NCASM_PARAM_SET = 0x68
    NCASM_PARAM_NOTIFY = 0x69

    PLAYBACK_STATUS_CONTROL_GET = 0xA2
    PLAYBACK_STATUS_CONTROL_RET = 0xA3
    PLAYBACK_STATUS_CONTROL_SET = 0xA4
    PLAYBACK_STATUS_CONTROL_NOTIFY = 0xA5

    MISC_DATA_GET = 0xC4
    MISC_DATA_RET = 0xC9

    MULTIPOINT_ETC_ENABLE_GET = 0xD6
    MULTIPOINT_ETC_ENABLE_RET = 0xD7
    MULTIPOINT_ETC_ENABLE_SET = 0xD8
    MULTIPOINT_ETC_ENABLE_NOTIFY = 0xD9

    MULTIPOINT_ENABLE_GET_2 = 0x96
    MULTIPOINT_ENABLE_RET_2 = 0x97
    MULTIPOINT_ENABLE_SET_2 = 0x98
    MULTIPOINT_ENABLE_NOTIFY_2 = 0x99

    PLAYBACK_STATUS_GET = 0xA6
    PLAYBACK_STATUS_RET = 0xA7
    PLAYBACK_STATUS_SET = 0xA8
    PLAYBACK_STATUS_NOTIFY = 0xA9

    AUTOMATIC_POWER_OFF_BUTTON_MODE_GET = 0xF6
    AUTOMATIC_POWER_OFF_BUTTON_MODE_RET = 0xF7
    AUTOMATIC_POWER_OFF_BUTTON_MODE_SET = 0xF8
    AUTOMATIC_POWER_OFF_BUTTON_MODE_NOTIFY = 0xF9

    SPEAK_TO_CHAT_GET = 0xFA
    SPEAK_TO_CHAT_RET = 0xFB
    SPEAK_TO_CHAT_SET = 0xFC
    SPEAK_TO_CHAT_NOTIFY = 0xFD

    UNKNOWN = 0xFF

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class PlaybackControl(IntEnum):
    NONE = 0
    PAUSE = 1
    NEXT = 2
    PREV = 3
    PLAY = 7


class PlaybackControlResponse(IntEnum):
    PLAY = 1
    PAUSE = 2


class TouchSensorFunction(IntEnum):
    PLAYBACK_CONTROL = 0x20
    AMBIENT_NC_CONTROL = 0x35
    NOT_ASSIGNED = 0xFF