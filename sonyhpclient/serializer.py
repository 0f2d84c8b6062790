"""Framing, escaping and payload serialisation for headphone commands.

Wire format::

    START_MARKER escape(DATA_TYPE SEQ SIZE[4, big endian] PAYLOAD CHECKSUM) END_MARKER
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .bytemagic import bytes_to_int_be, int_to_bytes_be
from .constants import (
    END_MARKER,
    MAC_ADDR_STR_SIZE,
    MAX_BLUETOOTH_MESSAGE_SIZE,
    START_MARKER,
    AsmId,
    CommandType,
    DataType,
    NcAsmEffect,
    NcAsmSettingType,
    PlaybackControl,
    TouchSensorFunction,
)

MINIMUM_VOICE_FOCUS_STEP = 2
ASM_LEVEL_DISABLED = 0xFFFFFFFF

ESCAPED_BYTE_SENTRY = 0x3D
_ESCAPES = {60: 44, 61: 45, 62: 46}
_UNESCAPES = {v: k for k, v in _ESCAPES.items()}


def _u8(value: int) -> int:
    return int(value) & 0xFF


def _signed(value: int) -> int:
    return value - 0x100 if value >= 0x80 else value


def escape_specials(src: bytes) -> bytes:
    """Escape the marker and sentry bytes (0x3C, 0x3D, 0x3E)."""
    out = bytearray()
    for b in src:
        if b in _ESCAPES:
            out += bytes((ESCAPED_BYTE_SENTRY, _ESCAPES[b]))
        else:
            out.append(b)
    return bytes(out)


def unescape_specials(src: bytes) -> bytes:
    """Undo :func:`escape_specials`; raises ValueError on a malformed escape."""
    out = bytearray()
    it = iter(src)
    for b in it:
        if b != ESCAPED_BYTE_SENTRY:
            out.append(b)
            continue
        escaped = next(it, None)
        if escaped is None:
            raise ValueError("No data left for escaped byte data")
        if escaped not in _UNESCAPES:
            raise ValueError("Unexpected escaped byte")
        out.append(_UNESCAPES[escaped])
    return bytes(out)


def sum_checksum(src: bytes) -> int:
    """Return the 8-bit sum of all bytes."""
    return sum(src) & 0xFF


def package_data_for_bt(src: bytes, data_type: int, seq_number: int) -> bytes:
    """Frame a payload for transmission."""
    body = bytearray((_u8(data_type), _u8(seq_number)))
    body += int_to_bytes_be(len(src))
    body += bytes(src)
    body.append(sum_checksum(body))
    framed = bytes((START_MARKER,)) + escape_specials(bytes(body)) + bytes((END_MARKER,))
    if len(framed) > MAX_BLUETOOTH_MESSAGE_SIZE:
        raise ValueError(
            "Exceeded the max bluetooth message size; chunked messages are not supported"
        )
    return framed


def serialize_nc_and_asm_setting(
    nc_asm_effect: NcAsmEffect,
    nc_asm_setting_type: NcAsmSettingType,
    voice_passthrough: AsmId,
    asm_level: int,
) -> bytes:
    return bytes(
        (
            CommandType.NCASM_PARAM_SET,
            0x17,
            0x01,
            _u8(nc_asm_effect),
            _u8(nc_asm_setting_type),
            _u8(voice_passthrough),
            _u8(asm_level),
        )
    )


def serialize_voice_guidance_setting(volume: int) -> bytes:
    return bytes((CommandType.VOICEGUIDANCE_PARAM_SET, 0x20, _u8(volume), 0x00))


def serialize_volume_setting(volume: int) -> bytes:
    return bytes((CommandType.PLAYBACK_STATUS_SET, 0x20, _u8(volume)))


def serialize_multipoint_switch(mac: str | bytes) -> bytes:
    """Switch the active multipoint device to ``mac`` (``XX:XX:XX:XX:XX:XX``)."""
    raw = mac.encode("ascii") if isinstance(mac, str) else bytes(mac)
    if len(raw) < MAC_ADDR_STR_SIZE:
        raise ValueError(f"MAC string too short: {raw!r}")
    return bytes((CommandType.MULTIPOINT_DEVICE_SET, 0x01)) + raw[:MAC_ADDR_STR_SIZE]


def serialize_play_control(control: PlaybackControl) -> bytes:
    return bytes((CommandType.PLAYBACK_STATUS_CONTROL_SET, 0x01, 0x00, _u8(control)))


def serialize_power_off() -> bytes:
    return bytes((CommandType.POWER_OFF, 0x03, 0x01))


def serialize_mp_toggle(enabled: bool) -> bytes:
    # The device expects 1 to turn off and 0 to turn on.
    return bytes((CommandType.MULTIPOINT_ETC_ENABLE_SET, 0xD2, 0x00, int(not enabled)))


def serialize_mp_toggle2(enabled: bool) -> bytes:
    return bytes((CommandType.MULTIPOINT_ENABLE_SET_2, 0x00, 0x07, 0x01))


def serialize_speak_to_chat_config(sensitivity: int, timeout: int) -> bytes:
    return bytes((CommandType.SPEAK_TO_CHAT_SET, 0x0C, _u8(sensitivity), _u8(timeout)))


def serialize_speak_to_chat_enabled(enabled: bool) -> bytes:
    return bytes(
        (CommandType.AUTOMATIC_POWER_OFF_BUTTON_MODE_SET, 0x0C, int(not enabled), 0x01)
    )


def serialize_equalizer_setting(bass: int, bands: Sequence[int]) -> bytes:
    """Encode bass and five band levels (each -10..10, sent with +10 offset)."""
    if len(bands) < 5:
        raise ValueError(f"Expected 5 equalizer bands, got {len(bands)}")
    levels = [bass, *bands[:5]]
    return bytes((CommandType.EQUALIZER_SET, 0x00, 0xA0, 0x06)) + bytes(
        _u8(level + 10) for level in levels
    )


def serialize_touch_sensor_assignment(
    func_l: TouchSensorFunction, func_r: TouchSensorFunction
) -> bytes:
    return bytes(
        (CommandType.AUTOMATIC_POWER_OFF_BUTTON_MODE_SET, 0x03, 0x02, _u8(func_l), _u8(func_r))
    )


def serialize_on_call_voice_capture_setting(enabled: bool) -> bytes:
    return bytes((CommandType.MULTIPOINT_ETC_ENABLE_SET, 0xD1, 0x00, int(not enabled)))


class CommandMessage:
    """A framed message.

    Messages built with :meth:`pack` hold the escaped wire bytes; messages
    built with :meth:`from_escaped` hold the unescaped frame.
    """

    __slots__ = ("message_bytes",)

    def __init__(self, message_bytes: bytes = b"") -> None:
        self.message_bytes = bytes(message_bytes)

    @classmethod
    def pack(cls, data_type: int, payload: bytes, seq_number: int) -> "CommandMessage":
        return cls(package_data_for_bt(payload, data_type, seq_number))

    @classmethod
    def from_escaped(cls, raw: bytes) -> "CommandMessage":
        msg = cls(unescape_specials(raw))
        if not msg.verify():
            raise ValueError("Invalid checksum!")
        return msg

    @property
    def data_type(self) -> DataType:
        return DataType(_signed(self.message_bytes[1]))

    @property
    def seq_number(self) -> int:
        return self.message_bytes[2]

    @property
    def size(self) -> int:
        return bytes_to_int_be(self.message_bytes[3:7])

    @property
    def checksum(self) -> int:
        return self.message_bytes[7 + self.size]

    @property
    def payload(self) -> bytes:
        return self.message_bytes[7 : 7 + self.size]

    def calc_checksum(self) -> int:
        return sum_checksum(self.message_bytes[1:-2])

    def verify(self) -> bool:
        if len(self.message_bytes) < 7:
            return False
        size = self.size
        if size < 0 or 7 + size >= len(self.message_bytes):
            return False
        return self.checksum == self.calc_checksum()

    def __getitem__(self, index):
        """Payload byte as a signed value, or a slice of the payload as bytes."""
        if isinstance(index, slice):
            return self.payload[index]
        return _signed(self.payload[index])

    def __iter__(self) -> Iterator[int]:
        return (_signed(b) for b in self.payload)

    def __len__(self) -> int:
        return len(self.payload)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandMessage):
            return NotImplemented
        return self.message_bytes == other.message_bytes

    def __repr__(self) -> str:
        return f"CommandMessage({self.message_bytes.hex(' ')})"