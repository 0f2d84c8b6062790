# sonyhpclient

Building blocks for talking to Sony Bluetooth headphones over their serial
(RFCOMM) control channel. The package builds and parses the framed,
checksummed messages the headphones speak, encodes the payloads for each
setting, provides holders for device-reported versus user-desired state, and
keeps application settings in a TOML file.

This project is not affiliated with Sony. Use it at your own risk.

## Modules

- `sonyhpclient.constants` – protocol constants (`START_MARKER`,
  `END_MARKER`, `MAX_BLUETOOTH_MESSAGE_SIZE`, `SERVICE_UUID`,
  `SERVICE_UUID_BYTES`, `APP_CONFIG_NAME`) and the enumerations `DataType`,
  `CommandType`, `NcAsmEffect`, `NcAsmSettingType`, `AsmId`,
  `PlaybackControl`, `PlaybackControlResponse` and `TouchSensorFunction`.
  `DataType` and `CommandType` map unrecognised values to `UNKNOWN`.
- `sonyhpclient.bytemagic` – `byte_order_swap`, `bytes_to_int_be`,
  `int_to_bytes_be`, `mac_string_to_long` and `mac_bytes_to_string`.
- `sonyhpclient.serializer` – message framing (`package_data_for_bt`,
  `escape_specials`, `unescape_specials`, `sum_checksum`), the
  `CommandMessage` type and one `serialize_*` function per setting
  (noise cancelling / ambient sound, voice guidance, volume, multipoint,
  playback control, power off, speak-to-chat, equalizer, touch sensors,
  voice capture during calls).
- `sonyhpclient.futures` – `SingleInstanceFuture`, which runs one
  background action at a time and holds its result until it is taken.
- `sonyhpclient.connector` – the `BluetoothDevice` dataclass and the
  abstract `BluetoothConnector` transport.
- `sonyhpclient.properties` – `Property`, `ReadonlyProperty`,
  `EqualizerConfig`, `Playback`, `EventType` and `HeadphonesEvent`.
- `sonyhpclient.config` – `AppConfig`, settings saved as TOML, including
  shell commands bound to headphone events.

## Building and reading messages

```python
from sonyhpclient.constants import AsmId, DataType, NcAsmEffect, NcAsmSettingType
from sonyhpclient.serializer import CommandMessage, serialize_nc_and_asm_setting

payload = serialize_nc_and_asm_setting(
    NcAsmEffect.ON, NcAsmSettingType.AMBIENT_SOUND, AsmId.VOICE, 10
)
message = CommandMessage.pack(DataType.DATA_MDR, payload, 0)
wire_bytes = message.message_bytes        # escaped, with start and end markers

received = CommandMessage.from_escaped(wire_bytes)
received.data_type    # DataType.DATA_MDR
received.payload      # the unescaped payload bytes
received[0]           # first payload byte, as a signed value
```

`package_data_for_bt` raises `ValueError` when a framed message would exceed
`MAX_BLUETOOTH_MESSAGE_SIZE`; `unescape_specials` and
`CommandMessage.from_escaped` raise `ValueError` on a malformed escape or a
checksum that does not match.

## Tracking state

A `Property` holds the value the device reports (`current`) and the value
the user wants (`desired`):

```python
from sonyhpclient.properties import Property

volume = Property(current=10)
volume.desired = 12
volume.is_fulfilled()   # False: a command needs to be sent
volume.fulfill()        # the device now holds 12
volume.overwrite(8)     # the device reported 8; both values follow
```

## Background actions

```python
from sonyhpclient.futures import SingleInstanceFuture

future = SingleInstanceFuture("devices")
future.set_from_async(lambda: ["a", "b"])
future.wait()
future.ready()   # True
future.get()     # ["a", "b"]; the future is free for the next action
```

Starting a new action while the previous result has not been taken raises
`RuntimeError`.

## Settings

```python
from sonyhpclient.config import AppConfig

config = AppConfig(path="settings.toml")
config.load_settings()          # a missing file is only logged
config.auto_connect_device_mac = "00:11:22:33:44:55"
config.headphone_interaction_shell_commands.append(("key-tap", "echo tapped"))
config.save_settings()

config.find_shell_command("key-tap")   # "echo tapped"
config.run_shell_command("key-tap")    # runs it through the shell
```

## What the package does not do

- It opens no Bluetooth connection. `BluetoothConnector` is only an
  interface: implement `connect`, `send`, `recv`, `disconnect`,
  `is_connected` and `get_connected_devices` for your platform.
- It has no object that holds a live session with the headphones: nothing
  sends commands over a connector, waits for acknowledgements, receives and
  decodes incoming messages into state, or pushes changed settings. Those
  steps are left to the caller, using the serialiser and property types.
- It has no user interface and no command to run.