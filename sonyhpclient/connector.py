"""The Bluetooth transport interface and device description."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

NO_BLUETOOTH_DEVICES_ERROR = "No Bluetooth radios were found - is your adapter connected?"


@dataclass(frozen=True)
class BluetoothDevice:
    """A Bluetooth device, identified by its MAC address."""

    name: str = ""
    mac: str = ""


class BluetoothConnector(ABC):
    """A byte-stream connection to a Bluetooth device.

    Implementations raise :class:`~sonyhpclient.exceptions.RecoverableException`
    for errors that can be recovered from. Only :meth:`is_connected` has to be
    thread safe; ``send``, ``recv``, ``connect`` and ``get_connected_devices``
    may block, ``disconnect`` should not.
    """

    @abstractmethod
    def send(self, data: bytes) -> int:
        """Send ``data`` and return the number of bytes sent."""

    @abstractmethod
    def recv(self, length: int) -> bytes:
        """Receive up to ``length`` bytes; an empty result means the link closed."""

    @abstractmethod
    def connect(self, address: str) -> None:
        """Connect to the device with the given MAC address."""

    @abstractmethod
    def disconnect(self) -> None:
        """Close the connection."""

    @abstractmethod
    def is_connected(self) -> bool:
        """Whether the connection is open."""

    @abstractmethod
    def get_connected_devices(self) -> list[BluetoothDevice]:
        """List the devices currently connected to this host."""

    def __enter__(self) -> "BluetoothConnector":
        return self

    def __exit__(self, *exc_info) -> None:
        if self.is_connected():
            self.disconnect()