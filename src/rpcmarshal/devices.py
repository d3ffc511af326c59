"""Cache of Bluetooth devices seen during discovery.

A DeviceCache lives for one discovery run: start_discovery() empties it,
facades add() devices as they are found, and finish_discovery() closes the
run. Callers pass the cache to whatever needs it instead of sharing a
module-level map.
"""

from __future__ import annotations

import threading

from rpcmarshal.errors import DeviceNotFoundError
from rpcmarshal.log import get_logger
from rpcmarshal.records import BluetoothDevice

logger = get_logger(__name__)


def device_match(device: BluetoothDevice, device_id: str) -> bool:
    """Return True if device_id is the device's alias or address."""
    return device_id in (device.alias, device.address)


class DeviceCache:
    """Devices found during discovery, keyed by address and by alias."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._devices: dict[str, BluetoothDevice] = {}
        self._discovering = False

    @property
    def discovering(self) -> bool:
        return self._discovering

    def start_discovery(self) -> None:
        """Forget previous results and begin a new discovery run."""
        with self._lock:
            self._devices.clear()
            self._discovering = True
        logger.info("devices.discovery_started")

    def finish_discovery(self) -> None:
        with self._lock:
            self._discovering = False
            count = len(self._unique())
        logger.info("devices.discovery_finished", count=count)

    def add(self, device: BluetoothDevice) -> None:
        """Cache a found device. The first sighting of an address wins."""
        with self._lock:
            if device.address in self._devices:
                return
            if device.alias is not None:
                self._devices[device.alias] = device
            self._devices[device.address] = device

    def get(self, device_id: str) -> BluetoothDevice:
        """Look up a device by alias or address.

        Raises:
            DeviceNotFoundError: If no cached device matches device_id

        """
        with self._lock:
            device = self._devices.get(device_id)
        if device is None:
            raise DeviceNotFoundError(device_id)
        return device

    def devices(self) -> list[BluetoothDevice]:
        """Unique cached devices in the order they were found."""
        with self._lock:
            return self._unique()

    def clear(self) -> None:
        with self._lock:
            self._devices.clear()

    def __contains__(self, device_id: object) -> bool:
        with self._lock:
            return device_id in self._devices

    def __len__(self) -> int:
        with self._lock:
            return len(self._unique())

    def _unique(self) -> list[BluetoothDevice]:
        seen: set[int] = set()
        result: list[BluetoothDevice] = []
        for device in self._devices.values():
            if id(device) not in seen:
                seen.add(id(device))
                result.append(device)
        return result
