"""Domain records produced by device and platform facades.

Each record is a plain dataclass holding the fields its converter projects
onto the wire. Nullable fields default to None so facades can build records
from partially populated platform objects.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class Address:
    """Geocoded street address."""

    admin_area: str | None = None
    country_code: str | None = None
    country_name: str | None = None
    feature_name: str | None = None
    phone: str | None = None
    locality: str | None = None
    postal_code: str | None = None
    sub_admin_area: str | None = None
    thoroughfare: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class Location:
    """Positional fix. time is milliseconds since the epoch."""

    latitude: float
    longitude: float
    altitude: float = 0.0
    time: int = 0
    accuracy: float = 0.0
    speed: float = 0.0
    provider: str | None = None
    bearing: float = 0.0


class Bundle:
    """String-keyed container of extras attached to intents and events."""

    def __init__(self, values: dict[str, Any] | None = None, **kwargs: Any) -> None:
        self._values: dict[str, Any] = {**(values or {}), **kwargs}

    def keys(self) -> list[str]:
        return list(self._values)

    def get(self, key: str) -> Any:
        return self._values.get(key)

    def put(self, key: str, value: Any) -> None:
        self._values[key] = value

    def clear(self) -> None:
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Bundle({self._values!r})"


@dataclass(frozen=True)
class ComponentName:
    """Package and class that an intent is addressed to."""

    package_name: str
    class_name: str


@dataclass(frozen=True)
class Intent:
    """Broadcast or activity intent."""

    action: str | None = None
    data: str | None = None
    type: str | None = None
    extras: Bundle | None = None
    categories: frozenset[str] | None = None
    component: ComponentName | None = None
    flags: int = 0


@dataclass(frozen=True)
class Event:
    """Event posted to the RPC event queue. time is creation time in ms."""

    name: str
    data: Any = None
    time: int = 0


@dataclass(frozen=True)
class WifiScanResult:
    """Access point found by a Wi-Fi scan."""

    bssid: str | None = None
    ssid: str | None = None
    frequency: int = 0
    level: int = 0
    capabilities: str | None = None
    timestamp: int = 0


@dataclass(frozen=True)
class BluetoothDevice:
    """Remote Bluetooth device identity.

    bond_state and device_type carry the platform's integer codes.
    """

    address: str
    bond_state: int = 10
    name: str | None = None
    device_type: int = 0
    alias: str | None = None


@dataclass(frozen=True)
class BleScanResult:
    """Advertisement seen by a Bluetooth LE scan."""

    device: BluetoothDevice | None
    rssi: int = 0
    timestamp_nanos: int = 0
    scan_record: bytes | None = None


@dataclass(frozen=True)
class AdvertiseSettings:
    """Bluetooth LE advertising parameters."""

    mode: int = 0
    tx_power_level: int = 2
    connectable: bool = True


@dataclass(eq=False)
class GattDescriptor:
    """GATT descriptor. The owning characteristic is held weakly."""

    uuid: UUID
    permissions: int = 0
    instance_id: int = 0
    value: bytes | None = None
    _characteristic: weakref.ref[GattCharacteristic] | None = field(
        default=None,
        init=False,
        repr=False,
    )

    @property
    def characteristic(self) -> GattCharacteristic | None:
        if self._characteristic is None:
            return None
        return self._characteristic()


@dataclass(eq=False)
class GattCharacteristic:
    """GATT characteristic owning its descriptors."""

    uuid: UUID
    properties: int = 0
    permissions: int = 0
    instance_id: int = 0
    write_type: int = 2
    value: bytes | None = None
    descriptors: list[GattDescriptor] = field(default_factory=list)

    def __post_init__(self) -> None:
        for descriptor in self.descriptors:
            descriptor._characteristic = weakref.ref(self)

    def add_descriptor(self, descriptor: GattDescriptor) -> None:
        """Attach descriptor and point its back reference at this characteristic."""
        descriptor._characteristic = weakref.ref(self)
        self.descriptors.append(descriptor)


@dataclass(eq=False)
class GattService:
    """GATT service with its characteristics and included services."""

    uuid: UUID
    service_type: int = 0
    instance_id: int = 0
    characteristics: list[GattCharacteristic] = field(default_factory=list)
    included_services: list[GattService] = field(default_factory=list)


@dataclass(frozen=True)
class CellLocation:
    """Serving cell location of unknown radio technology."""


@dataclass(frozen=True)
class GsmCellLocation(CellLocation):
    """GSM serving cell: location area code and cell id, -1 when unknown."""

    lac: int = -1
    cid: int = -1


class SupplicantState(Enum):
    """Wi-Fi supplicant link negotiation states."""

    DISCONNECTED = 0
    INTERFACE_DISABLED = 1
    INACTIVE = 2
    SCANNING = 3
    AUTHENTICATING = 4
    ASSOCIATING = 5
    ASSOCIATED = 6
    FOUR_WAY_HANDSHAKE = 7
    GROUP_HANDSHAKE = 8
    COMPLETED = 9
    DORMANT = 10
    UNINITIALIZED = 11
    INVALID = 12


@dataclass(frozen=True)
class WifiInfo:
    """State of the current Wi-Fi link."""

    hidden_ssid: bool = False
    ip_address: int = 0
    link_speed: int = -1
    network_id: int = -1
    rssi: int = -127
    bssid: str | None = None
    mac_address: str | None = None
    ssid: str | None = None
    supplicant_state: SupplicantState | None = None


@dataclass(frozen=True)
class NeighboringCellInfo:
    """Neighboring cell seen by the radio."""

    cid: int = -1
    rssi: int = 99


@dataclass(frozen=True)
class SocketAddress:
    """Host and port pair."""

    host: str
    port: int


@dataclass(frozen=True)
class Point:
    """Integer 2D point."""

    x: int
    y: int


@dataclass(frozen=True)
class SmsMessage:
    """Received short message."""

    originating_address: str | None = None
    message_body: str | None = None


@dataclass(frozen=True)
class PhoneAccountHandle:
    """Handle identifying a telephony account."""

    id: str | None = None


@dataclass(frozen=True)
class MediaSessionInfo:
    """Owner of an active media session."""

    package_name: str | None = None
    pid: int = 0
    id: str | None = None


@dataclass(frozen=True)
class DisplayMetrics:
    """Display size in pixels."""

    width_pixels: int = 0
    height_pixels: int = 0
    noncompat_width_pixels: int = 0
    noncompat_height_pixels: int = 0
