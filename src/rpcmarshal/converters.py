"""Wire projections for the built-in domain records.

Every converter emits a fixed key set. A field that is None on the record
shows up as a None node rather than a missing key. Key names are part of the
wire contract with remote clients and must not change.
"""

from __future__ import annotations

from rpcmarshal.codecs import RecordCodecs, marshal, object_key
from rpcmarshal.nodes import Node
from rpcmarshal.records import (
    Address,
    AdvertiseSettings,
    BleScanResult,
    BluetoothDevice,
    Bundle,
    CellLocation,
    DisplayMetrics,
    Event,
    GattCharacteristic,
    GattDescriptor,
    GattService,
    GsmCellLocation,
    Intent,
    Location,
    MediaSessionInfo,
    NeighboringCellInfo,
    PhoneAccountHandle,
    Point,
    SmsMessage,
    SocketAddress,
    SupplicantState,
    WifiInfo,
    WifiScanResult,
)

# States outside this table serialize as None.
SUPPLICANT_STATE_TOKENS: dict[SupplicantState, str] = {
    SupplicantState.ASSOCIATED: "associated",
    SupplicantState.ASSOCIATING: "associating",
    SupplicantState.COMPLETED: "completed",
    SupplicantState.DISCONNECTED: "disconnected",
    SupplicantState.DORMANT: "dormant",
    SupplicantState.FOUR_WAY_HANDSHAKE: "four_way_handshake",
    SupplicantState.GROUP_HANDSHAKE: "group_handshake",
    SupplicantState.INACTIVE: "inactive",
    SupplicantState.INVALID: "invalid",
    SupplicantState.SCANNING: "scanning",
    SupplicantState.UNINITIALIZED: "uninitialized",
}


def address_to_wire(address: Address) -> dict[str, Node]:
    return {
        "admin_area": marshal(address.admin_area),
        "country_code": marshal(address.country_code),
        "country_name": marshal(address.country_name),
        "feature_name": marshal(address.feature_name),
        "phone": marshal(address.phone),
        "locality": marshal(address.locality),
        "postal_code": marshal(address.postal_code),
        "sub_admin_area": marshal(address.sub_admin_area),
        "thoroughfare": marshal(address.thoroughfare),
        "url": marshal(address.url),
    }


def location_to_wire(location: Location) -> dict[str, Node]:
    return {
        "altitude": marshal(location.altitude),
        "latitude": marshal(location.latitude),
        "longitude": marshal(location.longitude),
        "time": marshal(location.time),
        "accuracy": marshal(location.accuracy),
        "speed": marshal(location.speed),
        "provider": marshal(location.provider),
        "bearing": marshal(location.bearing),
    }


def bundle_to_wire(bundle: Bundle) -> dict[str, Node]:
    return {object_key(key, bundle): marshal(bundle.get(key)) for key in bundle.keys()}


def intent_to_wire(intent: Intent) -> dict[str, Node]:
    """Project an intent. Component keys are None when no component is set."""
    component = intent.component
    return {
        "data": marshal(intent.data),
        "type": marshal(intent.type),
        "extras": marshal(intent.extras),
        "categories": marshal(intent.categories),
        "action": marshal(intent.action),
        "packagename": marshal(component.package_name) if component is not None else None,
        "classname": marshal(component.class_name) if component is not None else None,
        "flags": marshal(intent.flags),
    }


def event_to_wire(event: Event) -> dict[str, Node]:
    return {
        "name": marshal(event.name),
        "data": marshal(event.data),
        "time": marshal(event.time),
    }


def wifi_scan_result_to_wire(scan: WifiScanResult) -> dict[str, Node]:
    return {
        "bssid": marshal(scan.bssid),
        "ssid": marshal(scan.ssid),
        "frequency": marshal(scan.frequency),
        "level": marshal(scan.level),
        "capabilities": marshal(scan.capabilities),
        "timestamp": marshal(scan.timestamp),
    }


def ble_scan_result_to_wire(scan: BleScanResult) -> dict[str, Node]:
    # timestampSeconds has always carried the raw nanosecond timestamp.
    return {
        "rssi": marshal(scan.rssi),
        "timestampSeconds": marshal(scan.timestamp_nanos),
        "scanRecord": marshal(scan.scan_record),
        "deviceInfo": marshal(scan.device),
    }


def advertise_settings_to_wire(settings: AdvertiseSettings) -> dict[str, Node]:
    return {
        "mode": marshal(settings.mode),
        "txPowerLevel": marshal(settings.tx_power_level),
        "isConnectable": marshal(settings.connectable),
    }


def gatt_service_to_wire(service: GattService) -> dict[str, Node]:
    return {
        "instanceId": marshal(service.instance_id),
        "type": marshal(service.service_type),
        "gattCharacteristicList": marshal(service.characteristics),
        "includedServices": marshal(service.included_services),
        "uuid": marshal(service.uuid),
    }


def gatt_characteristic_to_wire(characteristic: GattCharacteristic) -> dict[str, Node]:
    return {
        "instanceId": marshal(characteristic.instance_id),
        "permissions": marshal(characteristic.permissions),
        "properties": marshal(characteristic.properties),
        "writeType": marshal(characteristic.write_type),
        "descriptorsList": marshal(characteristic.descriptors),
        "uuid": marshal(characteristic.uuid),
        "value": marshal(characteristic.value),
    }


def gatt_descriptor_to_wire(descriptor: GattDescriptor) -> dict[str, Node]:
    """Project a descriptor.

    The owning characteristic is emitted as its UUID only, so walking a
    characteristic's descriptors never loops back into the characteristic.
    """
    owner = descriptor.characteristic
    return {
        "instanceId": marshal(descriptor.instance_id),
        "permissions": marshal(descriptor.permissions),
        "characteristic": marshal(owner.uuid) if owner is not None else None,
        "uuid": marshal(descriptor.uuid),
        "value": marshal(descriptor.value),
    }


def bluetooth_device_to_wire(device: BluetoothDevice) -> dict[str, Node]:
    return {
        "address": marshal(device.address),
        "state": marshal(device.bond_state),
        "name": marshal(device.name),
        "type": marshal(device.device_type),
    }


def cell_location_to_wire(location: CellLocation) -> dict[str, Node]:
    # Only GSM cells expose fields; other technologies project to {}.
    if isinstance(location, GsmCellLocation):
        return {"lac": marshal(location.lac), "cid": marshal(location.cid)}
    return {}


def supplicant_state_token(state: object) -> str | None:
    """Map a supplicant state to its wire token, or None if it has none."""
    if not isinstance(state, SupplicantState):
        return None
    return SUPPLICANT_STATE_TOKENS.get(state)


def wifi_info_to_wire(info: WifiInfo) -> dict[str, Node]:
    return {
        "hidden_ssid": marshal(info.hidden_ssid),
        "ip_address": marshal(info.ip_address),
        "link_speed": marshal(info.link_speed),
        "network_id": marshal(info.network_id),
        "rssi": marshal(info.rssi),
        "bssid": marshal(info.bssid),
        "mac_address": marshal(info.mac_address),
        "ssid": marshal(info.ssid),
        "supplicant_state": supplicant_state_token(info.supplicant_state),
    }


def neighboring_cell_info_to_wire(info: NeighboringCellInfo) -> dict[str, Node]:
    return {"cid": marshal(info.cid), "rssi": marshal(info.rssi)}


def socket_address_to_wire(address: SocketAddress) -> list[Node]:
    return [marshal(address.host), marshal(address.port)]


def point_to_wire(point: Point) -> dict[str, Node]:
    return {"x": marshal(point.x), "y": marshal(point.y)}


def sms_message_to_wire(message: SmsMessage) -> dict[str, Node]:
    return {
        "originatingAddress": marshal(message.originating_address),
        "messageBody": marshal(message.message_body),
    }


def phone_account_handle_to_wire(handle: PhoneAccountHandle) -> dict[str, Node]:
    return {"id": marshal(handle.id)}


def media_session_info_to_wire(info: MediaSessionInfo) -> dict[str, Node]:
    return {
        "PackageName": marshal(info.package_name),
        "Pid": marshal(info.pid),
        "Id": marshal(info.id),
    }


def display_metrics_to_wire(metrics: DisplayMetrics) -> dict[str, Node]:
    return {
        "widthPixels": marshal(metrics.width_pixels),
        "heightPixels": marshal(metrics.height_pixels),
        "noncompatHeightPixels": marshal(metrics.noncompat_height_pixels),
        "noncompatWidthPixels": marshal(metrics.noncompat_width_pixels),
    }


def register_builtin_records() -> None:
    """Register converters for the built-in record catalogue, in check order."""
    RecordCodecs.register(Address, address_to_wire)
    RecordCodecs.register(Location, location_to_wire)
    RecordCodecs.register(Bundle, bundle_to_wire)
    RecordCodecs.register(Intent, intent_to_wire)
    RecordCodecs.register(Event, event_to_wire)
    RecordCodecs.register(WifiScanResult, wifi_scan_result_to_wire)
    RecordCodecs.register(BleScanResult, ble_scan_result_to_wire)
    RecordCodecs.register(AdvertiseSettings, advertise_settings_to_wire)
    RecordCodecs.register(GattService, gatt_service_to_wire)
    RecordCodecs.register(GattCharacteristic, gatt_characteristic_to_wire)
    RecordCodecs.register(GattDescriptor, gatt_descriptor_to_wire)
    RecordCodecs.register(BluetoothDevice, bluetooth_device_to_wire)
    RecordCodecs.register(CellLocation, cell_location_to_wire)
    RecordCodecs.register(WifiInfo, wifi_info_to_wire)
    RecordCodecs.register(NeighboringCellInfo, neighboring_cell_info_to_wire)
    RecordCodecs.register(SocketAddress, socket_address_to_wire)
    RecordCodecs.register(Point, point_to_wire)
    RecordCodecs.register(SmsMessage, sms_message_to_wire)
    RecordCodecs.register(PhoneAccountHandle, phone_account_handle_to_wire)
    RecordCodecs.register(MediaSessionInfo, media_session_info_to_wire)
    RecordCodecs.register(DisplayMetrics, display_metrics_to_wire)


# Register the catalogue on module load
register_builtin_records()
