import json

import pytest

from redfishkit.common.errors import DecodeError, RedfishError, TransportError
from redfishkit.common.fetch import get_object, resolve
from redfishkit.common.links import Link
from redfishkit.redfish.chassis import Chassis, Facility
from redfishkit.redfish.coolingunit import CoolingUnit, get_cooling_unit
from redfishkit.redfish.thermal import CoolantConnector, LeakDetection

from conftest import member


def test_resolve_empty_link_is_none(client):
    assert resolve(client, Link(), Chassis) is None
    assert client.requests == []


def test_resolve_fetches_and_attaches_client(client):
    client.documents['/redfish/v1/Chassis/1'] = member('/redfish/v1/Chassis/1', AssetTag='X')

    chassis = resolve(client, Link('/redfish/v1/Chassis/1'), Chassis)

    assert chassis.asset_tag == 'X'
    assert chassis.client is client
    assert client.gets == ['/redfish/v1/Chassis/1']


def test_resolve_is_not_cached(client):
    client.documents['/redfish/v1/Chassis/1'] = member('/redfish/v1/Chassis/1', AssetTag='X')
    link = Link('/redfish/v1/Chassis/1')

    resolve(client, link, Chassis)
    client.documents['/redfish/v1/Chassis/1'] = member('/redfish/v1/Chassis/1', AssetTag='Y')
    second = resolve(client, link, Chassis)

    assert second.asset_tag == 'Y'
    assert client.gets == ['/redfish/v1/Chassis/1', '/redfish/v1/Chassis/1']


def test_get_object_falls_back_to_fetched_uri(client):
    client.documents['/redfish/v1/Chassis/1'] = {'Id': '1'}

    chassis = get_object(client, '/redfish/v1/Chassis/1', Chassis)

    assert chassis.odata_id == '/redfish/v1/Chassis/1'


def test_transport_errors_propagate(client):
    with pytest.raises(TransportError) as e:
        resolve(client, Link('/redfish/v1/Chassis/404'), Chassis)
    assert e.value.status_code == 404


def test_decode_errors_propagate(client):
    client.documents['/redfish/v1/Chassis/1'] = b'{"Name": "no id"}'

    with pytest.raises(DecodeError):
        resolve(client, Link('/redfish/v1/Chassis/1'), Chassis)


def test_chassis_accessor_issues_one_get(client):
    client.documents['/redfish/v1/Chassis/1'] = member('/redfish/v1/Chassis/1')
    unit = CoolingUnit.from_json(
        '{"Id":"1","AssetTag":"A1","Links":{"Chassis":[{"@odata.id":"/redfish/v1/Chassis/1"}],'
        '"Chassis@odata.count":1}}',
        client=client,
    )

    chassis = unit.chassis()

    assert [c.odata_id for c in chassis] == ['/redfish/v1/Chassis/1']
    assert client.gets == ['/redfish/v1/Chassis/1']


def test_single_link_accessors(client, cooling_unit_document):
    client.documents['/redfish/v1/ThermalEquipment/CDUs/1'] = cooling_unit_document
    client.documents['/redfish/v1/ThermalEquipment/CDUs/1/LeakDetection'] = member(
        '/redfish/v1/ThermalEquipment/CDUs/1/LeakDetection',
        LeakDetectorGroups=[{'GroupName': 'Floor', 'Status': {'Health': 'OK'}}],
    )

    unit = get_cooling_unit(client, '/redfish/v1/ThermalEquipment/CDUs/1')
    leak_detection = unit.leak_detection()

    assert isinstance(leak_detection, LeakDetection)
    assert leak_detection.leak_detector_groups[0].group_name == 'Floor'
    assert unit.facility() is None
    assert unit.assembly() is None
    assert unit.environment_metrics() is None
    assert client.gets == [
        '/redfish/v1/ThermalEquipment/CDUs/1',
        '/redfish/v1/ThermalEquipment/CDUs/1/LeakDetection',
    ]


def test_facility_link(client):
    client.documents['/redfish/v1/Facilities/Room1'] = member('/redfish/v1/Facilities/Room1', FacilityType='Room')
    unit = CoolingUnit.from_json(json.dumps({
        'Id': '1',
        'Links': {'Facility': {'@odata.id': '/redfish/v1/Facilities/Room1'}},
    }), client=client)

    facility = unit.facility()

    assert isinstance(facility, Facility)
    assert facility.facility_type == 'Room'


def test_detached_entity_cannot_follow_links():
    unit = CoolingUnit.from_json('{"Id": "1", "Links": {"Facility": {"@odata.id": "/f"}}}')

    with pytest.raises(RedfishError):
        unit.facility()


def test_detached_entity_with_unset_links():
    unit = CoolingUnit.from_json('{"Id": "1"}')

    assert unit.facility() is None
    assert unit.pumps() == []
    assert unit.chassis() == []


def test_coolant_connector_redundancy(client):
    connectors = '/redfish/v1/ThermalEquipment/CDUs/1/PrimaryCoolantConnectors'
    for name in ('A', 'B'):
        client.documents[f'{connectors}/{name}'] = member(f'{connectors}/{name}')
    unit = CoolingUnit.from_json(json.dumps({
        'Id': '1',
        'CoolantConnectorRedundancy': [{'@odata.id': f'{connectors}/A'}, {'@odata.id': f'{connectors}/B'}],
    }), client=client)

    redundant = unit.coolant_connector_redundancy()

    assert all(isinstance(c, CoolantConnector) for c in redundant)
    assert sorted(c.id for c in redundant) == ['A', 'B']
