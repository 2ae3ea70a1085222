import json

import pytest

from redfishkit.common.errors import TransportError
from redfishkit.redfish.chassis import Chassis
from redfishkit.redfish.coolingunit import CoolingEquipmentType, CoolingUnit
from redfishkit.redfish.thermal import Filter

UNIT = '/redfish/v1/ThermalEquipment/CDUs/1'


@pytest.fixture()
def unit(client, cooling_unit_document):
    return CoolingUnit.from_json(json.dumps(cooling_unit_document), client=client)


def test_changed_field_is_patched(client, unit):
    unit.asset_tag = 'A2'

    unit.update()

    assert client.writes == [('PATCH', UNIT, {'AssetTag': 'A2'}, {'If-Match': 'W/"abc"'})]


def test_update_without_etag_sends_no_if_match(client):
    unit = CoolingUnit.from_json('{"@odata.id": "/cu/1", "Id": "1", "AssetTag": "A1"}', client=client)
    unit.asset_tag = 'A2'

    unit.update()

    assert client.writes == [('PATCH', '/cu/1', {'AssetTag': 'A2'}, None)]


def test_no_change_no_request(client, unit):
    unit.update()

    assert client.requests == []


def test_update_twice_writes_once(client, unit):
    unit.user_label = 'west'

    unit.update()
    unit.update()

    assert len(client.writes) == 1
    assert client.writes[0][2] == {'UserLabel': 'west'}


def test_reverting_after_update_is_a_change(client, unit):
    unit.user_label = 'west'
    unit.update()
    unit.user_label = 'east'
    unit.update()

    assert [write[2] for write in client.writes] == [{'UserLabel': 'west'}, {'UserLabel': 'east'}]


def test_raw_data_is_untouched_by_update(unit, cooling_unit_document):
    raw = unit.raw_data
    unit.asset_tag = 'A2'

    unit.update()

    assert unit.raw_data is raw
    assert json.loads(unit.raw_data)['AssetTag'] == 'A1'


def test_non_whitelisted_fields_are_never_sent(client, unit):
    unit.manufacturer = 'Other'
    unit.equipment_type = CoolingEquipmentType.HEAT_EXCHANGER
    unit.cooling_capacity_watts = 1

    unit.update()

    assert client.writes == []


def test_only_changed_whitelisted_fields_are_sent(client, unit):
    unit.manufacturer = 'Other'
    unit.user_label = 'west'

    assert unit.patch_payload() == {'UserLabel': 'west'}


def test_absent_property_compares_against_default(client):
    chassis = Chassis.from_json('{"@odata.id": "/redfish/v1/Chassis/1", "Id": "1"}', client=client)

    chassis.update()
    chassis.asset_tag = 'NEW'
    chassis.update()

    assert client.writes == [('PATCH', '/redfish/v1/Chassis/1', {'AssetTag': 'NEW'}, None)]


def test_value_types_are_compared_as_json(client):
    document = {'@odata.id': '/f/1', 'Id': '1', 'ServiceHours': 10, 'LocationIndicatorActive': False}
    filt = Filter.from_json(json.dumps(document), client=client)

    filt.update()
    filt.service_hours = 10.0
    filt.update()
    filt.location_indicator_active = True
    filt.update()

    assert client.writes == [('PATCH', '/f/1', {'LocationIndicatorActive': True}, None)]


def test_etag_match_can_be_disabled(client, unit):
    unit.disable_etag_match = True
    unit.asset_tag = 'A2'

    unit.update()

    assert client.writes[0][3] is None


def test_failed_update_is_retried_next_time(client, unit, mocker):
    mocker.patch.object(client, 'patch', side_effect=TransportError('PATCH failed', status_code=412))
    unit.asset_tag = 'A2'

    with pytest.raises(TransportError):
        unit.update()

    assert unit.patch_payload() == {'AssetTag': 'A2'}


def test_update_without_uri_is_rejected(client):
    unit = CoolingUnit.from_json('{"Id": "1"}', client=client)
    unit.asset_tag = 'A2'

    with pytest.raises(ValueError):
        unit.update()
    assert client.requests == []
