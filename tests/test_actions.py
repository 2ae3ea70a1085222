import json
import logging

import pytest

from redfishkit.common.entity import ActionDescriptor
from redfishkit.common.errors import UnsupportedActionError
from redfishkit.common.wire import ActionWire
from redfishkit.redfish.coolingunit import CoolingUnit, CoolingUnitMode
from redfishkit.redfish.securebootdatabase import SecureBootDatabase, SecureBootDatabaseResetKeysType

SET_MODE = '/redfish/v1/ThermalEquipment/CDUs/1/Actions/CoolingUnit.SetMode'


def test_set_mode_posts_to_target(client, cooling_unit_document):
    unit = CoolingUnit.from_json(json.dumps(cooling_unit_document), client=client)

    unit.set_mode(CoolingUnitMode.DISABLED)

    assert client.writes == [('POST', SET_MODE, {'Mode': 'Disabled'})]


def test_set_mode_accepts_plain_strings(client, cooling_unit_document):
    unit = CoolingUnit.from_json(json.dumps(cooling_unit_document), client=client)

    unit.set_mode('Enabled')

    assert client.writes == [('POST', SET_MODE, {'Mode': 'Enabled'})]


def test_missing_action_is_unsupported(client):
    unit = CoolingUnit.from_json('{"Id": "1"}', client=client)

    with pytest.raises(UnsupportedActionError) as e:
        unit.set_mode(CoolingUnitMode.ENABLED)

    assert e.value.action == 'CoolingUnit.SetMode'
    assert client.requests == []


def test_empty_target_is_unsupported(client):
    unit = CoolingUnit.from_json(json.dumps({
        'Id': '1',
        'Actions': {'#CoolingUnit.SetMode': {'target': ''}},
    }), client=client)

    with pytest.raises(UnsupportedActionError):
        unit.set_mode('Enabled')
    assert client.requests == []


def test_value_outside_allowable_values_is_sent_with_a_warning(client, caplog):
    unit = CoolingUnit.from_json(json.dumps({
        'Id': '1',
        'Actions': {'#CoolingUnit.SetMode': {
            'target': SET_MODE,
            'Mode@Redfish.AllowableValues': ['Enabled'],
        }},
    }), client=client)

    with caplog.at_level(logging.WARNING, logger='redfishkit.common.entity'):
        unit.set_mode(CoolingUnitMode.DISABLED)

    assert client.writes == [('POST', SET_MODE, {'Mode': 'Disabled'})]
    assert 'not in the allowable values' in caplog.text


def test_reset_keys(client):
    base = '/redfish/v1/Systems/1/SecureBoot/SecureBootDatabases/db'
    database = SecureBootDatabase.from_json(json.dumps({
        '@odata.id': base,
        'Id': 'db',
        'Actions': {'#SecureBootDatabase.ResetKeys': {
            'target': base + '/Actions/SecureBootDatabase.ResetKeys',
            'ResetKeysType@Redfish.AllowableValues': ['ResetAllKeysToDefault', 'DeleteAllKeys'],
        }},
    }), client=client)

    database.reset_keys(SecureBootDatabaseResetKeysType.DELETE_ALL_KEYS)

    assert database.allowed_reset_keys_types == ('ResetAllKeysToDefault', 'DeleteAllKeys')
    assert client.writes == [
        ('POST', base + '/Actions/SecureBootDatabase.ResetKeys', {'ResetKeysType': 'DeleteAllKeys'}),
    ]


def test_action_descriptor_from_wire():
    wire = ActionWire.model_validate({
        'target': '/a',
        'title': 'Set mode',
        'Mode@Redfish.AllowableValues': ['Enabled', 'Disabled'],
        'Other': 'ignored',
    })

    action = ActionDescriptor.from_wire('CoolingUnit.SetMode', wire)

    assert action.supported
    assert action.allowable_values == {'Mode': ('Enabled', 'Disabled')}
    assert action.allows('Mode', CoolingUnitMode.ENABLED)
    assert not action.allows('Mode', 'Paused')
    assert action.allows('Speed', 'anything')
    assert not ActionDescriptor.from_wire('X', None).supported
