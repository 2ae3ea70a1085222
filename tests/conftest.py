import json
import threading
from unittest.mock import Mock

import pytest

from redfishkit.common.errors import TransportError


class FakeClient:
    """
    In-memory stand-in for RedfishAPI.

    Serves canned documents by URI and records every request. A document
    that is an exception instance is raised instead of served.
    """

    def __init__(self, documents=None, max_workers=None):
        self.documents = dict(documents or {})
        self.max_workers = max_workers
        self.requests = []
        self._lock = threading.Lock()

    def _record(self, *request):
        with self._lock:
            self.requests.append(request)

    def get(self, endpoint, params=None):
        self._record('GET', endpoint)
        document = self.documents.get(endpoint)
        if document is None:
            raise TransportError(f'GET {endpoint} returned 404: not found', status_code=404)
        if isinstance(document, Exception):
            raise document
        if not isinstance(document, (bytes, str)):
            document = json.dumps(document)
        response = Mock()
        response.content = document.encode('utf-8') if isinstance(document, str) else document
        return response

    def post(self, endpoint, data=None):
        self._record('POST', endpoint, data)
        return Mock(status_code=204)

    def patch(self, endpoint, data=None, headers=None):
        self._record('PATCH', endpoint, data, headers)
        return Mock(status_code=200)

    @property
    def gets(self):
        return [request[1] for request in self.requests if request[0] == 'GET']

    @property
    def writes(self):
        return [request for request in self.requests if request[0] in ('PATCH', 'POST')]


@pytest.fixture()
def client():
    return FakeClient()


@pytest.fixture()
def cooling_unit_document():
    return {
        '@odata.id': '/redfish/v1/ThermalEquipment/CDUs/1',
        '@odata.type': '#CoolingUnit.v1_1_0.CoolingUnit',
        '@odata.etag': 'W/"abc"',
        'Id': '1',
        'Name': 'Rack CDU',
        'AssetTag': 'A1',
        'UserLabel': 'east',
        'EquipmentType': 'CDU',
        'CoolingCapacityWatts': 40000,
        'Manufacturer': 'Contoso',
        'Status': {'State': 'Enabled', 'Health': 'OK'},
        'Coolant': {'CoolantType': 'Water', 'DensityKgPerCubicMeter': 1000},
        'PumpRedundancy': [{'RedundancyType': 'NPlusM', 'MinNeededInGroup': 1}],
        'Pumps': {'@odata.id': '/redfish/v1/ThermalEquipment/CDUs/1/Pumps'},
        'Filters': {'@odata.id': '/redfish/v1/ThermalEquipment/CDUs/1/Filters'},
        'LeakDetection': {'@odata.id': '/redfish/v1/ThermalEquipment/CDUs/1/LeakDetection'},
        'Links': {
            'Chassis': [{'@odata.id': '/redfish/v1/Chassis/1'}],
            'Chassis@odata.count': 1,
            'ManagedBy': [{'@odata.id': '/redfish/v1/Managers/BMC'}],
            'ManagedBy@odata.count': 1,
        },
        'Actions': {
            '#CoolingUnit.SetMode': {
                'target': '/redfish/v1/ThermalEquipment/CDUs/1/Actions/CoolingUnit.SetMode',
                'Mode@Redfish.AllowableValues': ['Enabled', 'Disabled'],
            },
        },
    }


def member(uri, **properties):
    """A minimal resource document for uri."""
    document = {'@odata.id': uri, 'Id': uri.rstrip('/').split('/')[-1]}
    document.update(properties)
    return document


def page(members, next_link=None):
    document = {
        'Members': [{'@odata.id': uri} for uri in members],
        'Members@odata.count': len(members),
    }
    if next_link:
        document['Members@odata.nextLink'] = next_link
    return document
