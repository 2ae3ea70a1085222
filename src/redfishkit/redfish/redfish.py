import logging
from typing import List, Optional

from pydantic import Field

from redfishkit.common.entity import Entity, EntityWire
from redfishkit.common.errors import CollectionError, DecodeError, TransportError
from redfishkit.common.fetch import collect_list, get_object
from redfishkit.common.links import Link
from redfishkit.common.wire import ODataLink
from redfishkit.redfish.coolingunit import (
    CoolingEquipmentType,
    CoolingUnit,
    get_cooling_unit,
    list_referenced_cooling_units,
)
from redfishkit.redfish.fishapi import RedfishAPI
from redfishkit.redfish.securebootdatabase import (
    SecureBootDatabase,
    get_secure_boot_database,
    list_referenced_secure_boot_databases,
)

SYSTEMS_ENDPOINT = '/redfish/v1/Systems'
THERMAL_EQUIPMENT_ENDPOINT = '/redfish/v1/ThermalEquipment'

LOG = logging.getLogger(__name__)


class ThermalEquipmentWire(EntityWire):
    cdus: Optional[ODataLink] = Field(None, alias='CDUs')
    heat_exchangers: Optional[ODataLink] = Field(None, alias='HeatExchangers')
    immersion_units: Optional[ODataLink] = Field(None, alias='ImmersionUnits')


class ThermalEquipment(Entity):
    """The service's cooling equipment: one collection per equipment type."""
    wire_model = ThermalEquipmentWire

    def collection_link(self, equipment_type: CoolingEquipmentType) -> Link:
        ref = {
            CoolingEquipmentType.CDU: self.cdus,
            CoolingEquipmentType.HEAT_EXCHANGER: self.heat_exchangers,
            CoolingEquipmentType.IMMERSION_UNIT: self.immersion_units,
        }[equipment_type]
        return Link.from_wire(ref)


class Redfish:
    """
    Entry point to a Redfish service.

    Wraps a RedfishAPI and finds the cooling units and Secure Boot
    databases the service exposes.
    """
    def __init__(self, ip: str, username: str, password: str, verify_ssl: bool = False,
                 max_workers: Optional[int] = None, timeout: int = 30):
        self.api = RedfishAPI(ip, username, password, verify_ssl=verify_ssl, timeout=timeout,
                              max_workers=max_workers)
        self.system_id = self.get_system_id()


    def get_system_id(self) -> Optional[str]:
        """Get the system ID from the Systems collection.

        Standalone cooling equipment often has no Systems collection; that
        gives None rather than an error.
        """
        try:
            for member in collect_list(self.api, SYSTEMS_ENDPOINT):
                # e.g., "/redfish/v1/Systems/System.Embedded.1" -> "System.Embedded.1"
                return member.rstrip('/').split('/')[-1]
        except (TransportError, DecodeError) as e:
            LOG.info('No computer system found: %s', e)
        return None


    def thermal_equipment(self) -> ThermalEquipment:
        return get_object(self.api, THERMAL_EQUIPMENT_ENDPOINT, ThermalEquipment)


    def cooling_units(self, equipment_type=None) -> List[CoolingUnit]:
        """
        List cooling units, optionally of a single equipment type.

        Raises:
            CollectionError: If some units could not be fetched; the others are in its results
        """
        if equipment_type is None:
            types = list(CoolingEquipmentType)
        else:
            types = [CoolingEquipmentType(getattr(equipment_type, 'value', equipment_type))]

        equipment = self.thermal_equipment()
        units = []
        failures = {}
        for kind in types:
            link = equipment.collection_link(kind)
            try:
                units.extend(list_referenced_cooling_units(self.api, link.uri))
            except CollectionError as e:
                units.extend(e.results)
                failures.update(e.failures)
        if failures:
            raise CollectionError(failures, units)
        return units


    def get_cooling_unit(self, uri: str) -> CoolingUnit:
        return get_cooling_unit(self.api, uri)


    def _secure_boot_databases_endpoint(self) -> str:
        if not self.system_id:
            raise ValueError('No computer system found on this service')
        return f'{SYSTEMS_ENDPOINT}/{self.system_id}/SecureBoot/SecureBootDatabases'


    def secure_boot_databases(self) -> List[SecureBootDatabase]:
        return list_referenced_secure_boot_databases(self.api, self._secure_boot_databases_endpoint())


    def get_secure_boot_database(self, database_id: str) -> SecureBootDatabase:
        return get_secure_boot_database(self.api, f'{self._secure_boot_databases_endpoint()}/{database_id}')
