from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from pydantic import Field

from redfishkit.common.entity import ActionDescriptor, Entity, EntityWire
from redfishkit.common.fetch import get_collection_objects, get_object, list_links, resolve
from redfishkit.common.links import Link, LinkCollection
from redfishkit.common.wire import ActionWire, Location, ODataLink, Status, WireModel
from redfishkit.redfish.chassis import Assembly, Chassis, Facility, Manager
from redfishkit.redfish.thermal import (
    CoolantConnector,
    EnvironmentMetrics,
    Filter,
    LeakDetection,
    Pump,
    Reservoir,
)


class CoolingEquipmentType(str, Enum):
    CDU = 'CDU'
    HEAT_EXCHANGER = 'HeatExchanger'
    IMMERSION_UNIT = 'ImmersionUnit'


class CoolingUnitMode(str, Enum):
    ENABLED = 'Enabled'
    DISABLED = 'Disabled'


class Coolant(WireModel):
    additive_name: Optional[str] = Field(None, alias='AdditiveName')
    additive_percent: Optional[float] = Field(None, alias='AdditivePercent')
    coolant_type: Optional[str] = Field(None, alias='CoolantType')
    density_kg_per_cubic_meter: Optional[float] = Field(None, alias='DensityKgPerCubicMeter')
    rated_service_hours: Optional[float] = Field(None, alias='RatedServiceHours')
    service_hours: Optional[float] = Field(None, alias='ServiceHours')
    specific_heatk_joules_per_kg_k: Optional[float] = Field(None, alias='SpecificHeatkJoulesPerKgK')


class RedundantGroup(WireModel):
    group_name: Optional[str] = Field(None, alias='GroupName')
    max_supported_in_group: Optional[int] = Field(None, alias='MaxSupportedInGroup')
    min_needed_in_group: Optional[int] = Field(None, alias='MinNeededInGroup')
    redundancy_group: List[ODataLink] = Field(default_factory=list, alias='RedundancyGroup')
    redundancy_type: Optional[str] = Field(None, alias='RedundancyType')
    status: Optional[Status] = Field(None, alias='Status')


class CoolingUnitLinksWire(WireModel):
    chassis: List[ODataLink] = Field(default_factory=list, alias='Chassis')
    chassis_count: int = Field(0, alias='Chassis@odata.count')
    facility: Optional[ODataLink] = Field(None, alias='Facility')
    managed_by: List[ODataLink] = Field(default_factory=list, alias='ManagedBy')
    managed_by_count: int = Field(0, alias='ManagedBy@odata.count')


class CoolingUnitActionsWire(WireModel):
    set_mode: Optional[ActionWire] = Field(None, alias='#CoolingUnit.SetMode')


class CoolingUnitWire(EntityWire):
    reference_fields: ClassVar[Tuple[str, ...]] = (
        'actions', 'links', 'assembly', 'coolant_connector_redundancy', 'environment_metrics',
        'filters', 'leak_detection',
        'primary_coolant_connectors', 'pumps', 'reservoirs', 'secondary_coolant_connectors',
    )

    asset_tag: Optional[str] = Field(None, alias='AssetTag')
    coolant: Optional[Coolant] = Field(None, alias='Coolant')
    cooling_capacity_watts: Optional[int] = Field(None, alias='CoolingCapacityWatts')
    equipment_type: Optional[CoolingEquipmentType] = Field(None, alias='EquipmentType')
    filter_redundancy: List[RedundantGroup] = Field(default_factory=list, alias='FilterRedundancy')
    firmware_version: Optional[str] = Field(None, alias='FirmwareVersion')
    location: Optional[Location] = Field(None, alias='Location')
    manufacturer: Optional[str] = Field(None, alias='Manufacturer')
    model: Optional[str] = Field(None, alias='Model')
    part_number: Optional[str] = Field(None, alias='PartNumber')
    production_date: Optional[str] = Field(None, alias='ProductionDate')
    pump_redundancy: List[RedundantGroup] = Field(default_factory=list, alias='PumpRedundancy')
    serial_number: Optional[str] = Field(None, alias='SerialNumber')
    status: Optional[Status] = Field(None, alias='Status')
    user_label: Optional[str] = Field(None, alias='UserLabel')
    version: Optional[str] = Field(None, alias='Version')

    actions: CoolingUnitActionsWire = Field(default_factory=CoolingUnitActionsWire, alias='Actions')
    links: CoolingUnitLinksWire = Field(default_factory=CoolingUnitLinksWire, alias='Links')
    assembly: Optional[ODataLink] = Field(None, alias='Assembly')
    coolant_connector_redundancy: List[ODataLink] = Field(
        default_factory=list, alias='CoolantConnectorRedundancy'
    )
    environment_metrics: Optional[ODataLink] = Field(None, alias='EnvironmentMetrics')
    filters: Optional[ODataLink] = Field(None, alias='Filters')
    leak_detection: Optional[ODataLink] = Field(None, alias='LeakDetection')
    primary_coolant_connectors: Optional[ODataLink] = Field(None, alias='PrimaryCoolantConnectors')
    pumps: Optional[ODataLink] = Field(None, alias='Pumps')
    reservoirs: Optional[ODataLink] = Field(None, alias='Reservoirs')
    secondary_coolant_connectors: Optional[ODataLink] = Field(None, alias='SecondaryCoolantConnectors')


class CoolingUnit(Entity):
    """
    A cooling system component or unit: a CDU, heat exchanger or immersion unit.

    Related resources are fetched on each accessor call; nothing is cached.
    """
    wire_model = CoolingUnitWire
    read_write_fields = ('AssetTag', 'UserLabel')

    def _load(self, wire: CoolingUnitWire):
        super()._load(wire)

        self.chassis_count = wire.links.chassis_count
        self.managed_by_count = wire.links.managed_by_count

        self._assembly = Link.from_wire(wire.assembly)
        self._coolant_connector_redundancy = LinkCollection.from_links(wire.coolant_connector_redundancy)
        self._environment_metrics = Link.from_wire(wire.environment_metrics)
        self._filters = Link.from_wire(wire.filters)
        self._leak_detection = Link.from_wire(wire.leak_detection)
        self._primary_coolant_connectors = Link.from_wire(wire.primary_coolant_connectors)
        self._pumps = Link.from_wire(wire.pumps)
        self._reservoirs = Link.from_wire(wire.reservoirs)
        self._secondary_coolant_connectors = Link.from_wire(wire.secondary_coolant_connectors)
        self._chassis = LinkCollection.from_links(wire.links.chassis, wire.links.chassis_count)
        self._facility = Link.from_wire(wire.links.facility)
        self._managed_by = LinkCollection.from_links(wire.links.managed_by, wire.links.managed_by_count)

        self._set_mode = ActionDescriptor.from_wire('CoolingUnit.SetMode', wire.actions.set_mode)

    @property
    def allowed_cooling_unit_modes(self) -> Tuple[str, ...]:
        """The modes the service advertises for set_mode()."""
        return self._set_mode.allowable_values.get('Mode', ())

    def set_mode(self, mode) -> None:
        """
        Set the mode of this cooling unit.

        Args:
            mode: A CoolingUnitMode or its string value

        Raises:
            UnsupportedActionError: If the unit does not offer SetMode
        """
        self.invoke_action(self._set_mode, {'Mode': getattr(mode, 'value', mode)})

    def assembly(self) -> Optional[Assembly]:
        return resolve(self._client_for(self._assembly), self._assembly, Assembly)

    def environment_metrics(self) -> Optional[EnvironmentMetrics]:
        link = self._environment_metrics
        return resolve(self._client_for(link), link, EnvironmentMetrics)

    def leak_detection(self) -> Optional[LeakDetection]:
        return resolve(self._client_for(self._leak_detection), self._leak_detection, LeakDetection)

    def filters(self) -> List[Filter]:
        return get_collection_objects(self._client_for(self._filters), self._filters.uri, Filter)

    def pumps(self) -> List[Pump]:
        return get_collection_objects(self._client_for(self._pumps), self._pumps.uri, Pump)

    def reservoirs(self) -> List[Reservoir]:
        return get_collection_objects(self._client_for(self._reservoirs), self._reservoirs.uri, Reservoir)

    def coolant_connector_redundancy(self) -> List[CoolantConnector]:
        """The coolant connectors that back each other up on this unit."""
        links = self._coolant_connector_redundancy
        return list_links(self._client_for(links), links, CoolantConnector)

    def primary_coolant_connectors(self) -> List[CoolantConnector]:
        link = self._primary_coolant_connectors
        return get_collection_objects(self._client_for(link), link.uri, CoolantConnector)

    def secondary_coolant_connectors(self) -> List[CoolantConnector]:
        link = self._secondary_coolant_connectors
        return get_collection_objects(self._client_for(link), link.uri, CoolantConnector)

    def chassis(self) -> List[Chassis]:
        """The chassis that contain this unit."""
        return list_links(self._client_for(self._chassis), self._chassis, Chassis)

    def facility(self) -> Optional[Facility]:
        return resolve(self._client_for(self._facility), self._facility, Facility)

    def managed_by(self) -> List[Manager]:
        return list_links(self._client_for(self._managed_by), self._managed_by, Manager)


def get_cooling_unit(client, uri: str) -> CoolingUnit:
    return get_object(client, uri, CoolingUnit)


def list_referenced_cooling_units(client, link: str) -> List[CoolingUnit]:
    """Get every CoolingUnit in the collection at link."""
    return get_collection_objects(client, link, CoolingUnit)
