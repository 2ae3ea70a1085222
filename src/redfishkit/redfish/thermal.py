"""Resources found under a cooling unit."""

from typing import List, Optional

from pydantic import Field

from redfishkit.common.entity import Entity, EntityWire
from redfishkit.common.wire import Location, SensorExcerpt, Status, WireModel


class EnvironmentMetricsWire(EntityWire):
    temperature_celsius: Optional[SensorExcerpt] = Field(None, alias='TemperatureCelsius')
    humidity_percent: Optional[SensorExcerpt] = Field(None, alias='HumidityPercent')
    power_watts: Optional[SensorExcerpt] = Field(None, alias='PowerWatts')
    absolute_humidity: Optional[SensorExcerpt] = Field(None, alias='AbsoluteHumidity')


class EnvironmentMetrics(Entity):
    wire_model = EnvironmentMetricsWire


class LeakDetectorGroup(WireModel):
    group_name: str = Field('', alias='GroupName')
    detectors: List[dict] = Field(default_factory=list, alias='Detectors')
    humidity_percent: Optional[SensorExcerpt] = Field(None, alias='HumidityPercent')
    status: Optional[Status] = Field(None, alias='Status')


class LeakDetectionWire(EntityWire):
    leak_detector_groups: List[LeakDetectorGroup] = Field(default_factory=list, alias='LeakDetectorGroups')
    status: Optional[Status] = Field(None, alias='Status')


class LeakDetection(Entity):
    wire_model = LeakDetectionWire


class FilterWire(EntityWire):
    hot_pluggable: Optional[bool] = Field(None, alias='HotPluggable')
    location: Optional[Location] = Field(None, alias='Location')
    location_indicator_active: Optional[bool] = Field(None, alias='LocationIndicatorActive')
    manufacturer: Optional[str] = Field(None, alias='Manufacturer')
    part_number: Optional[str] = Field(None, alias='PartNumber')
    rated_service_hours: Optional[float] = Field(None, alias='RatedServiceHours')
    replaceable: Optional[bool] = Field(None, alias='Replaceable')
    service_hours: Optional[float] = Field(None, alias='ServiceHours')
    status: Optional[Status] = Field(None, alias='Status')
    user_label: Optional[str] = Field(None, alias='UserLabel')


class Filter(Entity):
    wire_model = FilterWire
    read_write_fields = ('LocationIndicatorActive', 'ServiceHours', 'UserLabel')


class PumpWire(EntityWire):
    firmware_version: Optional[str] = Field(None, alias='FirmwareVersion')
    location: Optional[Location] = Field(None, alias='Location')
    manufacturer: Optional[str] = Field(None, alias='Manufacturer')
    model: Optional[str] = Field(None, alias='Model')
    pump_speed_percent: Optional[SensorExcerpt] = Field(None, alias='PumpSpeedPercent')
    pump_type: Optional[str] = Field(None, alias='PumpType')
    serial_number: Optional[str] = Field(None, alias='SerialNumber')
    service_hours: Optional[float] = Field(None, alias='ServiceHours')
    status: Optional[Status] = Field(None, alias='Status')
    user_label: Optional[str] = Field(None, alias='UserLabel')


class Pump(Entity):
    wire_model = PumpWire
    read_write_fields = ('ServiceHours', 'UserLabel')


class ReservoirWire(EntityWire):
    capacity_liters: Optional[float] = Field(None, alias='CapacityLiters')
    fluid_level_percent: Optional[SensorExcerpt] = Field(None, alias='FluidLevelPercent')
    location: Optional[Location] = Field(None, alias='Location')
    reservoir_type: Optional[str] = Field(None, alias='ReservoirType')
    status: Optional[Status] = Field(None, alias='Status')
    user_label: Optional[str] = Field(None, alias='UserLabel')


class Reservoir(Entity):
    wire_model = ReservoirWire
    read_write_fields = ('UserLabel',)


class CoolantConnectorWire(EntityWire):
    coolant_connector_type: Optional[str] = Field(None, alias='CoolantConnectorType')
    flow_liters_per_minute: Optional[SensorExcerpt] = Field(None, alias='FlowLitersPerMinute')
    location: Optional[Location] = Field(None, alias='Location')
    rated_flow_liters_per_minute: Optional[float] = Field(None, alias='RatedFlowLitersPerMinute')
    status: Optional[Status] = Field(None, alias='Status')
    supply_temperature_celsius: Optional[SensorExcerpt] = Field(None, alias='SupplyTemperatureCelsius')
    return_temperature_celsius: Optional[SensorExcerpt] = Field(None, alias='ReturnTemperatureCelsius')
    user_label: Optional[str] = Field(None, alias='UserLabel')


class CoolantConnector(Entity):
    wire_model = CoolantConnectorWire
    read_write_fields = ('UserLabel',)
