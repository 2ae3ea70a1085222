from typing import List, Optional

from pydantic import Field

from redfishkit.common.entity import Entity, EntityWire
from redfishkit.common.wire import Location, Status, WireModel


class ChassisWire(EntityWire):
    asset_tag: Optional[str] = Field(None, alias='AssetTag')
    chassis_type: Optional[str] = Field(None, alias='ChassisType')
    manufacturer: Optional[str] = Field(None, alias='Manufacturer')
    model: Optional[str] = Field(None, alias='Model')
    part_number: Optional[str] = Field(None, alias='PartNumber')
    serial_number: Optional[str] = Field(None, alias='SerialNumber')
    location: Optional[Location] = Field(None, alias='Location')
    status: Optional[Status] = Field(None, alias='Status')


class Chassis(Entity):
    """A physical container for system components."""
    wire_model = ChassisWire
    read_write_fields = ('AssetTag',)


class ManagerWire(EntityWire):
    manager_type: Optional[str] = Field(None, alias='ManagerType')
    firmware_version: Optional[str] = Field(None, alias='FirmwareVersion')
    model: Optional[str] = Field(None, alias='Model')
    status: Optional[Status] = Field(None, alias='Status')


class Manager(Entity):
    """A management controller, such as a BMC."""
    wire_model = ManagerWire


class FacilityWire(EntityWire):
    facility_type: Optional[str] = Field(None, alias='FacilityType')
    location: Optional[Location] = Field(None, alias='Location')
    status: Optional[Status] = Field(None, alias='Status')


class Facility(Entity):
    wire_model = FacilityWire


class AssemblyData(WireModel):
    """One entry of an Assembly's Assemblies array."""
    member_id: str = Field('', alias='MemberId')
    name: Optional[str] = Field(None, alias='Name')
    model: Optional[str] = Field(None, alias='Model')
    part_number: Optional[str] = Field(None, alias='PartNumber')
    serial_number: Optional[str] = Field(None, alias='SerialNumber')
    version: Optional[str] = Field(None, alias='Version')
    status: Optional[Status] = Field(None, alias='Status')


class AssemblyWire(EntityWire):
    assemblies: List[AssemblyData] = Field(default_factory=list, alias='Assemblies')


class Assembly(Entity):
    wire_model = AssemblyWire
