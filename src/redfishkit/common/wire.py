"""Wire shapes: pydantic models matching Redfish JSON as it is sent."""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


ALLOWABLE_VALUES_SUFFIX = '@Redfish.AllowableValues'


class WireModel(BaseModel):
    """Base for every wire shape. Unknown properties are ignored."""
    model_config = ConfigDict(populate_by_name=True, extra='ignore')


class ODataLink(WireModel):
    """A Redfish reference: {"@odata.id": "<uri>"}."""
    odata_id: str = Field('', alias='@odata.id')


class ODataCollectionRef(WireModel):
    """
    Reference to a resource collection.

    Servers usually send just the @odata.id of the collection, but an
    expanded reference carries its Members (and their count) inline.
    """
    odata_id: str = Field('', alias='@odata.id')
    members: List[ODataLink] = Field(default_factory=list, alias='Members')
    members_count: Optional[int] = Field(None, alias='Members@odata.count')


class CollectionPage(WireModel):
    """One page of a resource collection."""
    odata_id: str = Field('', alias='@odata.id')
    members: List[ODataLink] = Field(default_factory=list, alias='Members')
    members_count: Optional[int] = Field(None, alias='Members@odata.count')
    next_link: Optional[str] = Field(None, alias='Members@odata.nextLink')


class ActionWire(BaseModel):
    """
    An entry of the Actions object, e.g. "#CoolingUnit.SetMode".

    Besides the target, an action advertises constraints as sibling
    properties named "<Param>@Redfish.AllowableValues"; those are kept as
    extra fields and read back through allowable_values().
    """
    model_config = ConfigDict(populate_by_name=True, extra='allow')

    target: str = ''
    title: Optional[str] = None

    def allowable_values(self) -> Dict[str, Tuple[str, ...]]:
        values = {}
        for key, value in (self.model_extra or {}).items():
            if key.endswith(ALLOWABLE_VALUES_SUFFIX) and isinstance(value, list):
                values[key[:-len(ALLOWABLE_VALUES_SUFFIX)]] = tuple(str(v) for v in value)
        return values


class Status(WireModel):
    state: Optional[str] = Field(None, alias='State')
    health: Optional[str] = Field(None, alias='Health')
    health_rollup: Optional[str] = Field(None, alias='HealthRollup')


class PostalAddress(WireModel):
    country: Optional[str] = Field(None, alias='Country')
    city: Optional[str] = Field(None, alias='City')
    building: Optional[str] = Field(None, alias='Building')
    room: Optional[str] = Field(None, alias='Room')


class Placement(WireModel):
    row: Optional[str] = Field(None, alias='Row')
    rack: Optional[str] = Field(None, alias='Rack')
    rack_offset: Optional[int] = Field(None, alias='RackOffset')
    rack_offset_units: Optional[str] = Field(None, alias='RackOffsetUnits')


class PartLocation(WireModel):
    location_type: Optional[str] = Field(None, alias='LocationType')
    location_ordinal_value: Optional[int] = Field(None, alias='LocationOrdinalValue')
    service_label: Optional[str] = Field(None, alias='ServiceLabel')


class Location(WireModel):
    info: Optional[str] = Field(None, alias='Info')
    info_format: Optional[str] = Field(None, alias='InfoFormat')
    part_location: Optional[PartLocation] = Field(None, alias='PartLocation')
    placement: Optional[Placement] = Field(None, alias='Placement')
    postal_address: Optional[PostalAddress] = Field(None, alias='PostalAddress')


class SensorExcerpt(WireModel):
    data_source_uri: Optional[str] = Field(None, alias='DataSourceUri')
    reading: Optional[float] = Field(None, alias='Reading')
