import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import ClassVar, Dict, Optional, Tuple, Union

from pydantic import Field, TypeAdapter, ValidationError

from redfishkit.common.errors import DecodeError, RedfishError, UnsupportedActionError
from redfishkit.common.wire import ActionWire, WireModel

LOG = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(annotation) -> TypeAdapter:
    return TypeAdapter(annotation)


class EntityWire(WireModel):
    """
    Wire shape shared by every resource.

    Subclasses add their inline properties as plain fields and their
    references (Links, Actions, @odata.id objects) as fields listed in
    reference_fields. Reference fields are not copied onto the entity;
    each resource projects them into Link objects itself.
    """
    reference_fields: ClassVar[Tuple[str, ...]] = ()

    odata_id: str = Field('', alias='@odata.id')
    odata_type: str = Field('', alias='@odata.type')
    odata_context: str = Field('', alias='@odata.context')
    odata_etag: str = Field('', alias='@odata.etag')
    id: str = Field(alias='Id')
    name: str = Field('', alias='Name')
    description: Optional[str] = Field(None, alias='Description')


@dataclass(frozen=True)
class ActionDescriptor:
    """
    Target and parameter constraints of one Redfish action.

    An empty target means this resource instance does not offer the action.
    """
    name: str
    target: str = ''
    allowable_values: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def from_wire(cls, name: str, wire: Optional[ActionWire]) -> 'ActionDescriptor':
        if wire is None:
            return cls(name)
        return cls(name, wire.target or '', wire.allowable_values())

    @property
    def supported(self) -> bool:
        return bool(self.target)

    def allows(self, parameter: str, value) -> bool:
        """True when value is advertised for parameter, or nothing is advertised."""
        allowed = self.allowable_values.get(parameter)
        if not allowed:
            return True
        return str(getattr(value, 'value', value)) in allowed


class Entity:
    """
    Base class for Redfish resources.

    An entity is created by decoding one JSON document (see from_json).
    Inline properties become public attributes named after the wire model
    fields; the raw document is kept so that update() can send only the
    read-write properties that were changed in memory.
    """
    wire_model = EntityWire
    # JSON property names that update() is allowed to send.
    read_write_fields: Tuple[str, ...] = ()

    def __init__(self, client=None):
        for name in self._inline_fields():
            info = self.wire_model.model_fields[name]
            setattr(self, name, None if info.is_required() else info.get_default(call_default_factory=True))
        self.disable_etag_match = False
        self._client = client
        self._raw_data = None
        self._committed = {}

    @classmethod
    def _inline_fields(cls):
        skip = cls.wire_model.reference_fields
        return [name for name in cls.wire_model.model_fields if name not in skip]

    @classmethod
    def from_json(cls, data: Union[bytes, str], client=None) -> 'Entity':
        """
        Decode a resource from its JSON document.

        Raises:
            DecodeError: If data is not a JSON object of the expected shape
        """
        if isinstance(data, str):
            data = data.encode('utf-8')
        try:
            wire = cls.wire_model.model_validate_json(data)
        except ValidationError as e:
            raise DecodeError(f'Invalid {cls.__name__} payload: {e}') from e

        entity = cls(client)
        entity._load(wire)
        entity._raw_data = bytes(data)
        return entity

    def _load(self, wire):
        """Copy inline properties from the decoded wire model."""
        for name in self._inline_fields():
            setattr(self, name, getattr(wire, name))

    @property
    def client(self):
        return self._client

    @property
    def raw_data(self) -> Optional[bytes]:
        """The document this entity was decoded from."""
        return self._raw_data

    def _require_client(self):
        if self._client is None:
            raise RedfishError(f'{type(self).__name__} {self.id!r} has no client attached')
        return self._client

    def _client_for(self, link):
        # Unset links resolve to nothing, attached or not.
        return self._require_client() if link else None

    def _dump(self, name: str, value):
        info = self.wire_model.model_fields[name]
        return _adapter(info.annotation).dump_python(value, mode='json', by_alias=True, exclude_none=True)

    def _field_name(self, prop: str) -> str:
        for name, info in self.wire_model.model_fields.items():
            if (info.alias or name) == prop:
                return name
        raise ValueError(f'{type(self).__name__} has no property {prop}')

    def _diff_base(self) -> dict:
        # Values accepted by a previous update() count as the new baseline.
        original = json.loads(self._raw_data) if self._raw_data else {}
        original.update(self._committed)
        return original

    def patch_payload(self) -> dict:
        """Return the read-write properties whose value differs from the fetched document."""
        base = self._diff_base()
        payload = {}
        for prop in self.read_write_fields:
            name = self._field_name(prop)
            current = self._dump(name, getattr(self, name))
            if prop in base:
                previous = base[prop]
            else:
                info = self.wire_model.model_fields[name]
                previous = self._dump(name, info.get_default(call_default_factory=True))
            if current != previous:
                payload[prop] = current
        return payload

    def update(self) -> None:
        """
        Commit changed read-write properties to the service.

        Nothing is sent when no read-write property changed.
        """
        payload = self.patch_payload()
        if not payload:
            LOG.debug('No changes to commit for %s', self.odata_id or self.id)
            return
        self.patch(self.odata_id, payload)
        self._committed.update(payload)

    def patch(self, uri: str, payload: dict):
        if not uri:
            raise ValueError(f'{type(self).__name__} {self.id!r} has no @odata.id to update')
        headers = None
        if self.odata_etag and not self.disable_etag_match:
            headers = {'If-Match': self.odata_etag}
        LOG.debug('PATCH %s %s', uri, payload)
        return self._require_client().patch(uri, payload, headers=headers)

    def post(self, uri: str, payload: dict):
        LOG.debug('POST %s %s', uri, payload)
        return self._require_client().post(uri, payload)

    def invoke_action(self, action: ActionDescriptor, payload: dict):
        """
        Post payload to the target of action.

        Values outside the advertised allowable values are still sent;
        the service decides whether to accept them.

        Raises:
            UnsupportedActionError: If the resource does not expose the action
        """
        if not action.supported:
            raise UnsupportedActionError(action.name)
        for parameter, value in payload.items():
            if not action.allows(parameter, value):
                LOG.warning('%s: %s=%s is not in the allowable values %s',
                            action.name, parameter, value, list(action.allowable_values[parameter]))
        return self.post(action.target, payload)

    def to_dict(self) -> dict:
        """Inline properties keyed by their JSON names, leaving out unset ones."""
        data = {}
        for name in self._inline_fields():
            value = getattr(self, name)
            info = self.wire_model.model_fields[name]
            if value is None or (not info.is_required() and value == info.get_default(call_default_factory=True)):
                continue
            data[info.alias or name] = self._dump(name, value)
        return data

    def __repr__(self):
        return f'<{type(self).__name__} {self.odata_id or self.id}>'
