from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from pydantic import Field

from redfishkit.common.entity import ActionDescriptor, Entity, EntityWire
from redfishkit.common.fetch import get_collection_objects, get_object, list_links
from redfishkit.common.links import LinkCollection
from redfishkit.common.wire import ActionWire, ODataCollectionRef, WireModel
from redfishkit.redfish.certificate import Certificate, Signature


class SecureBootDatabaseResetKeysType(str, Enum):
    # Reset the contents of the database to the default values.
    RESET_ALL_KEYS_TO_DEFAULT = 'ResetAllKeysToDefault'
    # Delete the contents of the database.
    DELETE_ALL_KEYS = 'DeleteAllKeys'


class SecureBootDatabaseActionsWire(WireModel):
    reset_keys: Optional[ActionWire] = Field(None, alias='#SecureBootDatabase.ResetKeys')


class SecureBootDatabaseWire(EntityWire):
    reference_fields: ClassVar[Tuple[str, ...]] = ('actions', 'certificates', 'signatures')

    # One of the UEFI-defined databases: PK, KEK, db, dbx, dbr, dbt or their
    # *Default counterparts. Same value as Id.
    database_id: Optional[str] = Field(None, alias='DatabaseId')
    oem: Optional[Dict[str, Any]] = Field(None, alias='Oem')

    actions: SecureBootDatabaseActionsWire = Field(default_factory=SecureBootDatabaseActionsWire, alias='Actions')
    certificates: Optional[ODataCollectionRef] = Field(None, alias='Certificates')
    signatures: Optional[ODataCollectionRef] = Field(None, alias='Signatures')


class SecureBootDatabase(Entity):
    """A UEFI Secure Boot database. Read-only apart from the ResetKeys action."""
    wire_model = SecureBootDatabaseWire

    def _load(self, wire: SecureBootDatabaseWire):
        super()._load(wire)
        self._certificates = LinkCollection.from_collection(wire.certificates)
        self._signatures = LinkCollection.from_collection(wire.signatures)
        self._reset_keys = ActionDescriptor.from_wire('SecureBootDatabase.ResetKeys', wire.actions.reset_keys)

    @property
    def allowed_reset_keys_types(self) -> Tuple[str, ...]:
        return self._reset_keys.allowable_values.get('ResetKeysType', ())

    def certificates(self) -> List[Certificate]:
        """The certificates contained in this database."""
        return list_links(self._client_for(self._certificates), self._certificates, Certificate)

    def signatures(self) -> List[Signature]:
        """The signatures contained in this database."""
        return list_links(self._client_for(self._signatures), self._signatures, Signature)

    def reset_keys(self, reset_keys_type) -> None:
        """
        Reset the keys of this database.

        Args:
            reset_keys_type: A SecureBootDatabaseResetKeysType or its string value

        Raises:
            UnsupportedActionError: If the database does not offer ResetKeys
        """
        self.invoke_action(self._reset_keys, {'ResetKeysType': getattr(reset_keys_type, 'value', reset_keys_type)})


def get_secure_boot_database(client, uri: str) -> SecureBootDatabase:
    return get_object(client, uri, SecureBootDatabase)


def list_referenced_secure_boot_databases(client, link: str) -> List[SecureBootDatabase]:
    """Get every SecureBootDatabase in the collection at link."""
    return get_collection_objects(client, link, SecureBootDatabase)
