from typing import List, Optional

from pydantic import Field

from redfishkit.common.entity import Entity, EntityWire
from redfishkit.common.wire import WireModel


class CertificateIdentifier(WireModel):
    common_name: Optional[str] = Field(None, alias='CommonName')
    organization: Optional[str] = Field(None, alias='Organization')
    organizational_unit: Optional[str] = Field(None, alias='OrganizationalUnit')
    country: Optional[str] = Field(None, alias='Country')


class CertificateWire(EntityWire):
    certificate_string: Optional[str] = Field(None, alias='CertificateString')
    certificate_type: Optional[str] = Field(None, alias='CertificateType')
    certificate_usage_types: List[str] = Field(default_factory=list, alias='CertificateUsageTypes')
    fingerprint: Optional[str] = Field(None, alias='Fingerprint')
    fingerprint_hash_algorithm: Optional[str] = Field(None, alias='FingerprintHashAlgorithm')
    issuer: Optional[CertificateIdentifier] = Field(None, alias='Issuer')
    serial_number: Optional[str] = Field(None, alias='SerialNumber')
    subject: Optional[CertificateIdentifier] = Field(None, alias='Subject')
    uefi_signature_owner: Optional[str] = Field(None, alias='UefiSignatureOwner')
    valid_not_after: Optional[str] = Field(None, alias='ValidNotAfter')
    valid_not_before: Optional[str] = Field(None, alias='ValidNotBefore')


class Certificate(Entity):
    """A certificate, e.g. a key stored in a UEFI Secure Boot database."""
    wire_model = CertificateWire


class SignatureWire(EntityWire):
    signature_string: Optional[str] = Field(None, alias='SignatureString')
    signature_type: Optional[str] = Field(None, alias='SignatureType')
    signature_type_registry: Optional[str] = Field(None, alias='SignatureTypeRegistry')
    uefi_signature_owner: Optional[str] = Field(None, alias='UefiSignatureOwner')


class Signature(Entity):
    """A signature (hash) stored in a UEFI Secure Boot database."""
    wire_model = SignatureWire
