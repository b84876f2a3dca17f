"""
Declarative payload validation for contact, contract and partner writes

Each ``validate_*`` function is pure: it takes the raw JSON payload and
returns the list of field violations (empty when valid). The ``parse_*``
variants return the typed model or raise ``ValidationError`` for the router.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from models.contact import Contact, INDIVIDUAL, PROFESSIONAL
from models.contract import ContractRequest
from models.partner import PartnerRequest

logger = logging.getLogger(__name__)

_CONTACT = TypeAdapter(Contact)
_CONTRACT = TypeAdapter(ContractRequest)
_PARTNER = TypeAdapter(PartnerRequest)

# Union tags pydantic prepends to error locations
_VARIANT_TAGS = {INDIVIDUAL, PROFESSIONAL}


@dataclass
class FieldViolation:
    """A single field-level rule violation"""
    field: str
    message: str
    type: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class ValidationError(Exception):
    """Payload rejected by a schema; rendered as HTTP 400"""

    def __init__(self, message: str = "Données invalides", details: List[FieldViolation] = None):
        super().__init__(message)
        self.message = message
        self.details = details or []


def violations_from_errors(errors: List[Dict[str, Any]]) -> List[FieldViolation]:
    """Convert pydantic error dicts into field violations with dotted paths"""
    violations = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _VARIANT_TAGS:
            loc = loc[1:]
        violations.append(FieldViolation(
            field=".".join(loc),
            message=error.get("msg", "Invalid value"),
            type=error.get("type", "unknown")
        ))
    return violations


def _validate(adapter: TypeAdapter, payload: Any):
    try:
        return adapter.validate_python(payload), []
    except PydanticValidationError as e:
        return None, violations_from_errors(e.errors())


def validate_contact(payload: Any) -> List[FieldViolation]:
    return _validate(_CONTACT, payload)[1]


def validate_contract(payload: Any) -> List[FieldViolation]:
    return _validate(_CONTRACT, payload)[1]


def validate_partner(payload: Any) -> List[FieldViolation]:
    return _validate(_PARTNER, payload)[1]


def _parse(adapter: TypeAdapter, payload: Any, kind: str):
    model, violations = _validate(adapter, payload)
    if violations:
        logger.info(f"Rejected {kind} payload: {len(violations)} violation(s)")
        raise ValidationError(details=violations)
    return model


def parse_contact(payload: Any):
    """Return an ``IndividualContact`` or ``ProfessionalContact``"""
    return _parse(_CONTACT, payload, "contact")


def parse_contract(payload: Any) -> ContractRequest:
    return _parse(_CONTRACT, payload, "contract")


def parse_partner(payload: Any) -> PartnerRequest:
    return _parse(_PARTNER, payload, "partner")
