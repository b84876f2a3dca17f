"""
Partner-related Pydantic models
"""

from typing import Annotated, List, Optional
from pydantic import AnyUrl, BaseModel, ConfigDict, EmailStr, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from models.enums import PartnerType, PartnerStatus

NonEmptyStr = Annotated[str, Field(min_length=1)]

_URI = TypeAdapter(AnyUrl)


class PartnerRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    nom: NonEmptyStr
    type: PartnerType
    produits: List[NonEmptyStr]
    statut: PartnerStatus
    contactPrincipal: NonEmptyStr
    email: EmailStr
    telephone: NonEmptyStr
    siteWeb: Optional[str] = None
    intranetUrl: Optional[str] = None

    @field_validator("siteWeb", "intranetUrl")
    @classmethod
    def uri_or_empty(cls, value: Optional[str]) -> Optional[str]:
        """Accept an absolute URI or an empty string, keeping the value as sent"""
        if not value:
            return value
        try:
            _URI.validate_python(value)
        except PydanticValidationError:
            raise ValueError("must be a valid uri")
        return value
