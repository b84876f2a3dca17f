"""
Contact-related Pydantic models

A contact is either an individual or a professional. The two shapes are kept
as separate models and selected on ``types.professionnel``, so the fields a
professional must carry (professional type, company name, SIRET) are required
by the model itself instead of by a flag check.
"""

from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Discriminator, EmailStr, Field, Tag

from models.enums import ContactStatus

NonEmptyStr = Annotated[str, Field(min_length=1)]
Siret = Annotated[str, Field(min_length=14, max_length=14)]

INDIVIDUAL = "individual"
PROFESSIONAL = "professional"


class IndividualTypes(BaseModel):
    model_config = ConfigDict(extra="forbid")

    particulier: bool
    professionnel: Literal[False]
    professionalType: Optional[NonEmptyStr] = None


class ProfessionalTypes(BaseModel):
    model_config = ConfigDict(extra="forbid")

    particulier: bool
    professionnel: Literal[True]
    professionalType: NonEmptyStr


class ContactBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    nom: NonEmptyStr
    prenom: NonEmptyStr
    email: EmailStr
    telephone: NonEmptyStr
    statut: ContactStatus


class IndividualContact(ContactBase):
    types: IndividualTypes
    entreprise: Optional[NonEmptyStr] = None
    siret: Optional[NonEmptyStr] = None


class ProfessionalContact(ContactBase):
    types: ProfessionalTypes
    entreprise: NonEmptyStr
    siret: Siret


def contact_kind(value: Any) -> str:
    """Pick the contact variant from the ``types.professionnel`` flag"""
    if isinstance(value, dict):
        types = value.get("types")
    else:
        types = getattr(value, "types", None)

    if isinstance(types, dict):
        flag = types.get("professionnel")
    else:
        flag = getattr(types, "professionnel", None)

    return PROFESSIONAL if flag is True else INDIVIDUAL


Contact = Annotated[
    Union[
        Annotated[IndividualContact, Tag(INDIVIDUAL)],
        Annotated[ProfessionalContact, Tag(PROFESSIONAL)],
    ],
    Discriminator(contact_kind),
]
