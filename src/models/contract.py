"""
Contract-related Pydantic models
"""

from typing import Annotated
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from models.enums import ContractType, ContractCategory

NonEmptyStr = Annotated[str, Field(min_length=1)]
Percentage = Annotated[float, Field(ge=0, le=100)]


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken as UTC so mixed inputs stay comparable
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ContractRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    clientId: NonEmptyStr
    type: ContractType
    categorie: ContractCategory
    montantAnnuel: float = Field(gt=0)
    dateDebut: datetime
    dateFin: datetime
    partenaire: NonEmptyStr
    commissionPremiereAnnee: Percentage
    commissionAnneesSuivantes: Percentage
    fraisDossier: float = Field(ge=0)
    fraisDossierRecurrent: bool

    @field_validator("dateFin")
    @classmethod
    def end_after_start(cls, value: datetime, info: ValidationInfo) -> datetime:
        start = info.data.get("dateDebut")
        if start is not None and _as_utc(value) <= _as_utc(start):
            raise ValueError("dateFin must be greater than dateDebut")
        return value
