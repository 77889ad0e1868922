"""
Pydantic models for programmes and their eligibility criteria
"""
from datetime import date, datetime
from enum import Enum
from typing import FrozenSet, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ProgrammeStatus(str, Enum):
    """Lifecycle status codes as stored by the programme registry"""
    DRAFT = "BROUILLON"
    PLANNED = "PLANIFIÉ"
    OPEN = "OUVERT"
    IN_PROGRESS = "EN_COURS"
    CLOSED = "FERMÉ"
    ARCHIVED = "ARCHIVÉ"
    PREPARING = "EN_PREPARATION"
    ACTIVE = "ACTIF"
    COMPLETED = "TERMINE"
    SUSPENDED = "SUSPENDU"


# Statuses under which a programme accepts applications
OPEN_STATUSES = frozenset({ProgrammeStatus.OPEN.value, ProgrammeStatus.IN_PROGRESS.value})

KNOWN_STATUSES = frozenset(status.value for status in ProgrammeStatus)


def _as_code_set(v):
    if v is None:
        return frozenset()
    if isinstance(v, str):
        return frozenset({v})
    return v


class EligibilityCriteria(BaseModel):
    """Structural restrictions a programme places on applicants"""
    sectors: FrozenSet[str] = Field(
        default_factory=frozenset,
        validation_alias=AliasChoices("sectors", "secteurs"),
        description="Eligible activity sectors (empty means unrestricted)"
    )
    formalization_required: bool = Field(
        False,
        validation_alias=AliasChoices("formalization_required", "formalisation_requise"),
        description="Whether a NINEA or RCCM is required"
    )
    min_employees: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("min_employees", "nombre_employes_min"),
        description="Minimum number of employees"
    )
    min_revenue: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("min_revenue", "chiffre_affaires_min"),
        description="Minimum annual revenue"
    )
    min_score: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("min_score", "score_minimum"),
        description="Minimum questionnaire score (not applied by default)"
    )
    required_gender: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("required_gender", "genre_requis"),
        description="Required gender of the promoter (not applied by default)"
    )

    @field_validator('sectors', mode='before')
    @classmethod
    def validate_sectors(cls, v):
        return _as_code_set(v)

    @field_validator('formalization_required', mode='before')
    @classmethod
    def validate_formalization(cls, v):
        if v is None:
            return False
        return v

    model_config = ConfigDict(frozen=True)


class Programme(BaseModel):
    """Funding or support programme open to applications"""
    id: Optional[str] = Field(None, description="Programme identifier")
    name: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("name", "nom"),
        description="Programme name"
    )
    budget: Optional[float] = Field(None, description="Allocated budget")
    status: str = Field(
        "",
        validation_alias=AliasChoices("status", "statut"),
        description="Lifecycle status code"
    )
    start_date: Optional[date] = Field(
        None,
        validation_alias=AliasChoices("start_date", "date_debut"),
        description="First day applications are accepted"
    )
    end_date: Optional[date] = Field(
        None,
        validation_alias=AliasChoices("end_date", "date_fin"),
        description="Last day applications are accepted"
    )
    target_regions: FrozenSet[str] = Field(
        default_factory=frozenset,
        validation_alias=AliasChoices("target_regions", "regions_cibles"),
        description="Eligible regions (empty means unrestricted)"
    )
    criteria: EligibilityCriteria = Field(
        default_factory=EligibilityCriteria,
        validation_alias=AliasChoices("criteria", "criteres_eligibilite"),
        description="Eligibility criteria"
    )

    @field_validator('status', mode='before')
    @classmethod
    def validate_status(cls, v):
        if v is None:
            return ""
        if isinstance(v, ProgrammeStatus):
            return v.value
        code = str(v).strip().upper()
        # Accept English member names as well as stored codes
        if code in ProgrammeStatus.__members__:
            return ProgrammeStatus[code].value
        return code

    @field_validator('start_date', 'end_date', mode='before')
    @classmethod
    def validate_dates(cls, v):
        if v is None or v == "":
            return None
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and len(v) > 10:
            # Timestamps from the store, e.g. 2025-03-01T00:00:00+00:00
            return v[:10]
        return v

    @field_validator('target_regions', mode='before')
    @classmethod
    def validate_regions(cls, v):
        return _as_code_set(v)

    @field_validator('criteria', mode='before')
    @classmethod
    def validate_criteria(cls, v):
        if v is None:
            return {}
        return v

    @property
    def accepts_applications(self) -> bool:
        return self.status in OPEN_STATUSES

    def is_running_on(self, day: date) -> bool:
        """Whether day falls inside the operative window, bounds inclusive"""
        if self.start_date is not None and day < self.start_date:
            return False
        if self.end_date is not None and day > self.end_date:
            return False
        return True

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "PRG-2025-01",
                "name": "Programme d'appui aux PME agricoles",
                "budget": 250000000,
                "status": "OUVERT",
                "start_date": "2025-01-15",
                "end_date": "2025-12-31",
                "target_regions": ["Dakar", "Thiès"],
                "criteria": {
                    "sectors": ["Agriculture", "Agro-alimentaire"],
                    "formalization_required": True,
                    "min_employees": 2,
                    "min_revenue": 5000000
                }
            }
        }
    )
