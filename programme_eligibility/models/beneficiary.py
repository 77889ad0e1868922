"""
Pydantic models for beneficiaries and their questionnaire answers
"""
from typing import Mapping, Optional, Sequence, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


# Question code -> single choice code, or a collection of codes for multi-select questions
Answer = Union[str, Sequence[str]]
QuestionnaireResponses = Mapping[str, Answer]


class Beneficiary(BaseModel):
    """Structural attributes of a beneficiary or candidate enterprise"""
    id: Optional[str] = Field(None, description="Beneficiary identifier")
    region_id: Optional[str] = Field(None, description="Region the enterprise operates in")
    sector: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("sector", "secteur"),
        description="Activity sector"
    )
    ninea: Optional[str] = Field(None, description="NINEA tax identification number")
    rccm: Optional[str] = Field(None, description="Trade register (RCCM) number")
    employee_count: int = Field(
        0,
        ge=0,
        validation_alias=AliasChoices("employee_count", "nombre_employes"),
        description="Number of employees"
    )
    revenue: float = Field(
        0,
        ge=0,
        validation_alias=AliasChoices("revenue", "chiffre_affaires"),
        description="Annual revenue"
    )

    @field_validator('employee_count', 'revenue', mode='before')
    @classmethod
    def default_missing_figures(cls, v):
        # Stored rows carry null for figures that were never filled in
        if v is None:
            return 0
        return v

    @field_validator('region_id', 'sector', 'ninea', 'rccm', mode='before')
    @classmethod
    def coerce_identifier(cls, v):
        if v is None:
            return v
        return str(v)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "BEN-0042",
                "region_id": "Dakar",
                "sector": "Agriculture",
                "ninea": "004512378",
                "rccm": "",
                "employee_count": 6,
                "revenue": 12500000
            }
        }
    )
