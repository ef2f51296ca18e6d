"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.ports import Inscription


class InscriptionRequest(BaseModel):
    """Request body for creating or replacing an inscription.

    Only presence is checked: no email format, no maximum length.
    """

    name: str = Field(..., min_length=1, description="Registrant name")
    contact: str = Field(..., min_length=1, description="Phone number or other contact")
    email: str = Field(..., min_length=1, description="Email address (not format-checked)")


class InscriptionResponse(BaseModel):
    """A stored inscription."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    contact: str
    email: str

    @classmethod
    def from_domain(cls, inscription: Inscription) -> "InscriptionResponse":
        return cls.model_validate(inscription)


class HealthResponse(BaseModel):
    status: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
