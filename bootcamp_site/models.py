from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BootcampStats(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    students: int
    job_placement: int = Field(alias="jobPlacement")
    weeks: int
    graduates: int
    partner_companies: int = Field(alias="partnerCompanies")
    average_rating: float = Field(alias="averageRating")
    average_salary: int = Field(alias="averageSalary")


class CurriculumEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    week: str
    title: str
    description: str
    topics: Tuple[str, ...]


class ToolEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    image: str
    description: str
    category: str


# Request model for the contact form
class ContactSubmission(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None

    @field_validator("name", "email", "message", mode="before")
    @classmethod
    def _scalar_to_str(cls, value: Any) -> Optional[str]:
        """Form posts and loose JSON clients send numbers; treat them as text.

        0 and false count as not filled in.
        """
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float, bool)):
            return str(value) if value else None
        raise ValueError("expected a plain value")


class MessageResponse(BaseModel):
    success: bool
    message: str


class HealthResponse(BaseModel):
    status: str
    instance_id: str
    timestamp: str
    uptime: float
    port: int
    python_version: str
    memory_usage: Dict[str, Any]
