"""
Company content models.

Services, testimonials, certifications and headline figures shown
alongside the portfolio.
"""

from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field


class Service(BaseModel):
    """A service line offered by the company."""
    id: str = Field(..., description="Unique identifier")
    title: str = Field(..., description="Service name")
    description: str = Field(..., description="Short description")
    icon: str = Field(..., description="Icon name used by the front end")
    features: List[str] = Field(default_factory=list, description="Capabilities, in display order")


class Testimonial(BaseModel):
    """Client quote."""
    id: str
    name: str
    company: str
    position: str
    content: str
    rating: int = Field(5, ge=1, le=5, description="Star rating")
    avatar: Optional[str] = Field(None, description="Avatar image, placeholder when absent")


class Certification(BaseModel):
    """Certification or award held by the company."""
    id: str
    name: str
    issuer: str
    issued_on: date = Field(..., alias="date", description="Date awarded")
    image_url: Optional[str] = Field(None, alias="imageUrl")

    class Config:
        populate_by_name = True


class CompanyStats(BaseModel):
    """Headline figures."""
    years_experience: int = Field(..., ge=0, alias="yearsExperience")
    projects_completed: int = Field(..., ge=0, alias="projectsCompleted")
    countries: int = Field(..., ge=0)
    success_rate: int = Field(..., ge=0, le=100, alias="successRate", description="Percentage")

    class Config:
        populate_by_name = True


class CompanyData(BaseModel):
    """Everything the company section renders."""
    stats: CompanyStats
    services: List[Service] = Field(default_factory=list)
    testimonials: List[Testimonial] = Field(default_factory=list)
    certifications: List[Certification] = Field(default_factory=list)
