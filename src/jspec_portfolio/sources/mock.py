"""In-memory mock sources.

Simulate a network round-trip with a non-blocking delay and return the
static portfolio and company content.
"""

import asyncio
import logging
from typing import Any, Dict, List

from ..models.company import CompanyData, Testimonial
from ..models.project import Project
from .interface import ProjectSource, CompanySource, LoadError
from .utils import parse_projects

logger = logging.getLogger(__name__)


PROJECT_RECORDS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "title": "Chennai to Bangalore Expressway",
        "client": "RCCL",
        "contractor": "ESTRUCTURA",
        "description": "LG Commissioning, I Girder Lifting & Erection",
        "status": "completed",
        "tags": ["LG Systems", "I Girder"],
        "videoUrl": "/placeholder-video.mp4",
        "imageUrl": "/placeholder.svg?height=300&width=400&text=Chennai+Expressway",
        "location": "Tamil Nadu, India",
        "startDate": "2022-01-15",
        "endDate": "2023-06-30",
    },
    {
        "id": "2",
        "title": "Kozhikode Highway Project",
        "client": "KMC",
        "contractor": "ESTRUCTURA",
        "description": "LG Commissioning, Segment Lifting & Erection",
        "status": "completed",
        "tags": ["LG Systems", "Segments"],
        "videoUrl": "/placeholder-video.mp4",
        "imageUrl": "/placeholder.svg?height=300&width=400&text=Kozhikode+Highway",
        "location": "Kerala, India",
        "startDate": "2021-08-10",
        "endDate": "2023-03-20",
    },
    {
        "id": "3",
        "title": "Kannur Bypass Project",
        "client": "VSEPL",
        "contractor": "IBEC",
        "description": "LG Commissioning, I Girder Lifting & Erection",
        "status": "completed",
        "progress": 75,
        "tags": ["LG Systems", "I Girder"],
        "videoUrl": "/placeholder-video.mp4",
        "imageUrl": "/placeholder.svg?height=300&width=400&text=Kannur+Bypass",
        "location": "Kerala, India",
        "startDate": "2023-02-01",
    },
    {
        "id": "4",
        "title": "Pune Metro Project",
        "client": "RVNL",
        "contractor": "STRUCTICON",
        "description": "LG Commissioning, Segment Lifting & Erection",
        "status": "completed",
        "progress": 60,
        "tags": ["LG Systems", "Segments"],
        "videoUrl": "/placeholder-video.mp4",
        "imageUrl": "/placeholder.svg?height=300&width=400&text=Pune+Metro",
        "location": "Maharashtra, India",
        "startDate": "2023-04-15",
    },
    {
        "id": "5",
        "title": "Chennai Metro Project",
        "client": "RVNL",
        "contractor": "L&T",
        "description": "Erection & PT works",
        "status": "in-progress",
        "progress": 60,
        "tags": ["LG Systems", "Segments"],
        "videoUrl": "/placeholder-video.mp4",
        "imageUrl": "/placeholder.svg?height=300&width=400&text=Chennai+Metro",
        "location": "Tamil Nadu, India",
        "startDate": "2023-04-15",
    },
]


COMPANY_RECORD: Dict[str, Any] = {
    "stats": {
        "yearsExperience": 23,
        "projectsCompleted": 100,
        "countries": 3,
        "successRate": 100,
    },
    "services": [
        {
            "id": "1",
            "title": "Bridge Segments Erection",
            "description": "Specialized erection of precast concrete and steel segments for all bridge types",
            "icon": "Building",
            "features": ["Box Girders", "I Girders", "U Girders", "Pi Girders", "PSI Modules"],
        },
        {
            "id": "2",
            "title": "Advanced Erection Methods",
            "description": "State-of-the-art methodologies for efficient and safe bridge construction",
            "icon": "Crane",
            "features": [
                "Span-by-span Method",
                "Balanced Cantilever",
                "Overhead Launching Gantries",
                "Under slung Gantries",
                "Derek Cranes",
            ],
        },
        {
            "id": "3",
            "title": "Technical Support",
            "description": "Comprehensive technical expertise and skilled manpower for complex projects",
            "icon": "Settings",
            "features": [
                "LG Assembly & Disassembly",
                "Segment Erection",
                "Stressing Works",
                "Span Alignment",
                "Bearing Installation",
            ],
        },
    ],
    "testimonials": [
        {
            "id": "1",
            "name": "Rajesh Kumar",
            "company": "ESTRUCTURA",
            "position": "Project Manager",
            "content": "JSPEC INDIA delivered exceptional results on our Chennai Expressway project. "
                       "Their expertise in LG operations is unmatched.",
            "rating": 5,
        },
        {
            "id": "2",
            "name": "Mohammed Al-Rashid",
            "company": "Saudi Infrastructure Corp",
            "position": "Chief Engineer",
            "content": "Working with JSPEC INDIA in Saudi Arabia was a game-changer. "
                       "Their international experience shows in every aspect of their work.",
            "rating": 5,
        },
    ],
    "certifications": [
        {
            "id": "1",
            "name": "ISO 9001:2015",
            "issuer": "International Organization for Standardization",
            "date": "2023-01-15",
        },
        {
            "id": "2",
            "name": "Safety Excellence Award",
            "issuer": "Indian Construction Safety Council",
            "date": "2023-06-20",
        },
    ],
}


TESTIMONIAL_RECORDS: List[Dict[str, Any]] = [
    {**COMPANY_RECORD["testimonials"][0], "avatar": "/placeholder.svg?height=60&width=60&text=RK"},
    {**COMPANY_RECORD["testimonials"][1], "avatar": "/placeholder.svg?height=60&width=60&text=MA"},
    {
        "id": "3",
        "name": "Priya Sharma",
        "company": "RVNL",
        "position": "Technical Director",
        "content": "The precision and safety standards maintained by JSPEC INDIA on our metro project "
                   "exceeded all expectations.",
        "rating": 5,
        "avatar": "/placeholder.svg?height=60&width=60&text=PS",
    },
]


class MockProjectSource(ProjectSource):
    """Project source backed by the static fixture.

    Every call builds fresh Project objects from the fixture, so repeated
    loads return structurally equal, order-stable collections.
    """

    def __init__(
        self,
        latency: float = 1.0,
        records: List[Dict[str, Any]] = None,
        fail_times: int = 0,
        strict: bool = False,
    ):
        """Initialize mock source.

        Args:
            latency: Simulated round-trip in seconds
            records: Raw records to serve, defaults to the portfolio fixture
            fail_times: Number of initial calls that fail with LoadError
            strict: Fail the load on any malformed record
        """
        self.latency = latency
        self.records = records if records is not None else PROJECT_RECORDS
        self.fail_times = fail_times
        self.strict = strict
        self.calls = 0

    async def load(self) -> List[Project]:
        self.calls += 1
        await asyncio.sleep(self.latency)

        if self.calls <= self.fail_times:
            raise LoadError(f"Simulated network failure (call {self.calls})")

        projects = parse_projects([dict(r) for r in self.records], strict=self.strict)
        logger.debug(f"Mock source returned {len(projects)} projects")
        return projects


class MockCompanySource(CompanySource):
    """Company source backed by the static fixture."""

    def __init__(self, company_latency: float = 0.8, testimonials_latency: float = 0.6):
        self.company_latency = company_latency
        self.testimonials_latency = testimonials_latency

    async def load_company_data(self) -> CompanyData:
        await asyncio.sleep(self.company_latency)
        return CompanyData.model_validate(COMPANY_RECORD)

    async def load_testimonials(self) -> List[Testimonial]:
        await asyncio.sleep(self.testimonials_latency)
        return [Testimonial.model_validate(r) for r in TESTIMONIAL_RECORDS]
