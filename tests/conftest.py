import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest


@pytest.fixture(scope="session", autouse=True)
def add_src_to_path() -> None:
    project_root = Path(__file__).resolve().parents[1]
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


# 40 characters: three summary lines at the minimum, 20mm
SHORT_SUMMARY = "Backend engineer focused on payments API"


@pytest.fixture
def short_summary() -> str:
    return SHORT_SUMMARY


@pytest.fixture
def five_section_data() -> Dict[str, Any]:
    """Five sections of exactly 20mm each (100mm in total)."""
    return {
        "personalDetails": {"name": "Amina Njeri", "title": "Backend Engineer", "email": "amina@example.com"},
        "summary": SHORT_SUMMARY,
        "roles": ["Backend Engineer", "Platform Engineer", "Tech Lead"],
        "education": [{"degree": "BSc Computer Science", "institution": "University of Nairobi", "years": "2012 - 2016"}],
        "accomplishments": ["Cut p99 latency by 40%", "Led PCI audit", "Mentored 6 engineers"],
        "awards": [{"title": "Engineer of the Year", "issuer": "Acme", "year": "2021"}, {"title": "Hackathon winner"}],
    }


@pytest.fixture
def full_cv_data() -> Dict[str, Any]:
    """A CV with every section type populated, in camelCase wire format."""
    return {
        "personalDetails": {
            "name": "Amina Njeri",
            "title": "Senior Backend Engineer",
            "email": "amina@example.com",
            "phone": "+254 700 000 000",
            "location": "Nairobi",
            "linkedin": "linkedin.com/in/amina",
        },
        "summary": "Backend engineer with eight years of experience building payment and lending platforms "
                   "for mobile-first markets, from first prototype to millions of monthly users.",
        "roles": ["Backend Engineer", "Tech Lead"],
        "experience": [
            {
                "role": "Senior Backend Engineer",
                "company": "PayCo",
                "years": "2020 - Present",
                "bullets": ["Designed the settlement service", "Led a team of five", "Cut infra cost by 30%"],
            },
            {
                "role": "Backend Engineer",
                "company": "LendCo",
                "years": "2016 - 2020",
                "bullets": ["Built the loan scoring API", "Migrated to PostgreSQL"],
            },
        ],
        "education": [{"degree": "BSc Computer Science", "institution": "University of Nairobi", "years": "2012 - 2016"}],
        "skills": ["Python", "Go", "PostgreSQL", "Kafka", "Docker", "Kubernetes", "AWS", "Terraform", "gRPC"],
        "projects": [{"title": "Open banking SDK", "description": "Python SDK for open banking APIs"}],
        "accomplishments": ["Shipped M-Pesa integration in two weeks"],
        "awards": [{"title": "Engineer of the Year", "issuer": "PayCo", "year": "2022"}],
        "certifications": [{"name": "AWS Solutions Architect", "issuer": "Amazon", "year": "2021"}],
        "languages": ["English", "Swahili"],
        "interests": ["Chess", "Running"],
        "publications": [{"title": "Idempotent payments at scale", "journal": "Engineering blog", "year": "2023"}],
        "volunteerWork": [{"organization": "Code Club", "role": "Mentor", "duration": "2019 - 2022"}],
        "additionalSections": [
            {"sectionName": "Patents", "content": "Method for reconciling mobile money ledgers (pending)."},
            {"sectionName": "References", "content": "Available on request."},
        ],
    }


@pytest.fixture
def write_cv_json(tmp_path: Path) -> Callable[..., Path]:
    def _write(data: Any, filename: str = "cv.json") -> Path:
        path = tmp_path / filename
        content = data if isinstance(data, str) else json.dumps(data)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
