import sys
from pathlib import Path
from typing import Any, Dict

import pytest

project_root = Path(__file__).resolve().parents[1]
src_path = project_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from resume_generator.schema import ResumeData  # noqa: E402


@pytest.fixture
def sample_resume_dict() -> Dict[str, Any]:
    """A complete resume in the camelCase shape the form layer stores."""
    return {
        "personalInfo": {
            "fullName": "Jane Doe",
            "phone": "555-0100",
            "email": "jane@example.com",
            "location": "Austin, TX",
            "linkedinUrl": "https://linkedin.com/in/janedoe",
            "githubUrl": "https://github.com/janedoe",
            "portfolioUrl": "https://janedoe.dev",
        },
        "education": {
            "universityName": "State University",
            "degree": "B.S. Computer Science",
            "minor": "Mathematics",
            "expectedGraduation": "May 2025",
            "location": "Austin, TX",
            "gpa": "3.9",
            "relevantCourses": "Algorithms, Operating Systems",
            "honors": "Dean's List",
        },
        "workExperience": [
            {
                "id": "1",
                "companyName": "Acme & Sons",
                "position": "Software Engineer Intern",
                "startDate": "May 2024",
                "endDate": "Aug 2024",
                "location": "Remote",
                "achievements": ["Cut build time by 40%", "", "Wrote the C# SDK"],
            }
        ],
        "projects": [
            {
                "id": "2",
                "name": "resume_tool",
                "websiteUrl": "https://resume.example.com",
                "sourceCodeUrl": "https://github.com/janedoe/resume_tool",
                "technologies": "Python, LaTeX",
                "description": ["Renders LaTeX from JSON"],
            }
        ],
        "leadership": [
            {
                "id": "3",
                "organizationName": "ACM Chapter",
                "role": "President",
                "startDate": "2023",
                "endDate": "Present",
                "urls": ["https://acm.example.org", ""],
                "achievements": ["Grew membership to 200+"],
            }
        ],
        "technicalSkills": {
            "programmingLanguages": "Python, C++, C#",
            "developerTools": "Git, Docker",
            "librariesFrameworks": "pydantic, React",
        },
    }


@pytest.fixture
def sample_resume(sample_resume_dict) -> ResumeData:
    return ResumeData.from_dict(sample_resume_dict)
