"""
Resume data model.

The form layer persists resume drafts as camelCase JSON (``fullName``,
``workExperience`` ...). These models accept that shape directly and also
snake_case keyword arguments from Python code. All models are frozen: the
LaTeX core only ever reads a snapshot.

Content problems never raise here. Missing text becomes ``""``, missing
lists become ``[]`` and numbers are turned into text. Any other non-string
in a text field (booleans, objects, arrays) is treated as ``""``, so a
half-filled form still renders. Shape problems (a list field that is not a
list, a section that is not an object) are caller bugs and surface as
pydantic ``ValidationError``.
"""
from __future__ import annotations

from typing import Any, Dict, List, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    # numbers keep their text (a JSON GPA of 3.9); anything else is blank
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


class ResumeModel(BaseModel):
    """Base for every resume section model.

    Frozen is shallow: list fields are plain lists. The builders only read
    them and treat every model as a snapshot.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def _fill_missing(cls, value: Any, info: ValidationInfo) -> Any:
        annotation = cls.model_fields[info.field_name].annotation
        if annotation is str:
            return _as_text(value)
        if get_origin(annotation) is list:
            if value is None:
                return []
            if get_args(annotation) == (str,) and isinstance(value, (list, tuple)):
                return [_as_text(item) for item in value]
            return value
        if value is None:
            return {}
        return value


class PersonalInfo(ResumeModel):
    full_name: str = ""
    phone: str = ""
    email: str = ""
    location: str = ""
    linkedin_url: str = ""
    github_url: str = ""
    portfolio_url: str = ""


class Education(ResumeModel):
    """A single education entry; the resume has exactly one."""

    university_name: str = ""
    degree: str = ""
    minor: str = ""
    expected_graduation: str = ""
    location: str = ""
    gpa: str = ""
    relevant_courses: str = ""
    honors: str = ""


class WorkExperience(ResumeModel):
    id: str = ""
    company_name: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    achievements: List[str] = Field(default_factory=list)


class Project(ResumeModel):
    id: str = ""
    name: str = ""
    website_url: str = ""
    source_code_url: str = ""
    technologies: str = ""
    description: List[str] = Field(default_factory=list)


class Leadership(ResumeModel):
    id: str = ""
    organization_name: str = ""
    role: str = ""
    start_date: str = ""
    end_date: str = ""
    urls: List[str] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)


class TechnicalSkills(ResumeModel):
    programming_languages: str = ""
    developer_tools: str = ""
    libraries_frameworks: str = ""


class ResumeData(ResumeModel):
    """Aggregate root handed to the LaTeX builder."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    education: Education = Field(default_factory=Education)
    work_experience: List[WorkExperience] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    leadership: List[Leadership] = Field(default_factory=list)
    technical_skills: TechnicalSkills = Field(default_factory=TechnicalSkills)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeData":
        """Build from the persisted camelCase (or snake_case) JSON shape."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Dump to the camelCase JSON shape used for storage and export."""
        return self.model_dump(by_alias=True)
