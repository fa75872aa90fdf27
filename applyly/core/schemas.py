import uuid
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator
from pydantic.alias_generators import to_camel


PRESENT = "Present"


def _new_id() -> str:
    return str(uuid.uuid4())


class ResumeModel(BaseModel):
    """Base for every resume entity: immutable (collections are tuples), camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class DateRange(ResumeModel):
    start_month: str = Field(default="", description="Full month name or empty")
    start_year: str = Field(default="", description="4-digit year or empty")
    end_month: str = Field(default="", description="Full month name or empty")
    end_year: str = Field(default="", description="4-digit year, 'Present', or empty")

    @model_validator(mode="after")
    def _present_has_no_end_month(self) -> "DateRange":
        if self.end_year == PRESENT and self.end_month:
            raise ValueError("end_month must be empty when end_year is 'Present'")
        return self

    @property
    def is_empty(self) -> bool:
        return not (self.start_month or self.start_year or self.end_month or self.end_year)


class PersonalInfo(ResumeModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    website: str = ""
    github: str = ""
    address: str = ""


class WorkExperience(ResumeModel):
    id: str = Field(default_factory=_new_id)
    title: str = ""
    company: str = ""
    location: str = ""
    dates: DateRange = Field(default_factory=DateRange)
    description: str = ""

    @computed_field
    @property
    def present(self) -> bool:
        return self.dates.end_year == PRESENT


class Education(ResumeModel):
    id: str = Field(default_factory=_new_id)
    school: str = ""
    degree: str = ""
    field: str = ""
    location: str = ""
    dates: DateRange = Field(default_factory=DateRange)
    gpa: str = Field(default="", description="GPA as printed, empty when absent")
    description: str = ""

    @computed_field
    @property
    def present(self) -> bool:
        return self.dates.end_year == PRESENT


class LeadershipExperience(ResumeModel):
    id: str = Field(default_factory=_new_id)
    role: str = ""
    organization: str = ""
    location: str = ""
    dates: DateRange = Field(default_factory=DateRange)
    description: str = ""

    @computed_field
    @property
    def present(self) -> bool:
        return self.dates.end_year == PRESENT


class Award(ResumeModel):
    id: str = Field(default_factory=_new_id)
    title: str = ""
    issuer: str = ""
    date: str = ""
    description: str = ""


class Author(ResumeModel):
    first_name: str = ""
    last_name: str = ""


class Publication(ResumeModel):
    id: str = Field(default_factory=_new_id)
    title: str = ""
    authors: str = Field(default="", description="Display string, authors separated by '; '")
    authors_list: Tuple[Author, ...] = Field(default_factory=tuple)
    journal: str = ""
    date: str = ""
    url: str = ""
    description: str = ""

    def with_authors(self, authors: str) -> "Publication":
        """Return a copy with `authors` replaced and `authors_list` re-derived from it."""
        # Import here to avoid circular imports
        from applyly.core.publication_parser import parse_authors_to_list

        return self.model_copy(update={"authors": authors, "authors_list": tuple(parse_authors_to_list(authors))})


class Grant(ResumeModel):
    id: str = Field(default_factory=_new_id)
    title: str = ""
    funder: str = ""
    amount: str = ""
    dates: DateRange = Field(default_factory=DateRange)
    description: str = ""


class TeachingExperience(ResumeModel):
    id: str = Field(default_factory=_new_id)
    course: str = ""
    institution: str = ""
    role: str = ""
    dates: DateRange = Field(default_factory=DateRange)
    description: str = ""


class Conference(ResumeModel):
    id: str = Field(default_factory=_new_id)
    title: str = ""
    conference: str = ""
    location: str = ""
    date: str = ""
    description: str = ""


class ResumeData(ResumeModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    work_experience: Tuple[WorkExperience, ...] = Field(default_factory=tuple)
    education: Tuple[Education, ...] = Field(default_factory=tuple)
    leadership_experience: Tuple[LeadershipExperience, ...] = Field(default_factory=tuple)
    awards: Tuple[Award, ...] = Field(default_factory=tuple)
    publications: Tuple[Publication, ...] = Field(default_factory=tuple)
    grants: Tuple[Grant, ...] = Field(default_factory=tuple)
    teaching_experience: Tuple[TeachingExperience, ...] = Field(default_factory=tuple)
    conferences: Tuple[Conference, ...] = Field(default_factory=tuple)
    skills: Tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("skills")
    @classmethod
    def _dedupe_skills(cls, skills: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(dict.fromkeys(skills))

    def entity_ids(self) -> List[str]:
        """All entity identifiers in document order."""
        groups = (
            self.work_experience, self.education, self.leadership_experience, self.awards,
            self.publications, self.grants, self.teaching_experience, self.conferences,
        )
        return [entity.id for group in groups for entity in group]
