"""
Index entry, job stub and salary record models.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Optional, Union


# Normalized field name -> [value] or [low, high]
FieldMap = dict[str, list[float]]

# Normalized field name -> number, epoch seconds or raw text
FootnoteMap = dict[str, Union[float, int, str]]


@dataclass(frozen=True)
class SalaryRecord:
    """Salary figures extracted from one job detail page."""

    annual: FieldMap = field(default_factory=dict)
    hourly: FieldMap = field(default_factory=dict)
    footnote: FootnoteMap = field(default_factory=dict)

    # Which table the annual figures came from: annual, hourly_fallback or None
    source: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.annual or self.hourly or self.footnote)

    def unparseable_fields(self) -> list[str]:
        """Return dotted names of salary fields holding an unparseable value."""
        names = []
        for section, values in (("annual", self.annual), ("hourly", self.hourly)):
            for name, numbers in values.items():
                if any(math.isnan(n) for n in numbers):
                    names.append(f"{section}.{name}")
        return names

    @classmethod
    def from_dict(cls, data: dict) -> "SalaryRecord":
        """Create a SalaryRecord from a dictionary, ignoring unknown keys."""
        return cls(
            annual={k: list(v) for k, v in (data.get("annual") or {}).items()},
            hourly={k: list(v) for k, v in (data.get("hourly") or {}).items()},
            footnote=dict(data.get("footnote") or {}),
            source=data.get("source"),
        )

    def to_dict(self) -> dict:
        """Convert to plain containers. Empty sections are omitted."""
        data: dict = {}
        if self.annual:
            data["annual"] = {k: list(v) for k, v in self.annual.items()}
        if self.hourly:
            data["hourly"] = {k: list(v) for k, v in self.hourly.items()}
        if self.footnote:
            data["footnote"] = dict(self.footnote)
        return data


@dataclass(frozen=True)
class JobStub:
    """A job title listed on a letter page."""

    name: str
    data_profiles_number: str
    self_url: str
    salary: SalaryRecord = field(default_factory=SalaryRecord)

    def with_salary(self, salary: SalaryRecord) -> "JobStub":
        """Return a copy of this stub carrying the given salary record."""
        return replace(self, salary=salary)

    @classmethod
    def from_dict(cls, data: dict) -> "JobStub":
        """Create a JobStub from a dictionary using ``self`` for the URL."""
        return cls(
            name=data.get("name", ""),
            data_profiles_number=data.get("data_profiles_number", ""),
            self_url=data.get("self", ""),
            salary=SalaryRecord.from_dict(data.get("salary") or {}),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "data_profiles_number": self.data_profiles_number,
            "self": self.self_url,
            "salary": self.salary.to_dict(),
        }


@dataclass(frozen=True)
class PageIndexEntry:
    """One letter of the alphabetical index."""

    id: str
    self_url: str
    jobs: tuple[JobStub, ...] = ()

    def with_jobs(self, jobs) -> "PageIndexEntry":
        """Return a copy of this entry holding the given job stubs."""
        return replace(self, jobs=tuple(jobs))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "self": self.self_url,
            "jobs": [job.to_dict() for job in self.jobs],
        }
