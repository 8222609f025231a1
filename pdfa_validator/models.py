"""Data models for validation reports.

A Report is the normalized outcome of validating one PDF, independent of
the engine that produced it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class OutputFormat(Enum):
    """Shape of the text written to stdout."""
    PLAIN = "plain"
    XML = "xml"                      # <result> line followed by <error> lines
    PREFLIGHT_XML = "preflight-xml"  # <qoppapdfpreflight> document


@dataclass
class ValidationError:
    """A single conformance issue reported by the engine."""
    index: int
    details: str
    code: Optional[str] = None
    page: Optional[str] = None
    fixable: Optional[bool] = None


@dataclass
class PreflightInfo:
    """Information about the preflight run itself."""
    computer_name: Optional[str] = None
    operating_system: Optional[str] = None
    user_name: Optional[str] = None
    version: Optional[str] = None
    date_time: Optional[datetime] = None
    duration_millis: Optional[int] = None


@dataclass
class DocumentInfo:
    """Document information dictionary of the validated PDF."""
    author: Optional[str] = None
    subject: Optional[str] = None
    title: Optional[str] = None
    producer: Optional[str] = None
    creator: Optional[str] = None
    keywords: Optional[str] = None
    creation_date: Optional[datetime] = None
    modification_date: Optional[datetime] = None


@dataclass
class Report:
    """Outcome of validating a single file against one profile.

    Attributes:
        filename: Input path exactly as given on the command line
        profile: Profile identifier, also used as XML attribute name
            (e.g. 'pdfa1b', 'pdfa_2b_')
        profile_label: Human-readable profile name (e.g. 'PDF/A-1b')
        valid: Overall pass/fail
        errors: Issues in the order the engine produced them
        preflight_info: Run metadata, when the engine supplies it
        document_info: PDF metadata, when the engine supplies it
    """
    filename: str
    profile: str
    profile_label: str
    valid: bool
    errors: List[ValidationError] = field(default_factory=list)
    preflight_info: Optional[PreflightInfo] = None
    document_info: Optional[DocumentInfo] = None

    def __post_init__(self):
        if self.valid and self.errors:
            raise ValueError("A valid report cannot carry errors")
        for position, error in enumerate(self.errors):
            if error.index != position:
                raise ValueError(
                    f"Error index {error.index} does not match its position {position}"
                )

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def __str__(self) -> str:
        status = "VALID" if self.valid else "INVALID"
        return f"{self.filename}: {status} ({self.profile_label}, {self.error_count} error(s))"
