"""Base validator backend interface."""
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional, Union

from ..config import Config
from ..exceptions import EngineFailure, IoFailure
from ..jvm import JavaBridge, java_exception_class, java_exception_message
from ..models import Report

# Any subclass of this means the input file itself could not be read
IO_EXCEPTION = "java.io.IOException"


@dataclass
class Completed:
    """Engine ran to completion and produced a report."""
    report: Report


@dataclass
class SyntacticFailure:
    """Parsing failed, but the engine supplied a partial (invalid) report."""
    report: Report


ValidationOutcome = Union[Completed, SyntacticFailure]


class BaseValidatorBackend(ABC):
    """Abstract base class for PDF/A validation backends.

    Subclasses wrap one external engine and normalize its native result
    objects into a Report.
    """

    name: str = ""
    profile: str = ""
    profile_label: str = ""

    def __init__(self, config: Optional[Config] = None, bridge: Optional[JavaBridge] = None):
        """Initialize backend.

        Args:
            config: Configuration object
            bridge: JVM bridge, created from config when not given
        """
        self.config = config or Config()
        self.bridge = bridge or JavaBridge(self.config)

    @abstractmethod
    def validate(self, path: str) -> ValidationOutcome:
        """Validate a PDF file.

        Args:
            path: Path to the PDF, as given by the user

        Returns:
            Completed or SyntacticFailure, each carrying a Report

        Raises:
            IoFailure: If the file cannot be opened or read
            EngineFailure: If the engine returns no result or throws
        """
        pass

    @abstractmethod
    def engine_version(self) -> str:
        """Version string of the underlying engine."""
        pass

    def configure(self, key: Optional[str]) -> None:
        """Install a license key. Engines without keys ignore it."""
        pass

    def check_readable(self, path: str) -> None:
        """Raise IoFailure unless path is a readable regular file."""
        if not os.path.isfile(path) or not os.access(path, os.R_OK):
            raise IoFailure(path)

    def is_io_exception(self, exc: BaseException) -> bool:
        return self.bridge.is_subclass(java_exception_class(exc), IO_EXCEPTION)

    def call_engine(self, action: str, func: Callable, *args: Any) -> Any:
        """Call into the engine outside of validation (license key, version).

        Raises:
            EngineFailure: If the Java side throws
        """
        JavaException = self.bridge.exception_type
        try:
            return func(*args)
        except JavaException as e:
            raise EngineFailure(f"{self.name} failed to {action}: {java_exception_message(e)}", e) from e

    @staticmethod
    def to_datetime(java_date: Any) -> Optional[datetime]:
        """Convert a java.util.Date to a local datetime."""
        if java_date is None:
            return None
        return datetime.fromtimestamp(java_date.getTime() / 1000.0)

    @staticmethod
    def to_text(value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)
