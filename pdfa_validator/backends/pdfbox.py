"""Apache PDFBox preflight backend (PDF/A-1b).

PDFBox 3.x offers ``PreflightParser.validate(File)``, which catches its own
SyntaxValidationException and hands back the partial ValidationResult.
With PDFBox 2.x the parser is driven step by step, and a syntax failure can
only be reported from the bridged exception's message.
"""
import logging
from contextlib import ExitStack, closing
from typing import Any, List

from .base import BaseValidatorBackend, Completed, SyntacticFailure, ValidationOutcome
from ..exceptions import EngineFailure, IoFailure
from ..jvm import iterate_list, java_exception_class, java_exception_message
from ..models import Report, ValidationError

logger = logging.getLogger(__name__)

PREFLIGHT_PARSER = "org.apache.pdfbox.preflight.parser.PreflightParser"
PDFBOX_VERSION = "org.apache.pdfbox.util.Version"
JAVA_FILE = "java.io.File"
SYNTAX_EXCEPTION = "org.apache.pdfbox.preflight.exception.SyntaxValidationException"

# PreflightConstants.ERROR_SYNTAX_MAIN / ERROR_SYNTAX_COMMON
ERROR_SYNTAX_MAIN = "1"
ERROR_SYNTAX_COMMON = "1.0"


def is_syntax_error(error: ValidationError) -> bool:
    code = error.code or ""
    return code == ERROR_SYNTAX_MAIN or code.startswith(ERROR_SYNTAX_MAIN + ".")


class PdfBoxBackend(BaseValidatorBackend):
    """Validate PDF/A-1b conformance with PDFBox's PreflightParser."""

    name = "pdfbox"
    profile = "pdfa1b"
    profile_label = "PDF/A-1b"

    def validate(self, path: str) -> ValidationOutcome:
        self.check_readable(path)

        PreflightParser = self.bridge.autoclass(PREFLIGHT_PARSER)
        JavaException = self.bridge.exception_type

        logger.info(f"Running PDFBox preflight on {path}")

        try:
            if hasattr(PreflightParser, "validate"):
                return self._validate_file(path, PreflightParser)
            return self._validate_parsed(path, PreflightParser)
        except JavaException as e:
            # SyntaxValidationException is itself an IOException
            if java_exception_class(e) == SYNTAX_EXCEPTION:
                logger.info(f"Syntax validation failed for {path}")
                return SyntacticFailure(self._partial_report(path, e))
            if self.is_io_exception(e):
                raise IoFailure(path, e) from e
            raise EngineFailure(f"PDFBox failed on '{path}': {java_exception_message(e)}", e) from e

    def _validate_file(self, path: str, PreflightParser: Any) -> ValidationOutcome:
        """PDFBox 3.x: one static call, the document is closed by PDFBox."""
        File = self.bridge.autoclass(JAVA_FILE)
        result = PreflightParser.validate(File(path))
        if result is None:
            raise EngineFailure(f"Failed to verify document '{path}'")

        report = self.to_report(path, result)
        if any(is_syntax_error(error) for error in report.errors):
            return SyntacticFailure(report)
        return Completed(report)

    def _validate_parsed(self, path: str, PreflightParser: Any) -> ValidationOutcome:
        """PDFBox 2.x: parse, then validate the preflight document."""
        with ExitStack() as stack:
            parser = PreflightParser(path)
            # Syntax checks (stream lengths, EOL markers) happen here
            parser.parse()
            document = stack.enter_context(closing(parser.getPreflightDocument()))
            document.validate()
            result = document.getResult()

        if result is None:
            raise EngineFailure(f"Failed to verify document '{path}'")
        return Completed(self.to_report(path, result))

    def engine_version(self) -> str:
        Version = self.bridge.autoclass(PDFBOX_VERSION)
        return str(self.call_engine("read its version", Version.getVersion))

    def to_report(self, path: str, result: Any) -> Report:
        """Normalize an org.apache.pdfbox.preflight.ValidationResult."""
        errors = self.to_errors(result.getErrorsList())
        return Report(
            filename=path,
            profile=self.profile,
            profile_label=self.profile_label,
            valid=bool(result.isValid()) and not errors,
            errors=errors,
        )

    def to_errors(self, java_errors: Any) -> List[ValidationError]:
        if java_errors is None:
            return []
        return [
            ValidationError(
                index=index,
                code=self.to_text(error.getErrorCode()),
                details=self.to_text(error.getDetails()) or "",
                page=self.to_text(error.getPageNumber()),
            )
            for index, error in enumerate(iterate_list(java_errors))
        ]

    def _partial_report(self, path: str, exc: BaseException) -> Report:
        get_result = getattr(exc, "getResult", None)
        if get_result is not None:
            report = self.to_report(path, get_result())
            if report.errors:
                return report

        error = ValidationError(
            index=0,
            code=ERROR_SYNTAX_COMMON,
            details=java_exception_message(exc),
        )
        return Report(
            filename=path,
            profile=self.profile,
            profile_label=self.profile_label,
            valid=False,
            errors=[error],
        )
