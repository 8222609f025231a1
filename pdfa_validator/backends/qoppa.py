"""Qoppa jPDFPreflight backend (parametric PDF/A profiles, license key)."""
import logging
from contextlib import ExitStack, closing
from typing import Any, List, Optional

from .base import BaseValidatorBackend, Completed, ValidationOutcome
from ..config import Config
from ..exceptions import ConfigurationError, EngineFailure, IoFailure
from ..jvm import JavaBridge, iterate_list, java_exception_message
from ..models import DocumentInfo, PreflightInfo, Report, ValidationError

logger = logging.getLogger(__name__)

PDF_PREFLIGHT = "com.qoppa.pdfPreflight.PDFPreflight"
PROFILE_PACKAGE = "com.qoppa.pdfPreflight.profiles"

# Profile token -> verification class in PROFILE_PACKAGE
PROFILES = {
    "1a": "PDFA_1_A_Verification",
    "1b": "PDFA_1_B_Verification",
    "2a": "PDFA_2_A_Verification",
    "2b": "PDFA_2_B_Verification",
    "2u": "PDFA_2_U_Verification",
    "3a": "PDFA_3_A_Verification",
    "3b": "PDFA_3_B_Verification",
    "3u": "PDFA_3_U_Verification",
}


class QoppaBackend(BaseValidatorBackend):
    """Validate PDF/A conformance with Qoppa's PDFPreflight.

    The profile is chosen by token (see PROFILES); the report's profile
    identifier is ``pdfa_<token>_``, e.g. ``pdfa_2b_``.
    """

    name = "qoppa"

    def __init__(
        self,
        config: Optional[Config] = None,
        bridge: Optional[JavaBridge] = None,
        profile_token: Optional[str] = None,
    ):
        super().__init__(config, bridge)

        token = (profile_token or self.config.preflight_profile).lower()
        if token not in PROFILES:
            raise ConfigurationError(
                f"Unknown PDF/A profile '{token}'. Expected one of: {', '.join(PROFILES)}"
            )

        self.profile_token = token
        self.profile = f"pdfa_{token}_"
        self.profile_label = f"PDF/A-{token}"
        self._key = None

    def configure(self, key: Optional[str]) -> None:
        self._key = key
        if key is not None:
            PDFPreflight = self.bridge.autoclass(PDF_PREFLIGHT)
            self.call_engine("accept the license key", PDFPreflight.setKey, key)

    def engine_version(self) -> str:
        PDFPreflight = self.bridge.autoclass(PDF_PREFLIGHT)
        return str(self.call_engine("read its version", PDFPreflight.getVersion))

    def validate(self, path: str) -> ValidationOutcome:
        self.check_readable(path)

        PDFPreflight = self.bridge.autoclass(PDF_PREFLIGHT)
        Verification = self.bridge.autoclass(f"{PROFILE_PACKAGE}.{PROFILES[self.profile_token]}")
        JavaException = self.bridge.exception_type

        logger.info(f"Running Qoppa preflight ({self.profile_label}) on {path}")

        try:
            with ExitStack() as stack:
                preflight = PDFPreflight(path, None)
                if hasattr(preflight, "close"):
                    stack.enter_context(closing(preflight))
                results = preflight.verifyDocument(Verification(), None)
        except JavaException as e:
            if self.is_io_exception(e):
                raise IoFailure(path, e) from e
            raise EngineFailure(f"PDFPreflight failed on '{path}': {java_exception_message(e)}", e) from e

        if results is None:
            raise EngineFailure(f"Failed to verify document '{path}'")

        return Completed(self.to_report(path, results))

    def to_report(self, path: str, results: Any) -> Report:
        """Normalize a com.qoppa.pdfPreflight.results.PreflightResults."""
        preflight_info = self.to_preflight_info(results.getPFInfo())
        if preflight_info is None:
            logger.warning("PreflightInfo is invalid")

        document_info = self.to_document_info(results.getDocumentInfo())
        if document_info is None:
            logger.warning("DocumentInfo is invalid")

        records = results.getResults()
        if records is None:
            logger.warning("List of ResultRecord is invalid")
        errors = self.to_errors(records)

        return Report(
            filename=path,
            profile=self.profile,
            profile_label=self.profile_label,
            valid=bool(results.isSuccessful()) and not errors,
            errors=errors,
            preflight_info=preflight_info,
            document_info=document_info,
        )

    def to_errors(self, records: Any) -> List[ValidationError]:
        if records is None:
            return []
        return [
            ValidationError(
                index=index,
                details=self.to_text(record.getDetail()) or "",
                page=self.to_text(record.getPageNumber()),
                fixable=bool(record.isFixable()),
            )
            for index, record in enumerate(iterate_list(records))
        ]

    def to_preflight_info(self, info: Any) -> Optional[PreflightInfo]:
        if info is None:
            return None
        duration = info.getDuration()
        return PreflightInfo(
            computer_name=self.to_text(info.getComputerName()),
            operating_system=self.to_text(info.getOSInfo()),
            user_name=self.to_text(info.getUserName()),
            version=self.to_text(info.getVersion()),
            date_time=self.to_datetime(info.getDateTime()),
            duration_millis=int(duration) if duration is not None else None,
        )

    def to_document_info(self, info: Any) -> Optional[DocumentInfo]:
        if info is None:
            return None
        return DocumentInfo(
            author=self.to_text(info.getAuthor()),
            subject=self.to_text(info.getSubject()),
            title=self.to_text(info.getTitle()),
            producer=self.to_text(info.getProducer()),
            creator=self.to_text(info.getCreator()),
            keywords=self.to_text(info.getKeywords()),
            creation_date=self.to_datetime(info.getCreationDate()),
            modification_date=self.to_datetime(info.getModDate()),
        )
