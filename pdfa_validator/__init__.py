"""pdfa-validator - PDF/A conformance checking from the command line.

Drives an external validation engine (Apache PDFBox preflight or Qoppa
jPDFPreflight, both through the JVM) against a single PDF file and prints
the result as plain text or XML.

Usage:
    from pdfa_validator import Config, get_backend, render, OutputFormat

    backend = get_backend("pdfbox", config=Config.from_env())
    outcome = backend.validate("paper.pdf")
    print(render(outcome.report, OutputFormat.PLAIN), end="")
"""

from .config import Config
from .exceptions import (
    PdfaValidatorError,
    ConfigurationError,
    IoFailure,
    EngineFailure,
)
from .models import Report, ValidationError, PreflightInfo, DocumentInfo, OutputFormat
from .backends import get_backend, PdfBoxBackend, QoppaBackend, Completed, SyntacticFailure
from .reporter import render, emit

__version__ = "1.0.0"
__all__ = [
    "Config",
    "Report",
    "ValidationError",
    "PreflightInfo",
    "DocumentInfo",
    "OutputFormat",
    "get_backend",
    "PdfBoxBackend",
    "QoppaBackend",
    "Completed",
    "SyntacticFailure",
    "render",
    "emit",
    "PdfaValidatorError",
    "ConfigurationError",
    "IoFailure",
    "EngineFailure",
]
