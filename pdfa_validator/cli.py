#!/usr/bin/env python3
"""pdfa-validator CLI - Check a PDF file for PDF/A conformance.

Usage:
    pdfa-validate <file>
    pdfa-validate --xml <file>
    pdfa-preflight <key>
    pdfa-preflight <key> <file>

Commands:
    pdfa-validate   PDF/A-1b validation with Apache PDFBox, plain text or XML
    pdfa-preflight  PDF/A validation with Qoppa jPDFPreflight, always XML;
                    with only a license key, print the engine version

Reports go to stdout, diagnostics to stderr. The exit status is 0 whenever
a validation ran (pass or fail) and 1 for usage, I/O and engine errors.

Examples:
    # Human-readable result
    pdfa-validate paper.pdf

    # Machine-readable result
    pdfa-validate --xml paper.pdf

    # PDF/A-2b with Qoppa
    PDFA_PREFLIGHT_PROFILE=2b pdfa-preflight $QOPPA_KEY paper.pdf
"""

import sys
import traceback
from dataclasses import dataclass
from typing import List, Optional, Union

from .backends import get_backend
from .config import Config
from .exceptions import ConfigurationError, EngineFailure, IoFailure
from .models import OutputFormat
from .reporter import emit
from .utils.logging import setup_logging

XML_FLAG = "--xml"

PLAIN_USAGE = (
    "Require exactly one filename as command line argument "
    "or '--xml' as first argument followed by filename"
)
KEY_GATED_USAGE = "Require two arguments: PDFPreflight-key PDF-filename"


@dataclass
class PrintVersion:
    """Install the license key and print the engine version."""
    key: str


@dataclass
class Validate:
    """Validate one file and render the report in the given format."""
    path: str
    output_format: OutputFormat
    key: Optional[str] = None


@dataclass
class UsageError:
    """The arguments match none of the accepted forms."""
    message: str


Invocation = Union[PrintVersion, Validate, UsageError]


def parse_invocation(argv: List[str], key_gated: bool = False) -> Invocation:
    """Classify command-line arguments.

    Arguments are taken verbatim; nothing is looked up on disk.

    Args:
        argv: Arguments without the program name
        key_gated: Use the license-key grammar of pdfa-preflight

    Returns:
        PrintVersion, Validate or UsageError
    """
    if key_gated:
        if len(argv) == 1:
            return PrintVersion(key=argv[0])
        if len(argv) == 2:
            return Validate(path=argv[1], output_format=OutputFormat.PREFLIGHT_XML, key=argv[0])
        return UsageError(KEY_GATED_USAGE)

    if len(argv) == 1:
        return Validate(path=argv[0], output_format=OutputFormat.PLAIN)
    if len(argv) == 2 and argv[0] == XML_FLAG:
        return Validate(path=argv[1], output_format=OutputFormat.XML)
    return UsageError(PLAIN_USAGE)


def run(invocation: Invocation, backend_name: str, config: Config) -> int:
    """Carry out a parsed invocation and return the exit code."""
    if isinstance(invocation, UsageError):
        print(invocation.message, file=sys.stderr)
        return 1

    try:
        backend = get_backend(backend_name, config=config)

        if isinstance(invocation, PrintVersion):
            backend.configure(invocation.key)
            print(f"Version: {backend.engine_version()}", file=sys.stderr)
            return 0

        backend.configure(invocation.key)
        outcome = backend.validate(invocation.path)
    except IoFailure as e:
        print(str(e), file=sys.stderr)
        return 1
    except EngineFailure as e:
        print(str(e), file=sys.stderr)
        if e.cause is not None:
            traceback.print_exception(type(e.cause), e.cause, e.cause.__traceback__, file=sys.stderr)
        return 1
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return emit(outcome.report, invocation.output_format)


def _main(argv: Optional[List[str]], backend_name: str, key_gated: bool) -> int:
    if argv is None:
        argv = sys.argv[1:]

    invocation = parse_invocation(argv, key_gated=key_gated)
    if isinstance(invocation, UsageError):
        return run(invocation, backend_name, Config())

    config = Config.from_env()
    setup_logging(config.log_level, log_file=config.log_file)
    return run(invocation, backend_name, config)


def main(argv: List[str] = None) -> int:
    """Entry point for pdfa-validate (Apache PDFBox)."""
    return _main(argv, "pdfbox", key_gated=False)


def preflight_main(argv: List[str] = None) -> int:
    """Entry point for pdfa-preflight (Qoppa jPDFPreflight)."""
    return _main(argv, "qoppa", key_gated=True)


if __name__ == "__main__":
    sys.exit(main())
