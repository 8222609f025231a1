"""Render validation reports as plain text or XML.

Three shapes are supported (see OutputFormat):

- plain text, one banner line plus one line per error
- a ``<result>`` line followed by ``<error>`` lines
- a ``<qoppapdfpreflight>`` document with run and document metadata

All strings placed in XML go through escape_xml(), and every error detail
goes through sanitize_details() first.
"""

import re
import sys
from datetime import datetime
from typing import List, Optional, TextIO
from xml.sax.saxutils import escape

from .models import DocumentInfo, OutputFormat, PreflightInfo, Report, ValidationError

BUFFER_MARKER = "; buffer"

# Characters that may not appear anywhere in an XML 1.0 document
_XML_ILLEGAL = re.compile("[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def sanitize_details(details: str) -> str:
    """Drop a trailing raw byte buffer from an error description.

    The text is cut at the first "; buffer", keeping the semicolon.
    """
    head, marker, _ = details.partition(BUFFER_MARKER)
    if not marker:
        return details
    return head + ";"


def escape_xml(text: str, attribute: bool = False) -> str:
    """Escape text for XML character data or, with attribute=True, a
    double-quoted attribute value.

    ``&``, ``<`` and ``>`` are replaced in that order.
    """
    text = _XML_ILLEGAL.sub("", text)
    if attribute:
        return escape(text, {'"': "&quot;"})
    return escape(text)


def render_plain(report: Report) -> str:
    """Format a report as human-readable text."""
    if report.valid:
        return f"The file '{report.filename}' is a valid {report.profile_label} file\n"

    lines = [
        f"The file '{report.filename}' is NOT {report.profile_label} valid, "
        f"{report.error_count} error(s)"
    ]
    for error in report.errors:
        line = f"{error.index:6d}: {sanitize_details(error.details)}"
        if error.page is not None:
            line += f" on page {error.page}"
        if error.code is not None:
            line += f" (error code {error.code})"
        lines.append(line)
    return "\n".join(lines) + "\n"


def _format_error_element(error: ValidationError) -> str:
    attributes = f' id="{error.index}"'
    if error.page is not None:
        attributes += f' page="{escape_xml(error.page, attribute=True)}"'
    if error.code is not None:
        attributes += f' errorcode="{escape_xml(error.code, attribute=True)}"'
    return f"<error{attributes}>{escape_xml(sanitize_details(error.details))}</error>"


def render_xml(report: Report) -> str:
    """Format a report as a <result> line followed by one <error> line per error."""
    attribute = escape_xml(report.profile)
    if report.valid:
        return (
            f'<result {attribute}="yes">The file \'{escape_xml(report.filename)}\' '
            f"is a valid {escape_xml(report.profile_label)} file</result>\n"
        )

    lines = [
        f'<result {attribute}="no">The file \'{escape_xml(report.filename)}\' '
        f"is NOT {escape_xml(report.profile_label)} valid, "
        f"{report.error_count} error(s)</result>"
    ]
    lines.extend(_format_error_element(error) for error in report.errors)
    return "\n".join(lines) + "\n"


def _information(tag: str, value: Optional[str]) -> List[str]:
    if value is None:
        return []
    value = value.strip()
    if not value:
        return []
    return [f"<{tag}>{escape_xml(value)}</{tag}>"]


def _date(base: str, value: Optional[datetime]) -> List[str]:
    if value is None:
        return []
    return [
        f'<date base="{base}" year="{value.year}" month="{value.month}" '
        f'day="{value.day}" hour="{value.hour}" minute="{value.minute}" '
        f'second="{value.second}">{escape_xml(str(value))}</date>'
    ]


def _preflight_info_lines(info: PreflightInfo) -> List[str]:
    lines = ["<preflightinfo>"]
    lines += _information("computername", info.computer_name)
    lines += _information("operatingsystem", info.operating_system)
    lines += _information("username", info.user_name)
    lines += _information("version", info.version)
    lines += _date("datetime", info.date_time)
    if info.duration_millis is not None:
        lines += _information("duration-milliseconds", str(info.duration_millis))
    lines.append("</preflightinfo>")
    return lines


def _document_info_lines(info: DocumentInfo) -> List[str]:
    lines = ["<documentinfo>"]
    lines += _information("author", info.author)
    lines += _information("subject", info.subject)
    lines += _information("title", info.title)
    lines += _information("producer", info.producer)
    lines += _information("creator", info.creator)
    lines += _information("keywords", info.keywords)
    lines += _date("creation", info.creation_date)
    lines += _date("modification", info.modification_date)
    lines.append("</documentinfo>")
    return lines


def _issue_element(error: ValidationError) -> str:
    attributes = ""
    if error.page is not None:
        attributes += f' page="{escape_xml(error.page, attribute=True)}"'
    attributes += f' isfixable="{"yes" if error.fixable else "no"}"'
    return f"<issue{attributes}>{escape_xml(sanitize_details(error.details))}</issue>"


def render_preflight_xml(report: Report) -> str:
    """Format a report as a <qoppapdfpreflight> document.

    The <preflightinfo>, <documentinfo> and <issues> sections only appear
    when the report has something to put in them.
    """
    lines = [
        f'<qoppapdfpreflight {escape_xml(report.profile)}="{"yes" if report.valid else "no"}">'
    ]

    if report.preflight_info is not None:
        lines += _preflight_info_lines(report.preflight_info)

    if report.document_info is not None:
        lines += _document_info_lines(report.document_info)

    if report.errors:
        lines.append(f'<issues count="{report.error_count}">')
        lines.extend(_issue_element(error) for error in report.errors)
        lines.append("</issues>")

    lines.append("</qoppapdfpreflight>")
    return "\n".join(lines) + "\n"


RENDERERS = {
    OutputFormat.PLAIN: render_plain,
    OutputFormat.XML: render_xml,
    OutputFormat.PREFLIGHT_XML: render_preflight_xml,
}


def render(report: Report, output_format: OutputFormat) -> str:
    """Format a report in the requested shape."""
    return RENDERERS[output_format](report)


def emit(report: Report, output_format: OutputFormat, stream: Optional[TextIO] = None) -> int:
    """Write a rendered report to stdout (or stream).

    Returns:
        Process exit code; a validation that ran is a success, pass or fail
    """
    if stream is None:
        stream = sys.stdout
    stream.write(render(report, output_format))
    stream.flush()
    return 0
