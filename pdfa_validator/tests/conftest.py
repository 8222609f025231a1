"""Shared fixtures: a fake JVM bridge standing in for pyjnius."""

from datetime import datetime
from types import SimpleNamespace

import pytest

from pdfa_validator.exceptions import ConfigurationError


class FakeJavaException(Exception):
    """Mimics jnius.JavaException (classname / innermessage)."""

    def __init__(self, classname, message=""):
        super().__init__(f"JVM exception occurred: {message} {classname}")
        self.classname = classname
        self.innermessage = message


class FakeSyntaxValidationException(FakeJavaException):
    """A syntax exception that still exposes its partial ValidationResult."""

    def __init__(self, result, message="Failed to parse"):
        super().__init__(
            "org.apache.pdfbox.preflight.exception.SyntaxValidationException", message
        )
        self._result = result

    def getResult(self):
        return self._result


class FakeList:
    """Minimal java.util.List."""

    def __init__(self, items):
        self._items = list(items)

    def size(self):
        return len(self._items)

    def get(self, i):
        return self._items[i]


class FakeDate:
    """Minimal java.util.Date."""

    def __init__(self, value: datetime):
        self._millis = int(value.timestamp() * 1000)

    def getTime(self):
        return self._millis


# Superclass of each fake Java exception class
JAVA_PARENTS = {
    "java.io.FileNotFoundException": "java.io.IOException",
    "java.io.EOFException": "java.io.IOException",
    "org.apache.pdfbox.pdmodel.encryption.InvalidPasswordException": "java.io.IOException",
    "org.apache.pdfbox.preflight.exception.ValidationException": "java.io.IOException",
    "org.apache.pdfbox.preflight.exception.SyntaxValidationException":
        "org.apache.pdfbox.preflight.exception.ValidationException",
    "java.io.IOException": "java.lang.Exception",
    "java.lang.IllegalStateException": "java.lang.RuntimeException",
    "java.lang.RuntimeException": "java.lang.Exception",
}


class FakeBridge:
    """JavaBridge replacement serving fake classes by name."""

    exception_type = FakeJavaException

    def __init__(self, classes):
        self.classes = classes

    def is_subclass(self, classname, parent):
        while classname:
            if classname == parent:
                return True
            classname = JAVA_PARENTS.get(classname)
        return False

    def autoclass(self, name):
        try:
            return self.classes[name]
        except KeyError:
            raise ConfigurationError(f"Java class {name} not found") from None


# --- PDFBox --------------------------------------------------------------

class FakePdfBoxError:
    def __init__(self, code, details, page=None):
        self._code = code
        self._details = details
        self._page = page

    def getErrorCode(self):
        return self._code

    def getDetails(self):
        return self._details

    def getPageNumber(self):
        return self._page


class FakePdfBoxResult:
    def __init__(self, valid, errors=()):
        self._valid = valid
        self._errors = FakeList(errors)

    def isValid(self):
        return self._valid

    def getErrorsList(self):
        return self._errors


def pdfbox_bridge(result=None, parse_error=None, validate_error=None):
    """Build a fake bridge for PdfBoxBackend and a state namespace
    recording what was opened and closed."""
    state = SimpleNamespace(paths=[], closed=0)

    class Document:
        def validate(self):
            if validate_error is not None:
                raise validate_error

        def getResult(self):
            return result

        def close(self):
            state.closed += 1

    class PreflightParser:
        def __init__(self, path):
            state.paths.append(path)

        def parse(self):
            if parse_error is not None:
                raise parse_error

        def getPreflightDocument(self):
            return Document()

    class Version:
        @staticmethod
        def getVersion():
            return "2.0.29"

    bridge = FakeBridge({
        "org.apache.pdfbox.preflight.parser.PreflightParser": PreflightParser,
        "org.apache.pdfbox.util.Version": Version,
    })
    return bridge, state


def pdfbox3_bridge(result=None, error=None):
    """Fake bridge exposing the PDFBox 3.x static PreflightParser.validate(File)."""
    state = SimpleNamespace(files=[])

    class File:
        def __init__(self, path):
            self.path = path

    class PreflightParser:
        @staticmethod
        def validate(file):
            state.files.append(file.path)
            if error is not None:
                raise error
            return result

    class Version:
        @staticmethod
        def getVersion():
            return "3.0.3"

    bridge = FakeBridge({
        "org.apache.pdfbox.preflight.parser.PreflightParser": PreflightParser,
        "org.apache.pdfbox.util.Version": Version,
        "java.io.File": File,
    })
    return bridge, state


# --- Qoppa ---------------------------------------------------------------

class FakeRecord:
    def __init__(self, detail, page, fixable):
        self._detail = detail
        self._page = page
        self._fixable = fixable

    def getDetail(self):
        return self._detail

    def getPageNumber(self):
        return self._page

    def isFixable(self):
        return self._fixable


class FakePreflightInfo:
    def __init__(self, when: datetime):
        self._when = FakeDate(when)

    def getComputerName(self):
        return "archive-01"

    def getOSInfo(self):
        return "Linux 6.1"

    def getUserName(self):
        return "  "

    def getVersion(self):
        return "v2024R1"

    def getDateTime(self):
        return self._when

    def getDuration(self):
        return 1234


class FakeDocumentInfo:
    def __init__(self, created: datetime):
        self._created = FakeDate(created)

    def getAuthor(self):
        return " Ada & Grace "

    def getSubject(self):
        return None

    def getTitle(self):
        return "Report <draft>"

    def getProducer(self):
        return "LibreOffice"

    def getCreator(self):
        return ""

    def getKeywords(self):
        return None

    def getCreationDate(self):
        return self._created

    def getModDate(self):
        return None


class FakePreflightResults:
    def __init__(self, successful, records=(), pf_info=None, doc_info=None, records_missing=False):
        self._successful = successful
        self._records = None if records_missing else FakeList(records)
        self._pf_info = pf_info
        self._doc_info = doc_info

    def isSuccessful(self):
        return self._successful

    def getPFInfo(self):
        return self._pf_info

    def getDocumentInfo(self):
        return self._doc_info

    def getResults(self):
        return self._records


def qoppa_bridge(results=None, open_error=None, key_error=None):
    state = SimpleNamespace(keys=[], paths=[], profiles=[], closed=0)

    class PDFPreflight:
        @staticmethod
        def setKey(key):
            if key_error is not None:
                raise key_error
            state.keys.append(key)

        @staticmethod
        def getVersion():
            return "v2024R1.04"

        def __init__(self, path, listener):
            if open_error is not None:
                raise open_error
            state.paths.append(path)

        def verifyDocument(self, profile, listener):
            state.profiles.append(type(profile).__name__)
            return results

        def close(self):
            state.closed += 1

    classes = {"com.qoppa.pdfPreflight.PDFPreflight": PDFPreflight}
    for token in ("1a", "1b", "2a", "2b", "2u", "3a", "3b", "3u"):
        name = f"PDFA_{token[0]}_{token[1].upper()}_Verification"
        classes[f"com.qoppa.pdfPreflight.profiles.{name}"] = type(name, (), {})

    return FakeBridge(classes), state


@pytest.fixture
def pdf_file(tmp_path):
    path = tmp_path / "sample.pdf"
    path.write_bytes(b"%PDF-1.4\n%%EOF\n")
    return path
