"""Validator backend implementations."""
from typing import Optional

from .base import BaseValidatorBackend, Completed, SyntacticFailure
from .pdfbox import PdfBoxBackend
from .qoppa import QoppaBackend
from ..config import Config
from ..exceptions import ConfigurationError
from ..jvm import JavaBridge

BACKENDS = {
    PdfBoxBackend.name: PdfBoxBackend,
    QoppaBackend.name: QoppaBackend,
}


def get_backend(
    name: str,
    config: Optional[Config] = None,
    bridge: Optional[JavaBridge] = None,
) -> BaseValidatorBackend:
    """Create a backend by name ('pdfbox' or 'qoppa').

    Raises:
        ConfigurationError: If no backend has that name
    """
    try:
        backend_class = BACKENDS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown validator backend '{name}'. Expected one of: {', '.join(BACKENDS)}"
        ) from None
    return backend_class(config=config, bridge=bridge)


__all__ = [
    "BaseValidatorBackend",
    "Completed",
    "SyntacticFailure",
    "PdfBoxBackend",
    "QoppaBackend",
    "get_backend",
]
