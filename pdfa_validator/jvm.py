"""Access to the Java validation engines through pyjnius.

The JVM can only be configured before it starts, and importing ``jnius``
starts it. JavaBridge therefore defers that import until the first class
is requested.
"""
import logging
from typing import Any, Iterator, Optional

try:
    import jnius_config
    JNIUS_AVAILABLE = True
except ImportError:
    JNIUS_AVAILABLE = False

from .config import Config
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class JavaBridge:
    """Lazily started JVM exposing ``autoclass`` and the Java exception type."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self._jnius = None

    def _start(self):
        if self._jnius is not None:
            return self._jnius

        if not JNIUS_AVAILABLE:
            raise ConfigurationError(
                "pyjnius library not installed. Install it with: pip install pyjnius"
            )

        if not jnius_config.vm_running:
            if self.config.jvm_options:
                jnius_config.add_options(*self.config.jvm_options)
            if self.config.classpath:
                jnius_config.add_classpath(*self.config.classpath)
            logger.info(f"Starting JVM with classpath: {self.config.classpath}")
        else:
            logger.debug("JVM already running, classpath and options left unchanged")

        try:
            import jnius
        except Exception as e:
            raise ConfigurationError(f"Failed to start the JVM: {e}") from e

        self._jnius = jnius
        return jnius

    def autoclass(self, name: str) -> Any:
        """Load a Java class by its fully qualified name.

        Raises:
            ConfigurationError: If the class is not on the classpath
        """
        jnius = self._start()
        try:
            return jnius.autoclass(name)
        except jnius.JavaException as e:
            raise ConfigurationError(
                f"Java class {name} not found; check PDFA_VALIDATOR_CLASSPATH"
            ) from e

    @property
    def exception_type(self) -> type:
        """Python type of exceptions thrown from Java code."""
        return self._start().JavaException

    def is_subclass(self, classname: str, parent: str) -> bool:
        """Whether Java class ``classname`` is ``parent`` or derives from it.

        Classes that cannot be loaded count as unrelated.
        """
        if not classname:
            return False
        if classname == parent:
            return True

        Class = self.autoclass("java.lang.Class")
        try:
            return bool(Class.forName(parent).isAssignableFrom(Class.forName(classname)))
        except self.exception_type as e:
            logger.debug(f"Cannot load {classname} to compare with {parent}: {e}")
            return False


def java_exception_class(exc: BaseException) -> str:
    """Fully qualified Java class name carried by a bridged exception."""
    return getattr(exc, "classname", None) or ""


def java_exception_message(exc: BaseException) -> str:
    """Message of a bridged Java exception, falling back to str()."""
    return getattr(exc, "innermessage", None) or str(exc)


def iterate_list(java_list: Any) -> Iterator[Any]:
    """Iterate a java.util.List in order."""
    for i in range(java_list.size()):
        yield java_list.get(i)
