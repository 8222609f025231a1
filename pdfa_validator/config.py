"""Configuration management for pdfa-validator."""
import os
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv


@dataclass
class Config:
    """pdfa-validator configuration.

    Attributes:
        classpath: Jar files or directories handed to the JVM (PDFBox
            preflight, Qoppa jPDFPreflight and their dependencies)
        jvm_options: Extra options for the JVM, e.g. "-Xmx1g"
        preflight_profile: Qoppa PDF/A profile token ('1b', '2b', '2u', '3b', '3u')
        log_level: Name of the logging level for stderr diagnostics
        log_file: Optional file that receives a copy of the log records
    """

    # JVM Settings
    classpath: List[str] = field(default_factory=list)
    jvm_options: List[str] = field(default_factory=list)

    # Validation Settings
    preflight_profile: str = "1b"

    # Diagnostics
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Config":
        """Load configuration from environment variables.

        Args:
            env_file: Path to .env file (optional)

        Returns:
            Config instance with values from environment
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        return cls(
            classpath=[
                entry
                for entry in os.getenv("PDFA_VALIDATOR_CLASSPATH", "").split(os.pathsep)
                if entry
            ],
            jvm_options=os.getenv("PDFA_VALIDATOR_JVM_OPTIONS", "").split(),
            preflight_profile=os.getenv("PDFA_PREFLIGHT_PROFILE", "1b").strip().lower(),
            log_level=os.getenv("PDFA_VALIDATOR_LOG_LEVEL", "WARNING"),
            log_file=os.getenv("PDFA_VALIDATOR_LOG_FILE") or None,
        )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Load configuration from dictionary.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            Config instance
        """
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})
