"""Setup configuration for pdfa-validator."""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pdfa-validator",
    version="1.0.0",
    description="Command-line PDF/A validation with Apache PDFBox preflight or Qoppa jPDFPreflight",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Information Technology",
        "Topic :: Office/Business",
        "Topic :: Text Processing :: Markup :: XML",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        # Core dependencies
        "python-dotenv>=1.0.0",
        # JVM access to the validation engines
        "pyjnius>=1.5.0",
    ],
    extras_require={
        "dev": [
            # Development dependencies
            "pytest>=7.0.0",
            "black>=22.0.0",
            "mypy>=0.990",
            "flake8>=5.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pdfa-validate=pdfa_validator.cli:main",
            "pdfa-preflight=pdfa_validator.cli:preflight_main",
        ],
    },
)
