"""Allow running the validator as a module: python -m pdfa_validator"""

from .cli import main

if __name__ == "__main__":
    import sys
    sys.exit(main())
