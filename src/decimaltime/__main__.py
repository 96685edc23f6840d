"""Allow running the decimal time tool with ``python -m decimaltime``."""

# Local Imports
from . import main

if __name__ == "__main__":
    main()
