import sys
from .main import main

# Entry point when the package is executed with `python -m wordle_cli`.
if __name__ == "__main__":
    sys.exit(main())
