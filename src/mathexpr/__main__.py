"""Allow ``python -m mathexpr``."""

from mathexpr.cli import main

if __name__ == "__main__":
    main()
