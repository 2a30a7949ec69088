"""Allow ``python -m create_react_daisy``."""

from create_react_daisy.cli import main

if __name__ == "__main__":
    main()
