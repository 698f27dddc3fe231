"""Allow ``python -m bundlecheck``."""

from .cli import main

if __name__ == "__main__":
    main()
