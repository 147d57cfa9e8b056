"""Allow running goscope as ``python -m goscope``."""

from .cli import main

if __name__ == "__main__":
    main()
