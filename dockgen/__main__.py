"""Entry point for ``python -m dockgen``."""

from dockgen.cli import main

if __name__ == "__main__":
    main()
