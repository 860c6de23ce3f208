"""Allow running tbunread with `python -m tbunread`."""

from tbunread.cli.main import main

if __name__ == "__main__":  # pragma: no cover - module execution guard
    main()
