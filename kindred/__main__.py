"""``python -m kindred``"""

from kindred.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
