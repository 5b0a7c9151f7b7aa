from __future__ import annotations

from guidmanifest.cli import main


if __name__ == "__main__":
    main()
