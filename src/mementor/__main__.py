"""Entry point: python -m mementor [OPTIONS...] ACTION [arguments...]"""

from __future__ import annotations

from mementor.interfaces.main import main

if __name__ == "__main__":
    main()
