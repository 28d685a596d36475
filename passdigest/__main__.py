from __future__ import annotations

from passdigest.cli import main

if __name__ == "__main__":
    main()
