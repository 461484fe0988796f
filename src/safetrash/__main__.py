# Filename: __main__.py
# Author: Rich Lewis @RichLewis007
# Description: Allows running Safe Trash with ``python -m safetrash``.

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
