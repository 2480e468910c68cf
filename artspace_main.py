"""Art Space launcher."""

from __future__ import annotations
import sys
import traceback

from artspace.app import main
from artspace.logging import channel


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        channel("FATAL").critical(f"Fatal error: {e!r}\nTraceback:\n{traceback.format_exc()}")
        sys.exit(1)
