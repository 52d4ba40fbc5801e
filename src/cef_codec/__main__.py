"""Module entrypoint.

Allows:
    python -m cef_codec
"""

from __future__ import annotations

from cef_codec.server.cef_server import main

if __name__ == "__main__":
    main()
