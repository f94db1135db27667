"""Module entrypoint.

Allows:
    python -m syslog_rfc3164
"""

from __future__ import annotations

from syslog_rfc3164.server.log_server import main

if __name__ == "__main__":
    main()
