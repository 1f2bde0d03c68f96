from __future__ import annotations

"""Project-wide constants and environment variable names."""

# Banner delimiter used by -h/--header. Tests import it as `commentstrip.HEADER_DELIM`.
HEADER_DELIM: str = '===== '

ENV_JSON_LOGS: str = 'COMMENTSTRIP_JSON_LOGS'
ENV_TOKEN_MODEL: str = 'COMMENTSTRIP_TOKEN_MODEL'
ENV_DEBUG: str = 'DEBUG'

EXIT_OK: int = 0
EXIT_FATAL: int = 1
EXIT_UNTERMINATED: int = 2
EXIT_INTERRUPTED: int = 130
