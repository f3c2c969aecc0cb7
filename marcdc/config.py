"""
Runtime configuration for network access.

The mapping engine itself takes no configuration. Fetching records over
HTTP is tuned with :class:`FetchConfig`, either built directly or from
environment variables:

```bash
MARCDC_HTTP_TIMEOUT=10 MARCDC_HTTP_MAX_RETRIES=5 python harvest.py
```
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_TIMEOUT = "MARCDC_HTTP_TIMEOUT"
ENV_MAX_RETRIES = "MARCDC_HTTP_MAX_RETRIES"
ENV_BACKOFF = "MARCDC_HTTP_BACKOFF"

# HTTP status codes worth retrying
RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


@dataclass(frozen=True)
class FetchConfig:
    """Timeout and retry policy for fetching MARC-XML over HTTP."""

    timeout: float = 30.0  # seconds, per request
    max_retries: int = 3  # attempts after the first one
    backoff_factor: float = 1.0  # first delay; doubles on every retry
    max_backoff: float = 8.0
    user_agent: str = "marcdc"

    def __post_init__(self):
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.backoff_factor < 0 or self.max_backoff < 0:
            raise ValueError("backoff values must be >= 0")

    def backoff(self, retry: int) -> float:
        """Delay in seconds before retry number ``retry`` (0-based)."""
        return min(self.backoff_factor * (2 ** retry), self.max_backoff)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'FetchConfig':
        """Build a config, overriding defaults from environment variables.

        Raises:
            ValueError: If a variable is set but not a valid number.
        """
        environ = os.environ if environ is None else environ
        kwargs = {}
        if environ.get(ENV_TIMEOUT):
            kwargs["timeout"] = float(environ[ENV_TIMEOUT])
        if environ.get(ENV_MAX_RETRIES):
            kwargs["max_retries"] = int(environ[ENV_MAX_RETRIES])
        if environ.get(ENV_BACKOFF):
            kwargs["backoff_factor"] = float(environ[ENV_BACKOFF])
        return cls(**kwargs)
