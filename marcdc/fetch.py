"""
Fetch a MARC-XML record over HTTP.

Transient failures (connection errors, timeouts and HTTP 429/5xx) are
retried with exponential backoff; anything else fails at once with
:class:`~marcdc.errors.FetchError`.

Example:
    >>> from marcdc.fetch import fetch_record
    >>> record = fetch_record("https://lccn.loc.gov/92005291/marcxml")
    >>> record['245']['a']
    'Arithmetic /'
"""

import logging
import time
from typing import Optional

import requests

from .config import RETRYABLE_STATUS_CODES, FetchConfig
from .errors import FetchError
from .formats import marcxml
from .record import Record

logger = logging.getLogger(__name__)


def fetch_xml(url: str, config: Optional[FetchConfig] = None,
              session: Optional[requests.Session] = None) -> bytes:
    """GET ``url`` and return the response body.

    Args:
        url: Location of a MARC-XML document.
        config: Timeout and retry policy; defaults to ``FetchConfig.from_env()``.
        session: Optional requests session to reuse connections.

    Raises:
        FetchError: On a non-retryable HTTP status, or once retries run out.
    """
    config = config or FetchConfig.from_env()
    http = session or requests.Session()
    headers = {"User-Agent": config.user_agent, "Accept": "application/xml, text/xml"}

    last_error = None
    for attempt in range(config.max_retries + 1):
        if attempt:
            delay = config.backoff(attempt - 1)
            logger.warning(
                "Retrying %s in %.1fs (attempt %d/%d): %s",
                url, delay, attempt + 1, config.max_retries + 1, last_error,
            )
            time.sleep(delay)
        try:
            response = http.get(url, headers=headers, timeout=config.timeout)
        except (requests.ConnectionError, requests.Timeout) as exc:
            last_error = exc
            continue

        if response.status_code in RETRYABLE_STATUS_CODES:
            last_error = f"HTTP {response.status_code}"
            continue
        if response.status_code >= 400:
            raise FetchError(
                f"GET {url} failed with HTTP {response.status_code}",
                url=url, status_code=response.status_code,
            )
        return response.content

    raise FetchError(
        f"GET {url} failed after {config.max_retries + 1} attempt(s): {last_error}",
        url=url,
    )


def fetch_record(url: str, config: Optional[FetchConfig] = None,
                 session: Optional[requests.Session] = None) -> Record:
    """Fetch a MARC-XML document and return its first record.

    Raises:
        FetchError: If the fetch fails or the document holds no record.
    """
    records = marcxml.loads(fetch_xml(url, config=config, session=session))
    if not records:
        raise FetchError(f"No MARC record found at {url}", url=url)
    return records[0]
