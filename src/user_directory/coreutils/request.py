import json
import logging
import time
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.exceptions import ReadTimeoutError
from urllib3.util.retry import Retry

from user_directory.errors import (
    HttpStatusError,
    MalformedRecord,
    NetworkUnavailable,
    RequestTimeout,
    TransportError,
)

logger = logging.getLogger(__name__)

# Attempts are counted by get_json, so the adapter itself never retries
ADAPTER_RETRY_STRATEGY = Retry(total=0, read=False)

USER_AGENT = "user-directory/1.0"

# One byte per read, so the deadline is checked between every byte of the body
BODY_CHUNK_SIZE = 1


def new_session() -> requests.Session:
    """Create a new requests session with JSON defaults"""
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=ADAPTER_RETRY_STRATEGY)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})

    return session


def backoff_delay(attempt: int, base_ms: int = 1000, cap_ms: int = 3000) -> float:
    """Seconds to wait after failed attempt number `attempt` (0-based)"""
    return min(base_ms * 2**attempt, cap_ms) / 1000


def _attempt_socket(response: requests.Response):
    """The socket behind a streamed response, if the adapter exposes one"""
    connection = getattr(response.raw, "connection", None)
    return getattr(connection, "sock", None)


def read_body(response: requests.Response, deadline: float) -> bytes:
    """Read a streamed response body, failing once `deadline` has passed.

    The body is read byte by byte and the socket timeout shrinks to whatever
    is left of the attempt, so neither a trickling nor a stalled body can
    keep the attempt alive past `deadline` (a time.monotonic() value).

    Raises:
        requests.ReadTimeout: when the deadline passes before the body is complete
    """
    sock = _attempt_socket(response)
    chunks = []
    try:
        remaining = deadline - time.monotonic()
        if sock is not None and remaining > 0:
            sock.settimeout(remaining)
        for chunk in response.iter_content(chunk_size=BODY_CHUNK_SIZE):
            if remaining <= 0:
                break
            chunks.append(chunk)
            remaining = deadline - time.monotonic()
            if sock is not None and remaining > 0:
                sock.settimeout(remaining)
        else:
            return b"".join(chunks)
    except requests.ConnectionError as e:
        # iter_content reports a socket read timeout as ConnectionError
        if e.args and isinstance(e.args[0], ReadTimeoutError):
            raise requests.ReadTimeout(e.args[0], response=response) from e
        raise

    raise requests.ReadTimeout(
        f"Body of {response.url} not received within the deadline",
        response=response,
    )


def get_json(
    session: requests.Session,
    url: str,
    timeout: float = 8.0,
    max_retries: int = 2,
    backoff_base_ms: int = 1000,
    backoff_cap_ms: int = 3000,
    params: Optional[dict[str, Any]] = None,
) -> Any:
    """Fetch a URL and parse its JSON body, retrying transient failures.

    Every attempt gets its own `timeout`. Timeouts, connection errors and
    non-2xx statuses are retried up to `max_retries` more times with
    exponential backoff; the last failure is raised.

    Args:
        session: HTTP session to use
        url: URL to fetch
        timeout: Per-attempt timeout in seconds
        max_retries: Additional attempts after the first one
        backoff_base_ms: Delay after the first failure
        backoff_cap_ms: Upper bound for any single delay
        params: Optional query parameters

    Returns:
        Parsed JSON response

    Raises:
        RequestTimeout, HttpStatusError, NetworkUnavailable: after the last attempt
        MalformedRecord: on a 2xx response whose body is not JSON
    """
    for attempt in range(max_retries + 1):
        attempts = attempt + 1
        cause: Optional[BaseException] = None
        start = time.time()
        deadline = time.monotonic() + timeout

        try:
            with session.get(
                url, params=params, timeout=timeout, stream=True
            ) as response:
                if not 200 <= response.status_code < 300:
                    raise HttpStatusError(
                        response.status_code, url=url, attempts=attempts
                    )
                body = read_body(response, deadline)
            try:
                payload = json.loads(body)
            except ValueError as e:
                raise MalformedRecord(f"invalid JSON body from {url}: {e}") from e

        except HttpStatusError as e:
            error: TransportError = e
        except requests.Timeout as e:
            error = RequestTimeout(
                f"No response from {url} within {timeout:.1f}s",
                url=url,
                attempts=attempts,
            )
            cause = e
        except requests.RequestException as e:
            error = NetworkUnavailable(
                f"HTTP request failed for {url}: {e}", url=url, attempts=attempts
            )
            cause = e
        else:
            logger.info(f"Fetched from {url}: {time.time() - start:.2f} seconds")
            return payload

        if attempt == max_retries:
            logger.error(f"❌ Giving up on {url} after {attempts} attempts: {error}")
            if cause is not None:
                raise error from cause
            raise error

        wait_time = backoff_delay(attempt, backoff_base_ms, backoff_cap_ms)
        logger.warning(
            f"Attempt {attempts} failed for {url} ({error}), retrying in {wait_time:.1f}s..."
        )
        time.sleep(wait_time)

    # Only reachable by direct callers; APIConfig already rejects max_retries < 0
    raise ValueError(f"max_retries must be >= 0, got {max_retries}")
