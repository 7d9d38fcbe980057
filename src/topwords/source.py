"""Reading input text from files, standard input or URLs."""

import logging
import sys
from pathlib import Path

import requests

log = logging.getLogger(__name__)

# Source name that reads from standard input
STDIN_SOURCE = "-"

# Default timeout for HTTP requests (in seconds)
DEFAULT_TIMEOUT = 30

# Default headers for HTTP requests
DEFAULT_HEADERS = {
    "User-Agent": "topwords/1.0 (word frequency report)",
}


class InputUnavailableError(RuntimeError):
    """Raised when the input text cannot be obtained."""


def is_url(path: str) -> bool:
    """Check if a path is an HTTP/HTTPS URL.

    Args:
        path: Path string to check.

    Returns:
        True if the path starts with http:// or https://.
    """
    return path.startswith("http://") or path.startswith("https://")


def fetch_url(url: str, timeout: float = DEFAULT_TIMEOUT, encoding: str | None = None) -> str:
    """Download a URL and return its body as text.

    Args:
        url: The URL to fetch.
        timeout: Request timeout in seconds.
        encoding: Overrides the encoding declared by the server.

    Returns:
        Decoded response body.

    Raises:
        InputUnavailableError: If the request fails or returns an error status.
    """
    log.debug("Fetching %s", url)
    try:
        response = requests.get(url, timeout=timeout, headers=DEFAULT_HEADERS)
        response.raise_for_status()
    except requests.RequestException as e:
        raise InputUnavailableError(f"Failed to download URL {url}: {e}") from e

    if encoding:
        response.encoding = encoding
    return response.text


def read_file(path: Path, encoding: str = "utf-8") -> str:
    """Read a whole text file.

    Raises:
        InputUnavailableError: If the file is missing, unreadable or not
            valid in the given encoding.
    """
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise InputUnavailableError(f"Input file not found: {path}") from e
    except UnicodeDecodeError as e:
        raise InputUnavailableError(f"Cannot decode {path} as {encoding}: {e}") from e
    except OSError as e:
        raise InputUnavailableError(f"Failed to read {path}: {e}") from e


def read_text(
    source: str,
    encoding: str = "utf-8",
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Read the full text of a source.

    Args:
        source: Local file path, ``-`` for standard input, or an
            HTTP/HTTPS URL.
        encoding: Text encoding of files. For URLs it overrides the
            encoding reported by the server.
        timeout: Request timeout in seconds for URLs.

    Returns:
        The complete text.

    Raises:
        InputUnavailableError: If the text cannot be obtained.
    """
    if source == STDIN_SOURCE:
        log.debug("Reading standard input")
        try:
            return sys.stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputUnavailableError(f"Failed to read standard input: {e}") from e

    if is_url(source):
        text = fetch_url(source, timeout=timeout, encoding=encoding)
    else:
        text = read_file(Path(source), encoding=encoding)

    log.debug("Read %d characters from %s", len(text), source)
    return text
