"""
Remote key construction and the per-run host values it depends on.
"""
import socket
from datetime import date

from ..exceptions import HostnameUnavailableError


def today_string(today: date) -> str:
    """Format a date the way log file names carry it: YYYY-MM-DD."""
    return today.strftime('%Y-%m-%d')


def resolve_hostname() -> str:
    """
    Resolve the local hostname once per run.

    Raises:
        HostnameUnavailableError: If the host cannot report a name
    """
    try:
        hostname = socket.gethostname()
    except OSError as e:
        raise HostnameUnavailableError(f"Cannot resolve local hostname: {e}") from e
    if not hostname:
        raise HostnameUnavailableError("Local hostname is empty")
    return hostname


def build_remote_key(directory_name: str, today: date, hostname: str, relative_path: str) -> str:
    """
    Build the object key <directory_name>/<YYYY>/<MM>/<DD>/<hostname>/<relative_path>.

    Pure function: identical inputs always give an identical key, which is
    what lets the existence check recognise earlier uploads.
    """
    date_path = today.strftime('%Y/%m/%d')
    return f"{directory_name}/{date_path}/{hostname}/{relative_path}"
