"""
Small filesystem and networking helpers.
"""

import contextlib
import os
import secrets
import socket
import string
import tempfile
from pathlib import Path

from harness.config.constants import TEMPDIR_ROOT_ENV

_ALPHANUMERIC = string.ascii_letters + string.digits


def random_tmp_file() -> Path:
    """Return a random 7 character path inside the system temp directory."""
    name = "".join(secrets.choice(_ALPHANUMERIC) for _ in range(7))
    return Path(tempfile.gettempdir()) / name


def make_tmp_datadir(tmpdir: str | None = None) -> str:
    """
    Create a fresh datadir.

    The parent is `tmpdir` if given, else `$TEMPDIR_ROOT`, else the system temp dir.
    """
    parent = tmpdir or os.getenv(TEMPDIR_ROOT_ENV)
    if parent:
        os.makedirs(parent, exist_ok=True)
    return tempfile.mkdtemp(prefix="bitcoind-", dir=parent)


def get_available_ports(n: int) -> list[int]:
    """
    Ask the OS for `n` distinct free TCP ports on localhost.

    Sockets stay bound until every port is picked.
    """
    with contextlib.ExitStack() as stack:
        ports = []
        for _ in range(n):
            s = stack.enter_context(socket.socket(socket.AF_INET, socket.SOCK_STREAM))
            s.bind(("127.0.0.1", 0))
            ports.append(s.getsockname()[1])
        return ports
