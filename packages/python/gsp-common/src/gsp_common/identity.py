"""OS session identity, read from the process environment."""

from __future__ import annotations

import getpass
import os
import socket


def current_user() -> str:
    return os.environ.get("USERNAME") or getpass.getuser()


def current_domain() -> str:
    return os.environ.get("USERDOMAIN", "")


def current_machine() -> str:
    return os.environ.get("COMPUTERNAME") or socket.gethostname()


def session_identity() -> str:
    """Return ``DOMAIN\\user``, or the bare user name outside a domain."""
    domain = current_domain()
    user = current_user()
    return f"{domain}\\{user}" if domain else user
