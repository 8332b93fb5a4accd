"""Redis credential loading for jettison-health.

The secrets directory follows a naming convention rather than a lookup:
its basename *is* the Redis username, and a ``password`` file inside it holds
the password.  Nothing is cached; every call re-reads the file.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from jettison_health.config.defaults import PASSWORD_FILENAME
from jettison_health.schema.errors import CredentialError
from jettison_health.schema.health import Credentials

logger = logging.getLogger(__name__)


def username_for(secrets_dir: str | Path) -> str:
    """Return the username encoded in *secrets_dir*.

    Trailing separators are ignored, so ``/run/secrets/app/`` yields
    ``app``.

    Raises
    ------
    CredentialError
        If the path has no final component (e.g. ``/``).
    """
    name = os.path.basename(os.path.normpath(os.fspath(secrets_dir)))
    if not name or name in {".", os.sep}:
        raise CredentialError(
            f"cannot derive a username from secrets dir {secrets_dir}",
            context={"secrets_dir": str(secrets_dir)},
        )
    return name


def load_credentials(secrets_dir: str | Path) -> Credentials:
    """Derive :class:`Credentials` from *secrets_dir*.

    Parameters
    ----------
    secrets_dir:
        Directory named after the Redis user, containing a ``password``
        file.

    Returns
    -------
    Credentials

    Raises
    ------
    CredentialError
        If the password file cannot be read or is blank after stripping.
    """
    username = username_for(secrets_dir)
    password_path = Path(secrets_dir) / PASSWORD_FILENAME

    try:
        password = password_path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        raise CredentialError(
            f"failed to read password file {password_path}: {exc}",
            context={"path": str(password_path)},
        ) from exc

    if not password:
        raise CredentialError(
            f"password file {password_path} is empty",
            context={"path": str(password_path)},
        )

    logger.debug("Loaded credentials for Redis user %r", username)
    return Credentials(username=username, password=password)
