"""Environment utilities for resolving secret files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import MutableMapping, Optional

logger = logging.getLogger(__name__)


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> None:
    """
    Resolve environment variables that follow Docker secret conventions.

    For every ``KEY_FILE`` entry (``STRIPE_SECRET_KEY_FILE``,
    ``PAYPAL_CLIENT_SECRET_FILE``...), read the referenced file and expose
    its contents via ``KEY`` unless ``KEY`` is already set. Errors are
    logged, never raised, and the secret value itself is never logged.
    """
    env = os.environ if environ is None else environ

    for key, file_path in list(env.items()):
        if not key.endswith("_FILE") or not file_path:
            continue
        target_key = key[: -len("_FILE")]
        if env.get(target_key):
            continue
        try:
            env[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            logger.warning(
                "env.secret_file.missing",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
        except UnicodeDecodeError as exc:
            logger.warning(
                "env.secret_file.decode_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
        except OSError as exc:
            logger.warning(
                "env.secret_file.load_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )


# Secrets must be in place before the settings module reads the environment.
load_secret_file_variables()
