from __future__ import annotations
import logging
import os
from pathlib import Path

LOG = logging.getLogger(__name__)


def detect_container(root: Path | str = "/", environ: dict | None = None) -> str | None:
    """
    Return the name of the container technology we run in, or None.

    Checks OpenVZ first, then the marker file the container manager leaves in
    /run/systemd/container, then the 'container' environment variable.
    """
    root = Path(root)
    environ = os.environ if environ is None else environ

    # /proc/vz exists in container and outside of the container,
    # /proc/bc only outside of the container.
    if (root / "proc/vz").exists() and not (root / "proc/bc").exists():
        return "openvz"

    try:
        name = (root / "run/systemd/container").read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        name = ""
    except (OSError, UnicodeDecodeError) as e:
        LOG.debug("Failed to read container marker: %s", e)
        name = ""
    if name:
        return name

    name = environ.get("container", "").strip()
    return name or None


def in_container(root: Path | str = "/") -> bool:
    return detect_container(root) is not None
