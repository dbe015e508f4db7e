from __future__ import annotations
import logging
from pathlib import Path

from .envfile import NEWLINE, WHITESPACE, parse_env_file
from .errors import SourceReadError
from .paths import LocalePaths
from .variables import LegacyLocale, LocaleSet, keyed

LOG = logging.getLogger(__name__)

CMDLINE_PREFIX = "locale."


def read_source(path: Path, separators: str, keys: list[str]) -> dict[str, str]:
    """
    Best-effort read: a missing file is silently empty, any other failure is
    logged as a warning and also treated as empty.
    """
    try:
        return parse_env_file(path, separators, keys)
    except FileNotFoundError:
        LOG.debug("%s not found, skipping", path)
    except SourceReadError as e:
        LOG.warning("Failed to read %s: %s", e.path, e.reason)
    return {}


def _locale_source(path: Path, separators: str, prefix: str = "") -> LocaleSet:
    names = keyed(prefix)
    found = read_source(path, separators, list(names))
    return {names[k]: v for k, v in found.items()}


def read_boot_parameters(paths: LocalePaths, in_container: bool) -> LocaleSet:
    """ locale.* assignments on the kernel command line; skipped inside a container. """
    if in_container:
        LOG.debug("Running in a container, ignoring %s", paths.CMDLINE)
        return {}
    return _locale_source(paths.CMDLINE, WHITESPACE, CMDLINE_PREFIX)


def read_locale_conf(paths: LocalePaths) -> LocaleSet:
    return _locale_source(paths.LOCALE_CONF, NEWLINE)


def read_legacy(paths: LocalePaths) -> LegacyLocale:
    found = read_source(paths.SYSCONFIG_LANGUAGE, NEWLINE,
                        ["RC_LANG", "RC_LC_CTYPE", "ROOT_USES_LANG"])
    return LegacyLocale(
        rc_lang=found.get("RC_LANG"),
        rc_lc_ctype=found.get("RC_LC_CTYPE"),
        root_uses_lang=found.get("ROOT_USES_LANG"),
    )
