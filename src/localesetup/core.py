from __future__ import annotations
import logging
from typing import Sequence

from .environ import env_merge, locale_assignments
from .errors import ResourceExhaustedError
from .paths import LocalePaths
from .resolve import resolve
from .sources import read_boot_parameters, read_legacy, read_locale_conf
from .variables import LocaleSet
from .virt import in_container as _detect

LOG = logging.getLogger(__name__)


def resolve_locale(paths: LocalePaths | None = None, *,
                   in_container: bool | None = None,
                   sysv_compat: bool = True) -> LocaleSet:
    """
    Read all sources and return the resolved locale variables.

    in_container=None means detect it below paths.root.
    sysv_compat=False skips /etc/sysconfig/language entirely.
    """
    paths = paths or LocalePaths()
    if in_container is None:
        in_container = _detect(paths.root)

    boot = read_boot_parameters(paths, in_container)
    primary = read_locale_conf(paths)
    legacy = read_legacy(paths) if sysv_compat else None
    resolved = resolve(boot, primary, legacy)
    LOG.debug("Resolved locale: %s", {v.value: s for v, s in resolved.items()})
    return resolved


def locale_setup(environment: Sequence[str], paths: LocalePaths | None = None, *,
                 in_container: bool | None = None,
                 sysv_compat: bool = True) -> Sequence[str]:
    """
    Return environment with the resolved locale variables merged in.

    The caller replaces its table with the returned one. If nothing was
    resolved the same object is returned. On ResourceExhaustedError the
    caller's table is still valid and unchanged.
    """
    resolved = resolve_locale(paths, in_container=in_container, sysv_compat=sysv_compat)
    try:
        add = locale_assignments(resolved)
        if not add:
            return environment
        return env_merge(environment, add)
    except MemoryError as e:
        raise ResourceExhaustedError("out of memory while merging locale variables") from e
