"""

Module for naming the well-known files locale setup reads from.

"""

from __future__ import annotations
from pathlib import Path

class LocalePaths:
    """ Class to manage the locale source paths below a root directory. """

    def __init__(self, root: Path | str = "/",
                 cmdline: str = "proc/cmdline",
                 locale_conf: str = "etc/locale.conf",
                 sysconfig_language: str = "etc/sysconfig/language") -> None:
        """ Initialize with the root directory; relative names are taken below it. """
        self.root = Path(root)
        self.CMDLINE = self._below_root(cmdline)
        self.LOCALE_CONF = self._below_root(locale_conf)
        self.SYSCONFIG_LANGUAGE = self._below_root(sysconfig_language)

    def _below_root(self, name: str | Path) -> Path:
        # absolute names are re-rooted too, so '/etc/x' under root 'r' is 'r/etc/x'
        return self.root / Path(name).as_posix().lstrip("/")

    def sources(self) -> list[Path]:
        """ All source paths in precedence order, highest first. """
        return [self.CMDLINE, self.LOCALE_CONF, self.SYSCONFIG_LANGUAGE]

    def __repr__(self) -> str:
        return f"LocalePaths(root={str(self.root)!r})"
