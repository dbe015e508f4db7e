"""
Resolve the locale variables (LANG, LC_*, LANGUAGE) for a process from the
kernel command line, /etc/locale.conf and the legacy /etc/sysconfig/language,
and merge them into an environment table.
"""
from .core import locale_setup, resolve_locale
from .environ import env_merge, locale_assignments
from .paths import LocalePaths
from .resolve import resolve
from .variables import Variable, VARIABLES
__all__ = ["locale_setup", "resolve_locale", "env_merge", "locale_assignments",
           "LocalePaths", "resolve", "Variable", "VARIABLES"]
__version__ = "0.1.0"
