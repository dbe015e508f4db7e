from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Variable(str, Enum):
    """
    The locale variables we read and set, in the order they are applied.
    LC_ALL is left out on purpose: people should be using LANG instead.
    """

    LANG = "LANG"
    LANGUAGE = "LANGUAGE"
    LC_CTYPE = "LC_CTYPE"
    LC_NUMERIC = "LC_NUMERIC"
    LC_TIME = "LC_TIME"
    LC_COLLATE = "LC_COLLATE"
    LC_MONETARY = "LC_MONETARY"
    LC_MESSAGES = "LC_MESSAGES"
    LC_PAPER = "LC_PAPER"
    LC_NAME = "LC_NAME"
    LC_ADDRESS = "LC_ADDRESS"
    LC_TELEPHONE = "LC_TELEPHONE"
    LC_MEASUREMENT = "LC_MEASUREMENT"
    LC_IDENTIFICATION = "LC_IDENTIFICATION"


VARIABLES: tuple[Variable, ...] = tuple(Variable)

# Partial and resolved locale sets share one shape: unset variables are absent keys.
LocaleSet = dict[Variable, str]


def keyed(prefix: str = "") -> dict[str, Variable]:
    """ Map file keys (optionally prefixed, e.g. 'locale.') to variables. """
    return {prefix + v.value: v for v in VARIABLES}


@dataclass(frozen=True)
class LegacyLocale:
    """
    Values from the legacy /etc/sysconfig/language file.
    - rc_lang: RC_LANG, the interactive LANG
    - rc_lc_ctype: RC_LC_CTYPE
    - root_uses_lang: ROOT_USES_LANG, 'yes' or 'ctype' enable derivation
    """
    rc_lang: str | None = None
    rc_lc_ctype: str | None = None
    root_uses_lang: str | None = None
