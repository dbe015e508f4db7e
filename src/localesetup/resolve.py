from __future__ import annotations
from .variables import VARIABLES, LegacyLocale, LocaleSet, Variable


def derive_legacy(resolved: LocaleSet, legacy: LegacyLocale, contributed: bool) -> None:
    """
    Fill LANG and/or LC_CTYPE in place from the legacy record.

    ROOT_USES_LANG=yes only applies when neither higher source set anything;
    ROOT_USES_LANG=ctype applies whenever LC_CTYPE is still unset, so that
    LC_CTYPE can follow the interactive locale even if LANG is e.g. POSIX.
    """
    mode = (legacy.root_uses_lang or "").lower()

    if mode == "yes" and not contributed and Variable.LANG not in resolved:
        if legacy.rc_lang is not None:
            resolved[Variable.LANG] = legacy.rc_lang

    if mode == "ctype" and Variable.LC_CTYPE not in resolved:
        if Variable.LANG in resolved:
            resolved[Variable.LC_CTYPE] = resolved[Variable.LANG]
        elif legacy.rc_lc_ctype:
            resolved[Variable.LC_CTYPE] = legacy.rc_lc_ctype
        elif legacy.rc_lang:
            resolved[Variable.LC_CTYPE] = legacy.rc_lang


def resolve(boot: LocaleSet, primary: LocaleSet, legacy: LegacyLocale | None = None) -> LocaleSet:
    """
    Merge the partial sets by precedence: boot parameters > locale.conf,
    per variable, then consult the legacy record. Inputs are not modified.
    """
    resolved: LocaleSet = {}
    for v in VARIABLES:
        if v in boot:
            resolved[v] = boot[v]
        elif v in primary:
            resolved[v] = primary[v]

    if legacy is not None:
        derive_legacy(resolved, legacy, contributed=bool(resolved))
    return resolved
