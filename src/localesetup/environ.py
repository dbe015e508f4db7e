from __future__ import annotations
from typing import Iterable, Sequence

from .variables import VARIABLES, LocaleSet


def env_name(entry: str) -> str:
    """ Name part of a NAME=VALUE entry (the whole entry if it has no '='). """
    return entry.split("=", 1)[0]


def locale_assignments(resolved: LocaleSet) -> list[str]:
    """
    NAME=VALUE strings for every set variable, in the fixed variable order.
    """
    return [f"{v.value}={resolved[v]}" for v in VARIABLES if v in resolved]


def env_merge(environment: Sequence[str], additions: Iterable[str]) -> list[str]:
    """
    Overlay additions onto environment and return a new list.

    An addition whose name is already present replaces that entry where it
    stands; otherwise it is appended. The input sequence is left untouched.
    """
    out = list(environment)
    index = {env_name(e): i for i, e in enumerate(out)}
    for entry in additions:
        name = env_name(entry)
        if name in index:
            out[index[name]] = entry
        else:
            index[name] = len(out)
            out.append(entry)
    return out
