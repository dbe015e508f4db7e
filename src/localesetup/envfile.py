"""
Reader for simple KEY=VALUE files such as /etc/locale.conf or /proc/cmdline.

With WHITESPACE separators the whole text is one shell-like word list
(/proc/cmdline). With NEWLINE separators every line is one assignment:
whitespace around the key and unquoted whitespace around the value are
dropped, quoted whitespace is kept. Quoting and backslash escapes follow
POSIX shell rules via shlex. Lines (or words) starting with '#' or ';' are
comments.
"""
from __future__ import annotations
import shlex
from pathlib import Path
from typing import Iterable

from .errors import SourceReadError

WHITESPACE = " \t\n\r"
NEWLINE = "\n\r"

COMMENTS = "#;"
BLANKS = " \t"


def _words(text: str, whitespace: str, commenters: str, path: Path | str) -> list[str]:
    lex = shlex.shlex(text, posix=True)
    lex.whitespace = whitespace
    lex.whitespace_split = True
    lex.commenters = commenters
    try:
        return list(lex)
    except ValueError as e:
        # "No closing quotation" / "No escaped character"
        raise SourceReadError(path, str(e)) from e


def split_assignments(text: str, separators: str, path: Path | str = "<string>") -> list[str]:
    """
    Split text into unquoted assignment tokens. Raises SourceReadError on
    unbalanced quotes or a trailing escape.
    """
    if not set(BLANKS) & set(separators):
        return _split_lines(text, path)
    return _words(text, separators, COMMENTS, path)


def _split_lines(text: str, path: Path | str) -> list[str]:
    tokens = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line[0] in COMMENTS:
            continue
        if "=" not in line:
            tokens.append(line)
            continue
        key, raw = line.split("=", 1)
        value = " ".join(_words(raw, BLANKS, "", path))
        tokens.append(f"{key.strip()}={value}")
    return tokens


def parse_assignments(tokens: Iterable[str], keys: Iterable[str]) -> dict[str, str]:
    """
    Pick the wanted keys out of KEY=VALUE tokens; the last assignment wins.
    Tokens without '=' are ignored.
    """
    wanted = set(keys)
    out = {}
    for tok in tokens:
        if "=" not in tok:
            continue
        k, v = tok.split("=", 1)
        k = k.strip()
        if k in wanted:
            out[k] = v
    return out


def parse_env_file(path: Path | str, separators: str, keys: Iterable[str]) -> dict[str, str]:
    """
    Read path and return the values of the given keys that it assigns.

    A missing file raises FileNotFoundError so callers can tell it apart from
    a real failure, which raises SourceReadError.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except OSError as e:
        raise SourceReadError(p, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise SourceReadError(p, f"invalid UTF-8 ({e.reason})") from e
    return parse_assignments(split_assignments(text, separators, p), keys)
