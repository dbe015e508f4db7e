from __future__ import annotations
from pathlib import Path
import os, json
import tomllib

from .errors import ConfigError
from .paths import LocalePaths

ENV_PREFIX = "LOCALESETUP_"

DEFAULTS = {
    "root": "/",
    "cmdline": "proc/cmdline",
    "locale_conf": "etc/locale.conf",
    "sysconfig_language": "etc/sysconfig/language",
    "sysv_compat": "yes",
    "container": "auto",
}

TRUE = {"1", "true", "yes", "on", "y"}
FALSE = {"0", "false", "no", "off", "n"}

def parse_keyval_list(items: list[str]) -> dict:
    """
    Parse ['k=v', 'x=y'] into {'k':'v','x':'y'}.
    """
    out = {}
    for it in items or []:
        if "=" not in it:
            raise ConfigError(f"Expected KEY=VALUE, got: {it!r}")
        k, v = it.split("=", 1)
        out[k.strip()] = v
    return out

def load_config(path: str | None) -> dict:
    if not path:
        return {}
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")
    try:
        if p.suffix.lower() in {".toml", ".tml"}:
            data = tomllib.loads(p.read_text(encoding="utf-8"))
        elif p.suffix.lower() == ".json":
            data = json.loads(p.read_text(encoding="utf-8"))
        else:
            raise ConfigError("Unsupported config format (use TOML or JSON)")
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid config file {p}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {p}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Invalid config file {p}: not UTF-8 ({e.reason})") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file {p}: expected a table of settings")
    # a [localesetup] table is accepted as well as top-level keys
    data = data.get("localesetup", data)
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file {p}: [localesetup] must be a table")
    return {k: str(v).lower() if isinstance(v, bool) else str(v) for k, v in data.items()}

def merge_params(defaults: dict, config: dict, env_prefix: str, cli: dict, environ=None):
    """
    Produce effective settings and a provenance map per key following:
    CLI > ENV > config > defaults
    - env variables are matched as f'{env_prefix}{KEY.upper()}'
    """
    environ = os.environ if environ is None else environ
    unknown = (set(config) | set(cli)) - set(defaults)
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
    eff, prov = {}, {}
    for k in defaults:
        env_key = f"{env_prefix}{k.upper()}"
        if k in cli:
            eff[k] = cli[k]; prov[k] = "CLI"
        elif env_key in environ:
            eff[k] = environ[env_key]; prov[k] = "ENV"
        elif k in config:
            eff[k] = config[k]; prov[k] = "CONFIG"
        else:
            eff[k] = defaults[k]; prov[k] = "DEFAULT"
    return eff, prov

def as_bool(key: str, value: str) -> bool:
    v = str(value).strip().lower()
    if v in TRUE:
        return True
    if v in FALSE:
        return False
    raise ConfigError(f"{key}: expected a boolean, got {value!r}")

def container_override(value: str) -> bool | None:
    """ 'auto' -> None (detect), otherwise a boolean. """
    if str(value).strip().lower() == "auto":
        return None
    return as_bool("container", value)

def paths_from(eff: dict) -> LocalePaths:
    return LocalePaths(eff["root"], eff["cmdline"], eff["locale_conf"], eff["sysconfig_language"])
