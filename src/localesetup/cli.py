from __future__ import annotations
import argparse, sys, json, os, logging
from pathlib import Path
from .config import DEFAULTS, ENV_PREFIX, parse_keyval_list, load_config, merge_params
from .config import as_bool, container_override, paths_from
from .core import locale_setup, resolve_locale
from .environ import locale_assignments
from .errors import LocaleSetupError
from .variables import VARIABLES

def _common(p: argparse.ArgumentParser) -> None:
    p.add_argument("-c", "--config", default=None, help="TOML/JSON config file with settings")
    p.add_argument("--set", dest="settings", action="append", default=[], help="KEY=VALUE (repeatable)")
    p.add_argument("--root", default=None, help="Read sources below this directory (default: /)")
    p.add_argument("--container", choices=["auto", "yes", "no"], default=None,
                   help="Override container detection (default: auto)")
    p.add_argument("--no-sysv-compat", action="store_true", help="Ignore /etc/sysconfig/language")

def main(argv=None):
    parser = argparse.ArgumentParser(prog="localesetup", description="Resolve locale variables from boot parameters and config files")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    # show
    p_show = sub.add_parser("show", help="Print the resolved locale variables")
    _common(p_show)
    p_show.add_argument("--json", action="store_true", help="Print a JSON object instead of NAME=VALUE lines")

    # apply
    p_apply = sub.add_parser("apply", help="Merge the resolved variables into an environment and print it")
    _common(p_apply)
    p_apply.add_argument("--env-file", default=None, help="Read the environment from this file (NAME=VALUE per line) instead of the current process")

    # config
    p_cfg = sub.add_parser("config", help="Show effective settings and where they came from")
    _common(p_cfg)

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        eff, prov = _settings(args)
        if args.cmd == "config":
            print(json.dumps({"effective": eff, "provenance": prov}, indent=2, sort_keys=True))
            return 0

        paths = paths_from(eff)
        in_container = container_override(eff["container"])
        sysv_compat = as_bool("sysv_compat", eff["sysv_compat"])

        if args.cmd == "show":
            resolved = resolve_locale(paths, in_container=in_container, sysv_compat=sysv_compat)
            if args.json:
                print(json.dumps({v.value: resolved[v] for v in VARIABLES if v in resolved}, indent=2))
            else:
                for entry in locale_assignments(resolved):
                    print(entry)

        elif args.cmd == "apply":
            environment = _read_environment(args.env_file)
            for entry in locale_setup(environment, paths, in_container=in_container, sysv_compat=sysv_compat):
                print(entry)
    except LocaleSetupError as e:
        raise SystemExit(f"localesetup: {e}")
    return 0

# ---- helpers ----
def _settings(args):
    cli = parse_keyval_list(args.settings)
    if args.root is not None:
        cli["root"] = args.root
    if args.container is not None:
        cli["container"] = args.container
    if args.no_sysv_compat:
        cli["sysv_compat"] = "no"
    return merge_params(DEFAULTS, load_config(args.config), ENV_PREFIX, cli)

def _read_environment(env_file: str | None) -> list[str]:
    if env_file is None:
        return [f"{k}={v}" for k, v in os.environ.items()]
    p = Path(env_file)
    try:
        lines = p.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        raise SystemExit(f"localesetup: cannot read {p}: {e.strerror or e}")
    # keep the first occurrence of each name so the table stays unique
    seen, out = set(), []
    for line in lines:
        if not line or line.startswith("#"):
            continue
        name = line.split("=", 1)[0]
        if name not in seen:
            seen.add(name); out.append(line)
    return out

if __name__ == "__main__":
    sys.exit(main())
