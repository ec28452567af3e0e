"""CLI for PassMeter — check a password, or serve the HTTP API."""

import argparse
import json
import logging
import sys
from getpass import getpass

from rich import print
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table

from .config import load_config
from .dictionary import load_common_passwords
from .errors import DictionaryLoadError
from .evaluator import evaluate, COMMON, WEAK, STRONG

logger = logging.getLogger(__name__)

CATEGORY_STYLES = {
    COMMON: "bold red",
    WEAK: "yellow",
    STRONG: "green",
}


def _load_dictionary(args, cfg):
    path = args.dictionary or cfg.get("common_passwords_path")
    try:
        return load_common_passwords(path)
    except DictionaryLoadError as e:
        print(f"[red]Cannot load common passwords:[/red] {escape(str(e))}")
        sys.exit(1)


def cmd_check(args):
    cfg = load_config(args.config)
    common = _load_dictionary(args, cfg)
    pw = args.password if args.password is not None else getpass("Password to check: ")
    result = evaluate(
        pw,
        common,
        attack_rate=cfg.get("attack_rate_per_second"),
        symbol_pool_size=cfg.get("symbol_pool_size"),
    )

    if args.json:
        sys.stdout.write(json.dumps(result.to_dict()) + "\n")
        return

    style = CATEGORY_STYLES.get(result.strength_category, "bold green")
    table = Table(show_header=False)
    table.add_column("Metric")
    table.add_column("Value")
    table.add_row("Length", str(result.password_length))
    table.add_row("Keyspace size", str(result.keyspace_size))
    table.add_row("Entropy", f"{result.entropy_bits:.2f} bits")
    table.add_row("Common password", "yes" if result.is_in_common_list else "no")
    table.add_row("Estimated crack time", result.estimated_crack_time)
    print(Panel(table, title=f"[{style}]{result.strength_category}[/{style}]"))


def cmd_serve(args):
    from .spweb.api import create_app

    cfg = load_config(args.config)
    if args.dictionary:
        cfg["common_passwords_path"] = args.dictionary
    try:
        app = create_app(cfg)
    except DictionaryLoadError as e:
        print(f"[red]Fatal: server not started:[/red] {escape(str(e))}")
        sys.exit(1)

    host = args.host or cfg["host"]
    port = args.port or cfg["port"]
    print(f"[green]Serving on[/green] http://{host}:{port} (API description at /api-docs)")
    app.run(host=host, port=port)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="passmeter", description="Entropy-based password strength checker")
    p.add_argument("--config", help="path to a JSON config file")
    p.add_argument("--dictionary", help="CSV file of common passwords (password in the second column)")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    c = sub.add_parser("check", help="Evaluate a password")
    c.add_argument("password", nargs="?", help="password to check (prompted if omitted)")
    c.add_argument("--json", action="store_true", help="print the analysis as JSON")
    c.set_defaults(func=cmd_check)

    s = sub.add_parser("serve", help="Run the HTTP API")
    s.add_argument("--host")
    s.add_argument("--port", type=int)
    s.set_defaults(func=cmd_serve)
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
