"""Role mapping from the command line: python3 -m ltibridge"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from ltibridge.config import get_settings
from ltibridge.crypto.secrets import SecretCipher
from ltibridge.exceptions import CryptoError
from ltibridge.logging_config import setup_logging
from ltibridge.roles.mapper import RoleMapper
from ltibridge.tools.match import ToolRecord, find_best_match


def _print_or_fail(result: str | None) -> int:
    if result is None:
        print("unmapped", file=sys.stderr)
        return 1
    print(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ltibridge", description="LTI role mapping")
    sub = parser.add_subparsers(dest="command", required=True)

    out = sub.add_parser("outbound", help="Map a local role to LTI roles")
    out.add_argument("role", help="Local role, e.g. maintain")
    out.add_argument("--tool-map", default=None, help="Tool outbound role map")

    inb = sub.add_parser("inbound", help="Map LTI roles to a local role")
    inb.add_argument("roles", help="Comma-separated LTI roles")
    inb.add_argument("--valid", required=True, help="Comma-separated roles the site supports")
    inb.add_argument("--tenant-map", default=None, help="Tenant inbound role map")

    match = sub.add_parser("match", help="Find the registered tool for a URL")
    match.add_argument("url", help="Launch URL")
    match.add_argument("--tools", required=True, type=Path, help="JSON file of tool records")
    match.add_argument("--scope", default=None, help="Current site id")

    for name, help_text in (("encrypt", "Encrypt a tool secret"), ("decrypt", "Decrypt a tool secret")):
        secret = sub.add_parser(name, help=f"{help_text} with LTI_ENCRYPTION_KEY")
        secret.add_argument("value", help="Secret value")

    args = parser.parse_args(argv)
    config = get_settings()
    setup_logging(config)

    if args.command == "outbound":
        return _print_or_fail(RoleMapper(config).outbound(args.role, args.tool_map))

    if args.command == "inbound":
        valid = {r.strip() for r in args.valid.split(",") if r.strip()}
        return _print_or_fail(RoleMapper(config).inbound(args.roles, valid, args.tenant_map))

    if args.command in ("encrypt", "decrypt"):
        cipher = SecretCipher(config)
        try:
            if args.command == "encrypt":
                return _print_or_fail(cipher.encrypt(args.value))
            return _print_or_fail(cipher.decrypt(args.value))
        except CryptoError as exc:
            print(exc.message, file=sys.stderr)
            return 2

    tools = [ToolRecord(**t) for t in json.loads(args.tools.read_text())]
    best = find_best_match(args.url, tools, args.scope)
    return _print_or_fail(None if best is None else best.model_dump_json())


if __name__ == "__main__":
    sys.exit(main())
