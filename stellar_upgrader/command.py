"""Upgrade arguments and the invocation they turn into."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_FEE = 100


@dataclass
class UpgradeArgs:
    """Options for upgrading a deployed contract to a new WASM hash."""

    contract_id: str
    wasm_hash: str
    source: str = "alice"
    network: str = "testnet"
    rpc_url: str | None = None
    rpc_header: list[str] | None = None
    network_passphrase: str | None = None
    fee: int = DEFAULT_FEE
    is_view: bool = False
    instructions: int | None = None
    build_only: bool = False
    send: str | None = "default"
    cost: bool = False
    force: bool = False
    contract_args: list[str] = field(default_factory=list)


def generate_upgrade_command(args: UpgradeArgs) -> str:
    """Build the shell command that invokes the contract's upgrade function."""
    parts = [
        "stellar contract invoke",
        f"--id {args.contract_id}",
        f"--source {args.source}",
        f"--network {args.network}",
    ]

    if args.rpc_url is not None:
        parts.append(f"--rpc-url {args.rpc_url}")
    parts.extend(f"--rpc-header {header}" for header in args.rpc_header or ())
    if args.network_passphrase is not None:
        parts.append(f"--network-passphrase {args.network_passphrase}")
    if args.fee != DEFAULT_FEE:
        parts.append(f"--fee {args.fee}")
    if args.is_view:
        parts.append("--is-view")
    if args.instructions is not None:
        parts.append(f"--instructions {args.instructions}")
    if args.build_only:
        parts.append("--build-only")
    if args.send is not None:
        parts.append(f"--send {args.send}")
    if args.cost:
        parts.append("--cost")

    parts.append("-- upgrade")
    parts.append(f"--new_wasm_hash {args.wasm_hash}")
    parts.extend(args.contract_args)

    return " ".join(parts)