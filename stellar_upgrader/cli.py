"""Command-line entry point: security checks, confirmation and the upgrade itself."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .checks import run_all_checks
from .command import DEFAULT_FEE, UpgradeArgs, generate_upgrade_command
from .runner import UpgradeError, execute_command

_VERSION = "0.1.0"
_U32_MAX = 2**32 - 1
_YES_ANSWERS = frozenset({"y", "yes"})


def _is_yes(answer: str) -> bool:
    return answer.strip().lower() in _YES_ANSWERS


def confirm_force_upgrade() -> bool:
    """Ask on the terminal whether to proceed without security checks."""
    try:
        print(
            "Are you sure you want to proceed without security checks? (y/N): ",
            end="",
            flush=True,
        )
    except OSError as exc:
        raise UpgradeError(f"Failed to flush stdout: {exc}") from exc
    try:
        answer = sys.stdin.readline()
    except (OSError, UnicodeDecodeError) as exc:
        raise UpgradeError(f"Failed to read user input: {exc}") from exc
    return _is_yes(answer)


def check_force_confirmation(user_input: str | None = None) -> bool:
    """Interpret a given answer, or prompt for one when none is given."""
    if user_input is None:
        return confirm_force_upgrade()
    return _is_yes(user_input)


def run_upgrade(args: UpgradeArgs) -> None:
    """Run the checks (or confirm skipping them) and execute the upgrade."""
    run_upgrade_with_input(args, None)


def run_upgrade_with_input(args: UpgradeArgs, force_input: str | None = None) -> None:
    """Like run_upgrade, but with the force confirmation answer supplied up front."""
    if args.force:
        print("⚠️  WARNING: Security checks are being skipped due to --force flag!")
        print("⚠️  This may result in upgrade failures or loss of upgradeability.")
        print("⚠️  Proceed with caution!\n")
        if not check_force_confirmation(force_input):
            raise UpgradeError("Upgrade cancelled by user")
        print()
    else:
        run_all_checks(args)

    command = generate_upgrade_command(args)
    print(f"Executing: {command}")
    execute_command(command)


def _u32(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid value '{text}'") from None
    if not 0 <= value <= _U32_MAX:
        raise argparse.ArgumentTypeError(f"{text} is not in 0..={_U32_MAX}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its ``upgrade`` subcommand."""
    parser = argparse.ArgumentParser(
        prog="stellar-upgrader",
        description="A Stellar CLI plugin to simplify contract upgrades",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    commands = parser.add_subparsers(dest="command", required=True)

    upgrade = commands.add_parser("upgrade", help="Upgrade a Stellar smart contract")
    upgrade.add_argument("--id", dest="contract_id", required=True,
                         help="The contract ID to upgrade")
    upgrade.add_argument("--wasm-hash", dest="wasm_hash", required=True,
                         help="The new WASM hash for the upgrade")
    upgrade.add_argument("--source", default="alice",
                         help="Source account to pay for the upgrade")
    upgrade.add_argument("--network", default="testnet",
                         help="Network to use (testnet, futurenet, mainnet)")
    upgrade.add_argument("--rpc-url", dest="rpc_url", help="RPC server endpoint")
    upgrade.add_argument("--rpc-header", dest="rpc_header", action="append",
                         help="RPC Header(s) to include in requests to the RPC provider")
    upgrade.add_argument("--network-passphrase", dest="network_passphrase",
                         help="Network passphrase to sign the transaction")
    upgrade.add_argument("--fee", type=_u32, default=DEFAULT_FEE,
                         help="Fee amount for transaction, in stroops (1 stroop = 0.0000001 XLM)")
    upgrade.add_argument("--is-view", dest="is_view", action="store_true",
                         help="Whether to only simulate the transaction")
    upgrade.add_argument("--instructions", type=_u32,
                         help="Number of instructions to simulate")
    upgrade.add_argument("--build-only", dest="build_only", action="store_true",
                         help="Only build the transaction and output base64 XDR")
    upgrade.add_argument("--send", default="default",
                         help="Whether to send the transaction (yes, no, default)")
    upgrade.add_argument("--cost", action="store_true",
                         help="Output the cost execution to stderr")
    upgrade.add_argument("--force", action="store_true",
                         help="Force upgrade and skip security checks")
    return parser


def _upgrade_args(namespace: argparse.Namespace, contract_args: list[str]) -> UpgradeArgs:
    return UpgradeArgs(
        contract_id=namespace.contract_id,
        wasm_hash=namespace.wasm_hash,
        source=namespace.source,
        network=namespace.network,
        rpc_url=namespace.rpc_url,
        rpc_header=namespace.rpc_header,
        network_passphrase=namespace.network_passphrase,
        fee=namespace.fee,
        is_view=namespace.is_view,
        instructions=namespace.instructions,
        build_only=namespace.build_only,
        send=namespace.send,
        cost=namespace.cost,
        force=namespace.force,
        contract_args=contract_args,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and run the requested subcommand."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    # Everything after a bare "--" is passed through to the contract function.
    if "--" in arguments:
        split = arguments.index("--")
        arguments, contract_args = arguments[:split], arguments[split + 1:]
    else:
        contract_args = []

    namespace = build_parser().parse_args(arguments)
    if namespace.command == "upgrade":
        try:
            run_upgrade(_upgrade_args(namespace, contract_args))
        except UpgradeError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())