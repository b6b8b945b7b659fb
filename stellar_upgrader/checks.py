"""Security checks that run before a contract upgrade is attempted."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .command import UpgradeArgs
from .runner import UpgradeError, run_shell
from .version_check import VersionCheck

_UPGRADE_SIGNATURE = "fn upgrade("
_UPGRADE_PARAMETER = "new_wasm_hash: soroban_sdk::BytesN<32>"
_CONSTRUCTOR_SIGNATURE = "fn __constructor("


@dataclass
class SecurityCheckContext:
    """Information shared between checks, gathered once per run."""

    contract_interface: str | None = None

    def require_interface(self) -> str:
        """Return the contract interface, or raise if it was never fetched."""
        if self.contract_interface is None:
            raise UpgradeError("Contract interface information not available")
        return self.contract_interface


class SecurityCheck(ABC):
    """A single pre-upgrade check; ``run`` raises UpgradeError on failure."""

    name: str = ""

    @abstractmethod
    def run(self, args: UpgradeArgs, context: SecurityCheckContext) -> None:
        """Perform the check."""


SecurityCheck.register(VersionCheck)


class ConstructorCheck(SecurityCheck):
    """Fails when the new contract declares a ``__constructor`` function."""

    name = "Constructor Check"

    def run(self, args: UpgradeArgs, context: SecurityCheckContext) -> None:
        interface = context.require_interface()
        if _CONSTRUCTOR_SIGNATURE in interface:
            raise UpgradeError(
                "❌ Contract has a __constructor function, which might cause issues "
                "during upgrade."
            )
        print("✅ Contract does not have a __constructor function")


class UpgradeFunctionCheck(SecurityCheck):
    """Fails unless the new contract keeps a properly typed upgrade function."""

    name = "Upgrade Function Check"

    def run(self, args: UpgradeArgs, context: SecurityCheckContext) -> None:
        interface = context.require_interface()
        if _UPGRADE_SIGNATURE in interface and _UPGRADE_PARAMETER in interface:
            print("✅ Contract exposes an upgrade function with proper signature")
            return
        raise UpgradeError(
            "❌ Contract does not expose a proper upgrade function. Further "
            "upgradeability won't be possible."
        )


def fetch_contract_interface(args: UpgradeArgs, context: SecurityCheckContext) -> None:
    """Fetch the interface of the new WASM and store it in the context."""
    print("Fetching contract interface information...")
    command = (
        f"stellar contract info interface --wasm-hash {args.wasm_hash} "
        f"--network {args.network}"
    )
    result = run_shell(command)
    if result.ok:
        if result.stdout is None:
            raise UpgradeError("Failed to parse contract interface output")
        context.contract_interface = result.stdout
        return
    if result.stderr is not None:
        raise UpgradeError(f"Failed to get contract interface: {result.stderr}")
    raise UpgradeError("Failed to get contract interface")


def get_security_checks() -> list[SecurityCheck]:
    """Return every registered check, in the order they run."""
    return [ConstructorCheck(), UpgradeFunctionCheck(), VersionCheck()]


def run_all_checks(args: UpgradeArgs) -> None:
    """Fetch the contract interface, then run each check, stopping at the first failure."""
    context = SecurityCheckContext()
    fetch_contract_interface(args, context)
    for check in get_security_checks():
        print(f"Running security check: {check.name}")
        check.run(args, context)