"""Check that the new WASM carries a higher binary version than the deployed one."""

from __future__ import annotations

import re
from typing import Any

from .command import UpgradeArgs
from .runner import UpgradeError, run_shell

_BINVER_KEY = '"key":"binver"'
_VAL_PREFIX = '"val":"'
_VERSION_PART = re.compile(r"\+?[0-9]+")
_PART_MAX = 2**32 - 1


def _parse_version(version: str) -> list[int]:
    parts = version.split(".")
    if not all(_VERSION_PART.fullmatch(part) for part in parts):
        raise UpgradeError(f"Invalid version format: {version}")
    numbers = [int(part) for part in parts]
    if any(number > _PART_MAX for number in numbers):
        raise UpgradeError(f"Invalid version format: {version}")
    return numbers


class VersionCheck:
    """Refuses upgrades that do not raise the contract's binver."""

    name = "Version Check"

    def get_contract_metadata(self, args: UpgradeArgs, wasm_hash: str | None = None) -> str:
        """Fetch metadata JSON for the deployed contract, or for a WASM hash if given."""
        if wasm_hash is not None:
            command = (
                f"stellar contract info meta --wasm-hash {wasm_hash} "
                f"--network {args.network} --output json"
            )
        else:
            command = (
                f"stellar contract info meta --id {args.contract_id} "
                f"--network {args.network} --output json"
            )

        result = run_shell(command)
        if result.ok:
            if result.stdout is None:
                raise UpgradeError("Failed to parse metadata output")
            return result.stdout
        if result.stderr is not None:
            raise UpgradeError(f"Failed to get contract metadata: {result.stderr}")
        raise UpgradeError("Failed to get contract metadata")

    def extract_binver(self, metadata_json: str) -> str:
        """Pull the binver value out of metadata JSON."""
        start = metadata_json.find(_BINVER_KEY)
        if start != -1:
            val = metadata_json.find(_VAL_PREFIX, start)
            if val != -1:
                value_start = val + len(_VAL_PREFIX)
                value_end = metadata_json.find('"', value_start)
                if value_end != -1:
                    return metadata_json[value_start:value_end]
        raise UpgradeError("binver not found in metadata")

    def compare_versions(self, current: str, new: str) -> bool:
        """Return True if ``new`` is strictly greater than ``current``."""
        current_parts = _parse_version(current)
        new_parts = _parse_version(new)
        width = max(len(current_parts), len(new_parts))
        current_parts += [0] * (width - len(current_parts))
        new_parts += [0] * (width - len(new_parts))
        return new_parts > current_parts

    def run(self, args: UpgradeArgs, context: Any = None) -> None:
        """Compare deployed and new versions; raise if it is not an upgrade."""
        print("Fetching current contract metadata...")
        current_version = self.extract_binver(self.get_contract_metadata(args))

        print("Fetching new WASM metadata...")
        new_version = self.extract_binver(self.get_contract_metadata(args, args.wasm_hash))

        print(f"Current version: {current_version}")
        print(f"New version: {new_version}")

        if not self.compare_versions(current_version, new_version):
            raise UpgradeError(
                f"❌ New version ({new_version}) is not greater than current version "
                f"({current_version}). Version downgrades are not recommended."
            )
        print(
            f"✅ New version ({new_version}) is greater than current version "
            f"({current_version})"
        )