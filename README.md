# stellar-upgrader

A command-line helper for upgrading Stellar smart contracts. Before the
upgrade it runs a set of security checks using the `stellar` CLI, and once
they pass it runs

```
stellar contract invoke --id <ID> --source <SOURCE> --network <NETWORK> ... -- upgrade --new_wasm_hash <HASH>
```

for you. The `stellar` CLI must be installed and on your `PATH`; every step
is carried out by running it through the system shell.

## Installation

```
pip install .
```

## Usage

```
stellar-upgrader upgrade --id <CONTRACT_ID> --wasm-hash <WASM_HASH>
```

`stellar-upgrader --version` prints the tool's version.

### Security checks

First the interface of the new WASM is fetched with
`stellar contract info interface --wasm-hash <HASH> --network <NETWORK>`.
Then these checks run in order, stopping at the first failure:

- **Constructor Check**: the new contract's interface must not contain a
  `__constructor` function.
- **Upgrade Function Check**: the interface must still contain
  `fn upgrade(` and the parameter `new_wasm_hash: soroban_sdk::BytesN<32>`.
  Without it, later upgrades are not possible.
- **Version Check**: the `binver` metadata of the new WASM (from
  `stellar contract info meta --wasm-hash ... --output json`) must be
  strictly greater than that of the deployed contract (from
  `stellar contract info meta --id ... --output json`). Versions are
  compared as dot-separated numbers, with missing parts counted as zero,
  so `1.0.1` is greater than `1.0`.

### Options

| Option | Default | Meaning |
| --- | --- | --- |
| `--id` | required | Contract ID to upgrade |
| `--wasm-hash` | required | Hash of the new WASM |
| `--source` | `alice` | Account that pays for the upgrade |
| `--network` | `testnet` | Network to use (testnet, futurenet, mainnet) |
| `--rpc-url` | | RPC server endpoint |
| `--rpc-header` | | Header for the RPC provider; may be repeated |
| `--network-passphrase` | | Network passphrase |
| `--fee` | `100` | Fee in stroops; passed on only when not 100 |
| `--is-view` | off | Only simulate the transaction |
| `--instructions` | | Number of instructions to simulate |
| `--build-only` | off | Only build the transaction and print base64 XDR |
| `--send` | `default` | Whether to send the transaction (yes, no, default) |
| `--cost` | off | Print execution cost to stderr |
| `--force` | off | Skip the checks, after you confirm at a prompt |

`--fee` and `--instructions` take whole numbers from 0 to 4294967295.

Arguments after the first `--` are appended to the `upgrade` invocation:

```
stellar-upgrader upgrade --id CONTRACT --wasm-hash HASH -- --extra arg
```

With `--force` the checks are skipped. A warning is printed and you are
asked to confirm; only `y` or `yes` (in any case, surrounding spaces
ignored) continues. Anything else cancels with `Upgrade cancelled by user`.

The tool prints `Executing: <command>` before running the upgrade, and the
command's output if there is any. On failure it prints `Error: <reason>` to
stderr and exits with status 1.

## Using it from Python

```python
from stellar_upgrader.command import UpgradeArgs, generate_upgrade_command
from stellar_upgrader.cli import run_upgrade_with_input

args = UpgradeArgs(contract_id="CONTRACT", wasm_hash="HASH", fee=200)
print(generate_upgrade_command(args))

run_upgrade_with_input(UpgradeArgs("CONTRACT", "HASH", force=True), force_input="y")
```

- `stellar_upgrader.command`: `UpgradeArgs` and `generate_upgrade_command`.
- `stellar_upgrader.checks`: `SecurityCheckContext`, `SecurityCheck`,
  `ConstructorCheck`, `UpgradeFunctionCheck`, `fetch_contract_interface`,
  `get_security_checks` and `run_all_checks`.
- `stellar_upgrader.version_check`: `VersionCheck`, with `extract_binver`
  and `compare_versions`.
- `stellar_upgrader.cli`: `run_upgrade`, `run_upgrade_with_input`,
  `check_force_confirmation`, `build_parser` and `main`.

Every failure is raised as `stellar_upgrader.runner.UpgradeError`.

## What it does not do

Commands are assembled as plain strings and handed to the shell; values
are not quoted, so options containing spaces or shell characters (an RPC
header such as `Authorization: Bearer token`, for instance) are split or
interpreted by the shell. The tool does not talk to the Stellar network
itself and does nothing without the `stellar` CLI.