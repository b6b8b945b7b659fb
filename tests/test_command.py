from stellar_upgrader.command import UpgradeArgs, generate_upgrade_command


def make_args(**overrides):
    values = dict(
        contract_id="test_contract",
        wasm_hash="test_hash",
        source="alice",
        network="testnet",
        send=None,
    )
    values.update(overrides)
    return UpgradeArgs(**values)


def test_generate_upgrade_command():
    args = UpgradeArgs(
        contract_id="test_contract",
        wasm_hash="abc123",
        source="alice",
        network="testnet",
        rpc_url="https://test.com",
        rpc_header=["Auth: Bearer token"],
        network_passphrase=None,
        fee=200,
        is_view=True,
        instructions=50000,
        build_only=False,
        send="yes",
        cost=True,
        force=False,
        contract_args=["--extra", "arg"],
    )

    command = generate_upgrade_command(args)

    assert "stellar contract invoke" in command
    assert "--id test_contract" in command
    assert "--source alice" in command
    assert "--network testnet" in command
    assert "--rpc-url https://test.com" in command
    assert "--rpc-header Auth: Bearer token" in command
    assert "--fee 200" in command
    assert "--is-view" in command
    assert "--instructions 50000" in command
    assert "--send yes" in command
    assert "--cost" in command
    assert "-- upgrade" in command
    assert "--new_wasm_hash abc123" in command
    assert "--extra arg" in command


def test_minimal_command_is_exact():
    command = generate_upgrade_command(make_args())
    assert command == (
        "stellar contract invoke --id test_contract --source alice "
        "--network testnet -- upgrade --new_wasm_hash test_hash"
    )


def test_default_fee_is_omitted():
    assert "--fee" not in generate_upgrade_command(make_args(fee=100))
    assert "--fee 101" in generate_upgrade_command(make_args(fee=101))


def test_build_only_flag():
    command = generate_upgrade_command(make_args(build_only=True))
    assert command.endswith("-- upgrade --new_wasm_hash test_hash")
    assert " --build-only " in command


def test_every_rpc_header_is_passed():
    command = generate_upgrade_command(make_args(rpc_header=["A: 1", "B: 2"]))
    assert "--rpc-header A: 1 --rpc-header B: 2" in command


def test_network_passphrase():
    command = generate_upgrade_command(make_args(network_passphrase="secret"))
    assert "--network-passphrase secret" in command


def test_default_send_value_is_passed():
    args = UpgradeArgs(contract_id="c", wasm_hash="h")
    command = generate_upgrade_command(args)
    assert "--send default" in command
    assert "--source alice" in command
    assert "--network testnet" in command


def test_force_does_not_change_command():
    assert generate_upgrade_command(make_args(force=True)) == generate_upgrade_command(
        make_args(force=False)
    )


def test_contract_args_follow_wasm_hash():
    command = generate_upgrade_command(make_args(contract_args=["--x", "1"]))
    assert command.endswith("--new_wasm_hash test_hash --x 1")