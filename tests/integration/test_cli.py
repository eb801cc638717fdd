"""Integration tests for the orbit-node-config command line."""

import json
from pathlib import Path
from typing import Dict

import pytest
import responses
from click.testing import CliRunner

from orbit_node_config.cli import cli

ENV_VARS = [
    "BATCH_POSTER_PRIVATE_KEY",
    "VALIDATOR_PRIVATE_KEY",
    "AVAIL_ADDR_SEED",
    "AVAIL_APP_ID",
    "PARENT_CHAIN_ID",
    "PARENT_CHAIN_RPC",
    "ETHEREUM_BEACON_RPC_URL",
    "DAS_SERVER_URL",
    "CHAIN_NAME",
    "FALLBACKS3_ENABLE",
    "FALLBACKS3_ACCESS_KEY",
    "FALLBACKS3_SECRET_KEY",
    "FALLBACKS3_REGION",
    "FALLBACKS3_OBJECT_PREFIX",
    "FALLBACKS3_BUCKET",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path: Path):
    """Start from an environment without deployment variables or a .env file."""
    for name in ENV_VARS:
        # setenv first so anything load_dotenv adds is removed on teardown
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def env(clean_env, base_environ: Dict[str, str]):
    for name, value in base_environ.items():
        clean_env.setenv(name, value)
    return clean_env


class TestGenerateCommand:
    """Test the generate command."""

    def test_writes_both_configs(self, env, deployment_result_file: Path, tmp_path: Path):
        output_dir = tmp_path / "out"
        result = CliRunner().invoke(
            cli,
            ["generate", "--deployment", str(deployment_result_file), "--output-dir", str(output_dir)],
        )

        assert result.exit_code == 0, result.output
        assert (output_dir / "nodeConfig.json").exists()
        assert (output_dir / "orbitSetupScriptConfig.json").exists()

        with open(output_dir / "nodeConfig.json") as f:
            node_config = json.load(f)
        assert node_config["parent-chain"]["connection"]["url"] == "https://arb-sepolia.example/rpc"

    def test_defaults_to_working_directory(self, env, deployment_result_file: Path, tmp_path: Path):
        result = CliRunner().invoke(cli, ["generate", "--deployment", str(deployment_result_file)])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "nodeConfig.json").exists()
        assert (tmp_path / "orbitSetupScriptConfig.json").exists()

    def test_missing_beacon_url_fails_without_writing(
        self, env, deployment_result_file: Path, tmp_path: Path
    ):
        env.setenv("PARENT_CHAIN_ID", "11155111")
        output_dir = tmp_path / "out"

        result = CliRunner().invoke(
            cli,
            ["generate", "--deployment", str(deployment_result_file), "--output-dir", str(output_dir)],
        )

        assert result.exit_code == 1
        assert "parentChainBeaconRpcUrl" in result.output
        assert not output_dir.exists()

    def test_missing_environment_variable_fails(
        self, env, deployment_result_file: Path, tmp_path: Path
    ):
        env.delenv("AVAIL_ADDR_SEED")

        result = CliRunner().invoke(cli, ["generate", "--deployment", str(deployment_result_file)])

        assert result.exit_code == 1
        assert "AVAIL_ADDR_SEED" in result.output
        assert not (tmp_path / "nodeConfig.json").exists()

    def test_loads_env_file(self, clean_env, base_environ, deployment_result_file: Path, tmp_path: Path):
        env_file = tmp_path / "deploy.env"
        env_file.write_text("\n".join(f"{k}={v}" for k, v in base_environ.items()) + "\n")
        output_dir = tmp_path / "out"

        result = CliRunner().invoke(
            cli,
            [
                "generate",
                "--deployment",
                str(deployment_result_file),
                "--env-file",
                str(env_file),
                "--output-dir",
                str(output_dir),
            ],
        )

        assert result.exit_code == 0, result.output
        assert (output_dir / "nodeConfig.json").exists()

    @responses.activate
    def test_verify_rpc_rejects_wrong_chain(self, env, deployment_result_file: Path, tmp_path: Path):
        responses.add(
            responses.POST,
            "https://arb-sepolia.example/rpc",
            json={"jsonrpc": "2.0", "id": 1, "result": "0xa4b1"},
        )

        result = CliRunner().invoke(
            cli, ["generate", "--deployment", str(deployment_result_file), "--verify-rpc"]
        )

        assert result.exit_code == 1
        assert not (tmp_path / "nodeConfig.json").exists()

    @responses.activate
    def test_verify_rpc_accepts_matching_chain(self, env, deployment_result_file: Path, tmp_path: Path):
        responses.add(
            responses.POST,
            "https://arb-sepolia.example/rpc",
            json={"jsonrpc": "2.0", "id": 1, "result": "0x66eee"},
        )

        result = CliRunner().invoke(
            cli, ["generate", "--deployment", str(deployment_result_file), "--verify-rpc"]
        )

        assert result.exit_code == 0, result.output
        assert (tmp_path / "nodeConfig.json").exists()

    @responses.activate
    def test_verify_rpc_reply_without_result_fails(
        self, env, deployment_result_file: Path, tmp_path: Path
    ):
        responses.add(
            responses.POST, "https://arb-sepolia.example/rpc", json={"jsonrpc": "2.0", "id": 1}
        )

        result = CliRunner().invoke(
            cli, ["generate", "--deployment", str(deployment_result_file), "--verify-rpc"]
        )

        assert result.exit_code == 1
        assert "Config generation failed" in result.output
        assert not (tmp_path / "nodeConfig.json").exists()

    def test_malformed_deployment_fails(self, env, deployment_result_json, tmp_path: Path):
        deployment_path = tmp_path / "deployment.json"
        deployment_path.write_text(json.dumps(dict(deployment_result_json, coreContracts=None)))

        result = CliRunner().invoke(cli, ["generate", "--deployment", str(deployment_path)])

        assert result.exit_code == 1
        assert "coreContracts" in result.output
        assert not (tmp_path / "nodeConfig.json").exists()

    def test_unwritable_output_leaves_no_files(
        self, env, deployment_result_file: Path, tmp_path: Path
    ):
        output_dir = tmp_path / "out"
        (output_dir / "orbitSetupScriptConfig.json").mkdir(parents=True)

        result = CliRunner().invoke(
            cli,
            ["generate", "--deployment", str(deployment_result_file), "--output-dir", str(output_dir)],
        )

        assert result.exit_code == 1
        assert "Config generation failed" in result.output
        assert not (output_dir / "nodeConfig.json").exists()

    def test_missing_deployment_file_is_usage_error(self, env, tmp_path: Path):
        result = CliRunner().invoke(cli, ["generate", "--deployment", str(tmp_path / "nope.json")])
        assert result.exit_code == 2


class TestParentChainsCommand:
    """Test the parent-chains command."""

    def test_lists_supported_chains(self):
        result = CliRunner().invoke(cli, ["parent-chains"])

        assert result.exit_code == 0
        assert "421614" in result.output
        assert "84532" in result.output
