from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

pytest.importorskip("typer")


def _run_cli(*args: str, cwd: Path | None = None, check: bool = True) -> subprocess.CompletedProcess[bytes]:
    command = [sys.executable, "-m", "cryptokeys.cli", *args]
    env = os.environ.copy()
    module_root = Path(__file__).resolve().parents[1] / "src"
    env["PYTHONPATH"] = (
        f"{module_root}{os.pathsep}{env['PYTHONPATH']}"
        if env.get("PYTHONPATH")
        else str(module_root)
    )
    env.pop("CRYPTOKEYS_LOG_LEVEL", None)
    return subprocess.run(
        command,
        check=check,
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        env=env,
    )


def test_cli_reports_version() -> None:
    result = _run_cli("--version")
    assert result.stdout.decode("utf-8").strip().startswith("cryptokeys")


def test_cli_generates_symmetric_key(tmp_path: Path) -> None:
    result = _run_cli("generate", "AES", "--kind", "symmetric", cwd=tmp_path)
    payload = json.loads(result.stdout.decode("utf-8"))
    assert payload["algorithm"] == "AES"
    assert payload["keySize"] == 32
    assert {"data", "iv"} <= payload.keys()


def test_cli_logs_json_to_stderr(tmp_path: Path) -> None:
    result = _run_cli("generate", "AES", "--kind", "symmetric", cwd=tmp_path)
    records = [json.loads(line) for line in result.stderr.decode("utf-8").splitlines() if line.strip()]
    assert any(record.get("msg") == "aes.generated" for record in records)


@pytest.mark.slow
def test_cli_rsa_pair_workflow(tmp_path: Path) -> None:
    private_path = tmp_path / "private.json"
    public_path = tmp_path / "public.json"
    _run_cli("generate", "RSA", "-o", str(private_path), cwd=tmp_path)
    _run_cli("public", "-i", str(private_path), "-o", str(public_path), cwd=tmp_path)

    public_info = json.loads(public_path.read_text(encoding="utf-8"))
    assert public_info["data"].startswith("-----BEGIN PUBLIC KEY-----")
    assert "PRIVATE" not in public_info["data"]

    result = _run_cli("match", "--private", str(private_path), "--public", str(public_path), cwd=tmp_path)
    assert result.stdout.decode("utf-8").strip() == "Match OK"

    other_path = tmp_path / "other.json"
    _run_cli("generate", "RSA", "-o", str(other_path), cwd=tmp_path)
    result = _run_cli(
        "match", "--private", str(other_path), "--public", str(public_path), cwd=tmp_path, check=False
    )
    assert result.returncode == 2
    assert result.stdout.decode("utf-8").strip() == "Match FAILED"


def test_cli_unknown_algorithm(tmp_path: Path) -> None:
    result = _run_cli("generate", "DES", "--kind", "symmetric", cwd=tmp_path, check=False)
    assert result.returncode == 1
    assert "UnknownAlgorithm" in result.stderr.decode("utf-8")


def test_cli_rejects_non_descriptor(tmp_path: Path) -> None:
    bogus = tmp_path / "bogus.json"
    bogus.write_text("[]", encoding="utf-8")
    result = _run_cli("public", "-i", str(bogus), cwd=tmp_path, check=False)
    assert result.returncode == 1
