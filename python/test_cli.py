#!/usr/bin/env python3
"""コマンドラインのテスト"""
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from upload3r.cli import EXIT_FATAL, main


@pytest.fixture
def store(fake_store):
    store = fake_store()
    with patch("upload3r.core.task_runner.S3ObjectStore.from_config", return_value=store) as from_config:
        store.from_config = from_config
        yield store


def invoke(*args):
    return CliRunner().invoke(main, list(args), env={"AWS_ACCESS_KEY_ID": None, "AWS_SECRET_ACCESS_KEY": None})


def test_upload_directory(data_dir, store):
    result = invoke("--source", str(data_dir), "--bucket", "b", "--bucket-prefix", "x", "--thread-num", "2")

    assert result.exit_code == 0, result.output
    assert store.keys == ["x/a.txt", "x/sub/b.txt"]
    aws_config, concurrency = store.from_config.call_args[0]
    assert aws_config.endpoint_url == "https://hb.bizmrg.com"
    assert aws_config.region == "ru-msk"
    assert concurrency == 2


def test_upload_single_file(tmp_path, store):
    path = tmp_path / "report.csv"
    path.write_bytes(b"x")

    result = invoke(
        "--source", str(path), "--bucket", "b", "--bucket-prefix", "docs",
        "--uri", "http://localhost:9000", "--region", "us-east-1",
        "--key-id", "id", "--secret", "s3cr3t", "--permissions", "public-read",
    )

    assert result.exit_code == 0, result.output
    assert store.acls == {("b", "docs/report.csv"): "public-read"}
    aws_config, _ = store.from_config.call_args[0]
    assert aws_config.access_key_id == "id"
    assert aws_config.secret_access_key == "s3cr3t"


def test_credentials_from_environment(tmp_path, store):
    path = tmp_path / "report.csv"
    path.write_bytes(b"x")

    result = CliRunner().invoke(
        main,
        ["--source", str(path), "--bucket", "b"],
        env={"AWS_ACCESS_KEY_ID": "env-id", "AWS_SECRET_ACCESS_KEY": "env-secret"},
    )

    assert result.exit_code == 0, result.output
    aws_config, _ = store.from_config.call_args[0]
    assert aws_config.access_key_id == "env-id"


def test_failure_exit_code(data_dir, fake_store):
    failing = fake_store(fail_keys={"x/sub/b.txt"})
    with patch("upload3r.core.task_runner.S3ObjectStore.from_config", return_value=failing):
        result = invoke("--source", str(data_dir), "--bucket", "b", "--bucket-prefix", "x")

    assert result.exit_code == EXIT_FATAL


def test_missing_source_exit_code(tmp_path, store):
    result = invoke("--source", str(tmp_path / "missing"), "--bucket", "b")

    assert result.exit_code == EXIT_FATAL
    assert store.bodies == []


def test_dry_run(data_dir, store):
    result = invoke("--source", str(data_dir), "--bucket", "b", "--dry-run")

    assert result.exit_code == 0, result.output
    assert store.objects == {}


@pytest.mark.parametrize("args", [
    ["--bucket", "b"],
    ["--source", "x"],
    ["--source", "x", "--bucket", "b", "--thread-num", "0"],
    ["--source", "x", "--bucket", "b", "--permissions", "everyone"],
    ["--source", "x", "--bucket", "b", "--uri", "hb.bizmrg.com"],
])
def test_invalid_options(args, store):
    result = invoke(*args)

    assert result.exit_code == 2
    assert store.from_config.call_count == 0


def test_version():
    result = invoke("--version")

    assert result.exit_code == 0
    assert "upload3r" in result.output
