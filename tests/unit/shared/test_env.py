from __future__ import annotations

import logging
import os

from src.shared.env import load_secret_file_variables


def test_reads_secret_file_into_target_variable(tmp_path):
    secret_file = tmp_path / "stripe_secret_key"
    secret_file.write_text("sk_live_abc\n", encoding="utf-8")
    environ = {"STRIPE_SECRET_KEY_FILE": str(secret_file)}

    load_secret_file_variables(environ)

    assert environ["STRIPE_SECRET_KEY"] == "sk_live_abc"


def test_defaults_to_process_environment(tmp_path, monkeypatch):
    secret_file = tmp_path / "webhook_secret"
    secret_file.write_text("whsec", encoding="utf-8")
    monkeypatch.setenv("WEBHOOK_SECRET_FILE", str(secret_file))
    monkeypatch.setenv("WEBHOOK_SECRET", "")

    load_secret_file_variables()

    assert os.environ["WEBHOOK_SECRET"] == "whsec"


def test_logs_missing_file_without_value(tmp_path, caplog):
    environ = {"MAIL_PASSWORD_FILE": str(tmp_path / "absent")}

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables(environ)

    assert "MAIL_PASSWORD" not in environ
    assert any(record.message == "env.secret_file.missing" for record in caplog.records)


def test_logs_undecodable_file(tmp_path, caplog):
    binary_file = tmp_path / "binary.bin"
    binary_file.write_bytes(b"\xff\xfe\xfd")
    environ = {"DB_URL_FILE": str(binary_file)}

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables(environ)

    assert "DB_URL" not in environ
    assert any(
        record.message == "env.secret_file.decode_failed" for record in caplog.records
    )


def test_logs_other_read_errors(tmp_path, caplog):
    environ = {"PAYPAL_CLIENT_ID_FILE": str(tmp_path)}

    with caplog.at_level(logging.WARNING):
        load_secret_file_variables(environ)

    assert any(
        record.message == "env.secret_file.load_failed" for record in caplog.records
    )


def test_keeps_existing_target_and_ignores_empty_paths():
    environ = {
        "STRIPE_SECRET_KEY": "sk_from_env",
        "STRIPE_SECRET_KEY_FILE": "/run/secrets/ignored",
        "MAIL_HOST_FILE": "",
    }

    load_secret_file_variables(environ)

    assert environ["STRIPE_SECRET_KEY"] == "sk_from_env"
    assert "MAIL_HOST" not in environ
