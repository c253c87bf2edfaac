"""Tests for config, identity tokens and logging."""

import json
import logging
import sys
from datetime import timedelta

import pytest

from homebase_backend.config import Settings, get_settings, settings
from homebase_backend.core.exceptions import AuthenticationError
from homebase_backend.core.logging import (
    FileLogger,
    StructuredFormatter,
    TransactionIdFilter,
    get_logger,
    set_transaction_id,
    setup_logging,
    shutdown_logging,
)
from homebase_backend.database import build_connect_args
from homebase_backend.modules.auth.jwt_service import decode_identity_token
from homebase_backend.modules.auth.schemas import CallerIdentity


class TestSettings:
    """Tests for YAML settings loading."""

    def test_loaded_from_test_config(self) -> None:
        assert settings.app_env == "test"
        assert settings.invite_base_url == "https://homebase.test"
        assert settings.database_url.startswith("sqlite+aiosqlite")

    def test_from_yaml(self, tmp_path) -> None:
        config_file = tmp_path / "custom.yaml"
        config_file.write_text(
            "app_env: staging\nlog_level: DEBUG\ninvite_base_url: https://stage.example\n"
        )

        loaded = Settings.from_yaml(str(config_file))

        assert loaded.app_env == "staging"
        assert loaded.log_level == "DEBUG"
        assert loaded.invite_base_url == "https://stage.example"
        assert loaded.invite_path == "/invite"

    def test_empty_yaml_uses_defaults(self, tmp_path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        loaded = Settings.from_yaml(str(config_file))

        assert loaded.api_prefix == "/api"
        assert loaded.identity_jwt_algorithm == "HS256"

    def test_missing_config_variable(self, monkeypatch) -> None:
        monkeypatch.delenv("CONFIG", raising=False)

        with pytest.raises(ValueError):
            get_settings()

    def test_missing_config_file(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("CONFIG", str(tmp_path / "nope.yaml"))

        with pytest.raises(FileNotFoundError):
            get_settings()

    def test_ssl_only_for_mysql(self) -> None:
        assert build_connect_args("sqlite+aiosqlite:///x.db") == {}
        assert "ssl" in build_connect_args("mysql+asyncmy://u:p@db:3306/homebase")


class TestIdentityTokens:
    """Tests for identity token verification."""

    def test_decodes_caller(self, make_token) -> None:
        caller = decode_identity_token(
            make_token("user-1", email="ann@example.com", name="Ann")
        )

        assert caller == CallerIdentity(
            external_id="user-1", email="ann@example.com", name="Ann"
        )

    def test_display_name_fallbacks(self) -> None:
        assert CallerIdentity(external_id="a", name="Ann").display_name == "Ann"
        assert CallerIdentity(external_id="a", email="ann@x.io").display_name == "ann"
        assert CallerIdentity(external_id="a").display_name == "User"

    def test_expired(self, make_token) -> None:
        with pytest.raises(AuthenticationError, match="expired"):
            decode_identity_token(make_token("user-1", expires_in=timedelta(seconds=-30)))

    def test_bad_signature(self, make_token) -> None:
        with pytest.raises(AuthenticationError):
            decode_identity_token(make_token("user-1", secret="wrong-secret"))

    def test_garbage(self) -> None:
        with pytest.raises(AuthenticationError):
            decode_identity_token("not.a.token")


class TestStructuredFormatter:
    """Tests for the JSON log formatter."""

    def test_record_fields(self) -> None:
        formatter = StructuredFormatter()
        record = logging.LogRecord(
            name="homebase_backend.tests",
            level=logging.INFO,
            pathname=__file__,
            lineno=10,
            msg="Tenant linked to property",
            args=(),
            exc_info=None,
        )
        record.property_id = "prop-1"
        set_transaction_id("txn-0001")
        TransactionIdFilter().filter(record)

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "Tenant linked to property"
        assert payload["level"] == "INFO"
        assert payload["transaction_id"] == "txn-0001"
        assert payload["property_id"] == "prop-1"
        assert payload["service"]["name"] == "homebase-backend"
        assert "msg" not in payload

    def test_exception_block(self) -> None:
        formatter = StructuredFormatter()
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                name="homebase_backend.tests",
                level=logging.ERROR,
                pathname=__file__,
                lineno=20,
                msg="failed",
                args=(),
                exc_info=sys.exc_info(),
            )

        payload = json.loads(formatter.format(record))

        assert payload["exception"]["type"] == "RuntimeError"
        assert payload["exception"]["message"] == "boom"


class TestLoggingSetup:
    """Tests for logger naming and handler installation."""

    def test_logger_namespace(self) -> None:
        assert get_logger().name == "homebase_backend"
        assert get_logger("workers").name == "homebase_backend.workers"
        assert (
            get_logger("homebase_backend.modules.auth").name
            == "homebase_backend.modules.auth"
        )

    def test_console_setup_is_idempotent(self) -> None:
        try:
            first = setup_logging(log_to_file=False, log_level="DEBUG")
            second = setup_logging(log_to_file=False, log_level="ERROR")

            assert first is second
            assert first.level == logging.DEBUG
            assert len(first.handlers) == 1
        finally:
            shutdown_logging()
            app_logger = logging.getLogger("homebase_backend")
            app_logger.handlers.clear()
            app_logger.propagate = True
            app_logger.setLevel(logging.NOTSET)

    def test_file_logger_writes_through_queue(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "app.log"
        file_logger = FileLogger(log_file_path=str(log_file), log_level="INFO")
        test_logger = logging.getLogger("homebase_backend.tests.file")
        test_logger.propagate = False
        test_logger.setLevel(logging.INFO)
        test_logger.addHandler(file_logger.queue_handler)

        file_logger.start()
        try:
            test_logger.info("written to disk", extra={"property_id": "prop-9"})
        finally:
            file_logger.stop()
            test_logger.removeHandler(file_logger.queue_handler)

        line = log_file.read_text().strip().splitlines()[-1]
        assert json.loads(line)["message"] == "written to disk"
        assert json.loads(line)["property_id"] == "prop-9"
