# tests/test_config.py
import io
import time

import pytest
from pydantic import ValidationError

from jwtgen.auth.token import decode_jwt
from jwtgen.config import Settings, get_settings
from jwtgen.main import main


def test_defaults() -> None:
    s = Settings()
    assert s.JWT_TTL_MINUTES == 5
    assert s.DEFAULT_PRINCIPAL == "nodeId"
    assert s.INTERNAL_BEARER_HEADER == "X-Trino-Internal-Bearer"
    assert s.VERIFY_TLS is False
    assert s.LOG_LEVEL == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_PRINCIPAL", "coordinator")
    monkeypatch.setenv("JWT_TTL_MINUTES", "1")
    assert get_settings().DEFAULT_PRINCIPAL == "coordinator"

    before = int(time.time())
    out = io.StringIO()
    main(["generate_jwt_token", "--secret", "s"], out=out)
    claims = decode_jwt(out.getvalue().strip(), "s")
    assert claims["sub"] == "coordinator"
    assert before + 60 <= claims["exp"] <= int(time.time()) + 60


def test_log_level_is_case_insensitive() -> None:
    assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="verbose")


def test_unknown_log_level_in_environment(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    code = main(["generate_jwt_token", "--secret", "s"], out=io.StringIO())

    assert code == 2
    assert "LOG_LEVEL" in capsys.readouterr().err
