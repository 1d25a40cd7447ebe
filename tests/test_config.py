from __future__ import annotations

import pytest

from vehicle_showcase.config import cors_origins, default_page_limit, log_level


def test_cors_origins_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("VEHICLE_SHOWCASE_CORS_ORIGINS", raising=False)

    assert cors_origins() == ["http://localhost:3000"]


def test_cors_origins_split_and_trimmed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLE_SHOWCASE_CORS_ORIGINS", "https://a.example, https://b.example,")

    assert cors_origins() == ["https://a.example", "https://b.example"]


def test_default_page_limit_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("VEHICLE_SHOWCASE_DEFAULT_LIMIT", raising=False)

    assert default_page_limit() == 10


def test_default_page_limit_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLE_SHOWCASE_DEFAULT_LIMIT", "50")

    assert default_page_limit() == 50


@pytest.mark.parametrize("raw", ["ten", "0", "-5"])
def test_default_page_limit_rejects_bad_values(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("VEHICLE_SHOWCASE_DEFAULT_LIMIT", raw)

    with pytest.raises(RuntimeError, match="VEHICLE_SHOWCASE_DEFAULT_LIMIT"):
        default_page_limit()


def test_default_page_limit_parse_error_is_not_chained(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLE_SHOWCASE_DEFAULT_LIMIT", "ten")

    with pytest.raises(RuntimeError) as exc_info:
        default_page_limit()

    assert exc_info.value.__suppress_context__ is True
    assert exc_info.value.__cause__ is None


def test_log_level_is_upper_cased(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLE_SHOWCASE_LOG_LEVEL", "debug")

    assert log_level() == "DEBUG"
