"""Tests for the command line entry points."""

import subprocess

import pytest
import uvicorn

from people import cli


@pytest.fixture
def service_env(monkeypatch):
    monkeypatch.setenv("PEOPLE_HOST", "127.0.0.1")
    monkeypatch.setenv("PEOPLE_PORT", "8081")
    monkeypatch.setenv("PEOPLE_LOG_LEVEL", "warning")

    logging_calls = []
    monkeypatch.setattr(cli, "configure_logging", lambda: logging_calls.append(True))
    return logging_calls


def test_main_runs_uvicorn_with_config(monkeypatch, service_env):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    cli.main()

    assert service_env == [True]
    assert calls == [
        (
            ("people.api.app:app",),
            {"host": "127.0.0.1", "port": 8081, "log_level": "warning"},
        )
    ]


def test_dev_runs_fastapi_with_config(monkeypatch, service_env):
    calls = []
    monkeypatch.setattr(subprocess, "run", lambda args: calls.append(args))

    cli.dev()

    assert service_env == [True]
    assert calls == [
        [
            "fastapi",
            "run",
            "--host",
            "127.0.0.1",
            "--port",
            "8081",
            "people/api/app.py",
            "--reload",
        ]
    ]


def test_main_rejects_bad_log_level(monkeypatch):
    monkeypatch.setenv("PEOPLE_LOG_LEVEL", "trace")
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: None)

    with pytest.raises(ValueError, match="PEOPLE_LOG_LEVEL"):
        cli.main()
