import argparse
import io

import pytest
import requests

from mydict import cli
from mydict.lookup_service import LookupFailedError, LookupService
from mydict.models import parse_word_record
from mydict.renderer import Renderer

from conftest import CHINESE_PAYLOAD, ENGLISH_PAYLOAD, FakeResponse, FakeSession


class RecordingService:
    def __init__(self, payloads):
        self.payloads = payloads
        self.words = []
        self.closed = False

    def lookup(self, word):
        self.words.append(word)
        payload = self.payloads.get(word)
        if isinstance(payload, BaseException):
            raise payload
        return parse_word_record(payload)

    def close(self):
        self.closed = True


def make_app(config, payloads):
    stream = io.StringIO()
    service = RecordingService(payloads)
    app = cli.MyDict(config=config, service=service, renderer=Renderer(stream=stream, color=False))
    return app, service, stream


def feed_input(monkeypatch, lines):
    remaining = list(lines)

    def fake_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def no_env_files(monkeypatch):
    monkeypatch.setattr(cli, "load_environment", lambda: None)
    monkeypatch.setenv("API_KEY", "")
    monkeypatch.delenv("API_KEY")


def test_interactive_runs_one_cycle_per_line(config, monkeypatch):
    app, service, stream = make_app(config, {"hello": ENGLISH_PAYLOAD, "你好": CHINESE_PAYLOAD})
    feed_input(monkeypatch, ["hello", "你好"])

    app.interactive()

    assert service.words == ["hello", "你好"]
    lines = stream.getvalue().splitlines()
    assert "# test" in lines
    assert "# 测试" in lines


def test_interactive_skips_blank_lines_and_strips(config, monkeypatch):
    app, service, _ = make_app(config, {})
    feed_input(monkeypatch, ["", "   ", "  apple \n"])

    app.interactive()

    assert service.words == ["apple"]


def test_interactive_continues_after_failure(config, monkeypatch, capsys):
    payloads = {"bad": LookupFailedError("bad", "timed out"), "hello": ENGLISH_PAYLOAD}
    app, service, stream = make_app(config, payloads)
    feed_input(monkeypatch, ["bad", "hello"])

    app.interactive()

    assert service.words == ["bad", "hello"]
    assert "Error: timed out" in capsys.readouterr().out
    assert "# test" in stream.getvalue()


def test_lookup_word_reports_missing_word(config, capsys):
    app, _, stream = make_app(config, {})

    assert app.lookup_word("qwzx") is True

    assert "No results for 'qwzx'." in capsys.readouterr().out
    assert stream.getvalue() == ""


def test_run_joins_positional_words(config):
    app, service, _ = make_app(config, {})
    args = argparse.Namespace(word=["ice", "cream"], interactive=False)

    assert app.run(args) == 0
    assert service.words == ["ice cream"]


def test_run_returns_error_status_on_failed_request(config):
    app, _, _ = make_app(config, {"hello": LookupFailedError("hello", "connection refused")})
    args = argparse.Namespace(word=["hello"], interactive=False)

    assert app.run(args) == 1


def test_main_without_word_prints_help_and_fails(no_env_files, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 1
    assert "usage:" in capsys.readouterr().out


def test_main_version_short_circuits(no_env_files, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-v", "hello"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == "0.1.0"


def test_main_help_short_circuits(no_env_files, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--help"])

    assert excinfo.value.code == 0
    assert "--interactive" in capsys.readouterr().out


def test_main_missing_api_key_is_configuration_error(no_env_files, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["hello"])

    assert excinfo.value.code == 1
    assert "Configuration error" in capsys.readouterr().out


def test_main_one_shot_lookup(no_env_files, monkeypatch, capsys):
    session = FakeSession(FakeResponse(ENGLISH_PAYLOAD))
    monkeypatch.setenv("API_KEY", "secret-key")
    monkeypatch.setattr(cli, "LookupService", lambda config: LookupService(config, session=session))

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--no-color", "test"])

    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "# test" in out
    assert "EN[test] AM[tɛst]" in out
    assert session.calls[0]["params"]["w"] == "test"
    assert session.closed


def test_main_one_shot_request_failure(no_env_files, monkeypatch, capsys):
    session = FakeSession(error=requests.ConnectionError("connection refused"))
    monkeypatch.setenv("API_KEY", "secret-key")
    monkeypatch.setattr(cli, "LookupService", lambda config: LookupService(config, session=session))

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["hello"])

    assert excinfo.value.code == 1
    assert "Error: connection refused" in capsys.readouterr().out


def test_main_show_config_does_not_need_key(no_env_files, monkeypatch, capsys):
    monkeypatch.setattr(cli, "show_config", lambda: print("config shown"))

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--show-config"])

    assert excinfo.value.code == 0
    assert "config shown" in capsys.readouterr().out


def test_interactive_ctrl_c_during_lookup_ends_loop(config, monkeypatch, capsys):
    app, service, _ = make_app(config, {"hello": KeyboardInterrupt()})
    feed_input(monkeypatch, ["hello", "world"])

    app.interactive()

    assert service.words == ["hello"]
    assert capsys.readouterr().out.endswith("\n")


def test_run_keeps_failure_status_after_interactive_session(config, monkeypatch):
    app, service, _ = make_app(config, {"hello": LookupFailedError("hello", "connection refused")})
    feed_input(monkeypatch, ["world"])
    args = argparse.Namespace(word=["hello"], interactive=True)

    assert app.run(args) == 1
    assert service.words == ["hello", "world"]
