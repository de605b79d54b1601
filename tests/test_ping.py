import json

import pytest

from mcping import config, ping

from conftest import STATUS, status_response


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    for name in ("MCPING_HOST", "MCPING_PORT", "MCPING_TIMEOUT",
                 "MCPING_MAX_SIZE", "MCPING_DEBUG"):
        monkeypatch.delenv(name, raising=False)


def test_ping_config_defaults():
    assert config.get_config("ping") == {
        "host": "mc.hypixel.net", "port": 25565,
        "timeout": 5.0, "max_size": 10 * 1048576}
    assert config.get_config("log") == {"debug": False}


def test_ping_config_from_environ(monkeypatch):
    monkeypatch.setenv("MCPING_HOST", "localhost")
    monkeypatch.setenv("MCPING_PORT", "25566")
    monkeypatch.setenv("MCPING_TIMEOUT", "0.5")
    monkeypatch.setenv("MCPING_MAX_SIZE", "1024")
    monkeypatch.setenv("MCPING_DEBUG", "1")

    assert config.get_config("ping") == {
        "host": "localhost", "port": 25566, "timeout": 0.5, "max_size": 1024}
    assert config.get_config("log") == {"debug": True}


def test_unknown_component():
    with pytest.raises(KeyError):
        config.get_config("irc")


def test_parse_args_uses_environ(monkeypatch):
    monkeypatch.setenv("MCPING_HOST", "localhost")
    args = ping.parse_args([])
    assert args.host == "localhost"
    assert args.port == 25565
    assert not args.debug

    args = ping.parse_args(["example.org", "25566", "--max-size", "10"])
    assert (args.host, args.port, args.max_size) == ("example.org", 25566, 10)


def test_main_prints_status(fake_server, status_json, capsys):
    with fake_server(status_response(status_json)) as srv:
        code = ping.main([srv.host, str(srv.port)])

    assert code == 0
    assert json.loads(capsys.readouterr().out) == STATUS


def test_main_reports_errors(fake_server, status_json):
    with fake_server(status_response(status_json)) as srv:
        code = ping.main([srv.host, str(srv.port), "--max-size", "1"])
    assert code == 1


def test_main_rejects_bad_port():
    assert ping.main(["localhost", "70000"]) == 2
