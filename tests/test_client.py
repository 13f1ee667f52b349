import threading

import pytest

from sketchbook.client import FetchResult, fetch, main, parse_ports
from sketchbook.server import make_server
from sketchbook.versioninfo import AMERICA_PATH, ASIA_PATH, user_agent


@pytest.fixture
def running_server():
    server = make_server(0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()
    thread.join()


def test_single_port():
    assert parse_ports("8080") == (8080, 8080)


def test_port_range():
    start, end = parse_ports("8080:8090")
    assert start == 8080
    assert end > start


def test_non_numeric_port_raises():
    with pytest.raises(ValueError):
        parse_ports("abc")


def test_missing_end_port_raises():
    with pytest.raises(ValueError):
        parse_ports("8080:")


def test_reversed_range_raises():
    with pytest.raises(ValueError):
        parse_ports("8090:8080")


def test_fetch_asia(running_server):
    port = running_server.server_address[1]
    result = fetch("127.0.0.1", port, ASIA_PATH, "tester")
    assert result == FetchResult(200, user_agent(), "India")


def test_fetch_america(running_server):
    port = running_server.server_address[1]
    result = fetch("127.0.0.1", port, AMERICA_PATH, "tester")
    assert result.status == 200
    assert result.body == "United States"


def test_fetch_sends_user_agent(running_server, capsys):
    port = running_server.server_address[1]
    fetch("127.0.0.1", port, ASIA_PATH, "probe-agent")
    assert "from: probe-agent" in capsys.readouterr().out


def test_main_with_too_many_arguments(capsys):
    assert main(["1", "2"]) == 1
    out = capsys.readouterr().out
    assert "Usage:" in out
    assert "8080:8080" in out


def test_main_with_bad_ports(capsys):
    assert main(["x:y"]) == 1
    assert "Invalid port range" in capsys.readouterr().err