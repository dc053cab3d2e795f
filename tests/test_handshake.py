import pytest

from smooth_operator.config.paths import port_file_name, port_file_path
from smooth_operator.constants import HANDSHAKE_TOKEN_MIN, HANDSHAKE_TOKEN_MAX
from smooth_operator.errors import HandshakeTimeoutError, PortFileError
from smooth_operator.server.handshake import (
    clear_port_file,
    make_handshake_token,
    read_port_file,
    wait_for_port,
)


def test_token_range():
    for _ in range(200):
        token = make_handshake_token()
        assert HANDSHAKE_TOKEN_MIN <= token < HANDSHAKE_TOKEN_MAX


def test_port_file_name():
    assert port_file_name(1234567) == "portnr_1234567.txt"


def test_read_missing_file(tmp_path):
    assert read_port_file(tmp_path / "portnr_1.txt") is None


def test_read_empty_file_keeps_polling(tmp_path):
    path = tmp_path / "portnr_1.txt"
    path.write_text("")
    assert read_port_file(path) is None
    assert path.exists()


def test_read_consumes_file(tmp_path):
    path = tmp_path / "portnr_1.txt"
    path.write_text("54321\r\n")
    assert read_port_file(path) == 54321
    assert not path.exists()


@pytest.mark.parametrize("content", ["abc", "12ab", "-5", "0", "70000", "80.5", "\u00b2", "\u0663\u0664"])
def test_read_garbage(tmp_path, content):
    path = tmp_path / "portnr_1.txt"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(PortFileError):
        read_port_file(path)
    assert not path.exists()


def test_clear_port_file(tmp_path):
    path = tmp_path / "portnr_1.txt"
    clear_port_file(path)
    path.write_text("1")
    clear_port_file(path)
    assert not path.exists()


def test_wait_for_port_when_file_appears_later(event_loop, tmp_path):
    path = port_file_path(tmp_path, 5555555)
    event_loop.call_later(0.05, path.write_text, "40001")
    deadline = event_loop.time() + 5

    port = event_loop.run_until_complete(
        wait_for_port(tmp_path, 5555555, deadline=deadline, interval=0.01, timeout=5)
    )
    assert port == 40001
    assert not path.exists()


def test_wait_for_port_timeout(event_loop, tmp_path):
    deadline = event_loop.time() + 0.1
    start = event_loop.time()
    with pytest.raises(HandshakeTimeoutError) as exc:
        event_loop.run_until_complete(
            wait_for_port(tmp_path, 5555555, deadline=deadline, interval=0.01, timeout=0.1)
        )
    assert isinstance(exc.value, TimeoutError)
    assert event_loop.time() - start < 2


def test_wait_for_port_garbage_propagates(event_loop, tmp_path):
    port_file_path(tmp_path, 42).write_text("nope")
    with pytest.raises(PortFileError):
        event_loop.run_until_complete(
            wait_for_port(tmp_path, 42, deadline=event_loop.time() + 5, interval=0.01, timeout=5)
        )


def test_read_undecodable_bytes(tmp_path):
    path = tmp_path / "portnr_1.txt"
    path.write_bytes(b"\xff\xfe\x00")
    with pytest.raises(PortFileError):
        read_port_file(path)
    assert not path.exists()
