import io

import pytest

from bytecrypt.cryption import (
    decrypt_bytes,
    encrypt_bytes,
    execute_cryption,
    main,
    transform_stream,
)
from bytecrypt.task import Action, TaskFormatError


def test_encrypt_shifts_each_byte():
    assert encrypt_bytes(b"abc", 1) == b"bcd"


def test_encrypt_wraps_around():
    assert encrypt_bytes(bytes([255, 0]), 1) == bytes([0, 1])


@pytest.mark.parametrize("key", [0, 1, 3, 200, 255, 256, 1000, -5])
def test_round_trip(key):
    data = bytes(range(256)) * 2
    encrypted = encrypt_bytes(data, key)
    assert len(encrypted) == len(data)
    assert decrypt_bytes(encrypted, key) == data


def test_key_is_taken_modulo_256():
    data = b"hello world"
    assert encrypt_bytes(data, 256 + 7) == encrypt_bytes(data, 7)
    assert encrypt_bytes(data, 0) == data


def test_transform_stream_in_place():
    stream = io.BytesIO(b"hello")
    assert transform_stream(stream, Action.ENCRYPT, 4) == 5
    assert stream.getvalue() == encrypt_bytes(b"hello", 4)
    stream.seek(0)
    transform_stream(stream, Action.DECRYPT, 4)
    assert stream.getvalue() == b"hello"


def test_transform_stream_starts_at_current_position():
    stream = io.BytesIO(b"keepXYZ")
    stream.seek(4)
    assert transform_stream(stream, Action.ENCRYPT, 2) == 3
    assert stream.getvalue() == b"keep" + encrypt_bytes(b"XYZ", 2)


def test_transform_stream_large_data():
    data = bytes(range(256)) * 1000
    stream = io.BytesIO(data)
    assert transform_stream(stream, Action.ENCRYPT, 9) == len(data)
    assert stream.getvalue() == encrypt_bytes(data, 9)


def test_execute_cryption_round_trip(tmp_path):
    env = tmp_path / ".env"
    env.write_text("5")
    target = tmp_path / "file.txt"
    target.write_bytes(b"secret contents")
    execute_cryption(f"{target},ENCRYPT", env)
    assert target.read_bytes() == encrypt_bytes(b"secret contents", 5)
    execute_cryption(f"{target},DECRYPT", env)
    assert target.read_bytes() == b"secret contents"


def test_execute_cryption_bad_data():
    with pytest.raises(TaskFormatError):
        execute_cryption("nothing")


def test_execute_cryption_bad_key_leaves_file(tmp_path):
    env = tmp_path / ".env"
    env.write_text("not a number")
    target = tmp_path / "file.txt"
    target.write_bytes(b"abc")
    with pytest.raises(ValueError):
        execute_cryption(f"{target},ENCRYPT", env)
    assert target.read_bytes() == b"abc"


def test_main_usage_error(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_runs_task(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("3")
    target = tmp_path / "file.txt"
    target.write_bytes(b"data")
    monkeypatch.chdir(tmp_path)
    assert main([f"{target},ENCRYPT"]) == 0
    assert target.read_bytes() == encrypt_bytes(b"data", 3)