#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Base62UX: Human-Friendly Binary Encoding
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: tests/test_base62ux_tool.py

"""
Tests for the base62ux command-line tool (src/base62ux_tool.py).
"""
import io
import sys
from configparser import ConfigParser

import pytest

import base62ux_tool
from base62ux import decode, encode
from base62ux_tool import main


@pytest.fixture
def empty_config(monkeypatch):
    """Replaces the loaded config.ini with an empty one."""
    config = ConfigParser()
    monkeypatch.setattr(base62ux_tool, "APP_CONFIG", config)
    monkeypatch.delenv("BASE62UX_LOG_LEVEL", raising=False)
    return config


def test_encode_hex(empty_config, capsys):
    assert main(["encode", "--hex", "000001"]) == 0
    assert capsys.readouterr().out.strip() == "001"


def test_encode_hex_with_group(empty_config, capsys):
    data = bytes.fromhex("00000102030405")
    assert main(["encode", "--hex", data.hex(), "--group", "4"]) == 0
    assert capsys.readouterr().out.strip() == encode(data, 4)


def test_encode_group_from_config(empty_config, capsys):
    empty_config.read_dict({'Codec': {'group_size': '2'}})
    data = bytes.fromhex("ffeeddcc")
    assert main(["encode", "--hex", data.hex()]) == 0
    out = capsys.readouterr().out.strip()
    assert out == encode(data, 2)
    assert out.index("_") == 2


def test_encode_file(empty_config, tmp_path, capsys):
    data = b"\x00\x00hello world"
    path = tmp_path / "input.bin"
    path.write_bytes(data)
    assert main(["encode", "--file", str(path)]) == 0
    assert decode(capsys.readouterr().out.strip()) == data


def test_encode_random(empty_config, capsys):
    assert main(["encode", "--random", "24"]) == 0
    assert len(decode(capsys.readouterr().out.strip())) == 24


def test_encode_stdin(empty_config, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"\x00\x3e")))
    assert main(["encode"]) == 0
    assert capsys.readouterr().out.strip() == "010"


def test_encode_invalid_hex(empty_config, capsys):
    assert main(["encode", "--hex", "zz"]) == 1
    assert "ERROR" in capsys.readouterr().err


def test_encode_negative_group(empty_config, capsys):
    assert main(["encode", "--hex", "01", "--group", "-1"]) == 1
    assert "group_size" in capsys.readouterr().err


def test_decode_prints_hex(empty_config, capsys):
    assert main(["decode", "00_1_0"]) == 0
    assert capsys.readouterr().out.strip() == "00003e"


def test_decode_to_file(empty_config, tmp_path):
    data = b"\x00\x01\x02binary"
    output = tmp_path / "out.bin"
    assert main(["decode", encode(data, 3), "--output", str(output)]) == 0
    assert output.read_bytes() == data


def test_decode_invalid_character(empty_config, capsys):
    assert main(["decode", "abc-def"]) == 1
    err = capsys.readouterr().err
    assert "'-'" in err
    assert "index 3" in err


def test_normalize(empty_config, capsys):
    assert main(["normalize", "0A_bC__dE_"]) == 0
    assert capsys.readouterr().out.strip() == "0AbCdE"


def test_demo_succeeds(empty_config, capsys):
    assert main(["demo", "--size", "8", "--iterations", "5"]) == 0
    assert "All 5 round-trips of 8 bytes succeeded." in capsys.readouterr().out


def test_demo_uses_config_defaults(empty_config, capsys):
    empty_config.read_dict({'Demo': {'sample_size': '4', 'iterations': '3'}})
    assert main(["demo"]) == 0
    assert "All 3 round-trips of 4 bytes succeeded." in capsys.readouterr().out


def test_demo_reports_failures(empty_config, monkeypatch, capsys):
    monkeypatch.setattr(base62ux_tool, "decode", lambda text: b"")
    assert main(["demo", "--size", "4", "--iterations", "2"]) == 1
    assert "2 of 2 round-trips failed." in capsys.readouterr().out


@pytest.mark.parametrize("demo_args, message", [
    (["--size", "8", "--iterations", "-5"], "iterations"),
    (["--size", "8", "--iterations", "0"], "iterations"),
    (["--size", "-1", "--iterations", "3"], "size"),
    (["--size", "0", "--iterations", "3"], "size"),
])
def test_demo_rejects_non_positive_counts(empty_config, capsys, demo_args, message):
    assert main(["demo", *demo_args]) == 1
    captured = capsys.readouterr()
    assert message in captured.err
    assert "succeeded" not in captured.out


def test_demo_rejects_non_positive_config_values(empty_config, capsys):
    empty_config.read_dict({'Demo': {'sample_size': '16', 'iterations': '-2'}})
    assert main(["demo"]) == 1
    assert "iterations" in capsys.readouterr().err


def test_demo_first_line_reports_lengths_and_match(empty_config, capsys):
    assert main(["demo", "--size", "12", "--iterations", "1"]) == 0
    first_line = capsys.readouterr().out.splitlines()[0].split()
    assert first_line[1:] == ["12", "12", "True"]
    assert len(decode(first_line[0])) == 12


def test_missing_subcommand_exits_with_usage(empty_config):
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2

# === End of tests/test_base62ux_tool.py ===
