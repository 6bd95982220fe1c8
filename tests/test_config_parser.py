"""Tests for KEY VALUE config parsing."""

from __future__ import annotations

import pytest

from baseline.scanner.files import parse_kv_config


def test_comments_blank_lines_and_case(write_file):
    path = write_file("sshd_config", (
        "# sshd config\n"
        "\n"
        "PermitRootLogin Yes\n"
        "  PasswordAuthentication   no   # trailing comment\n"
        "UsePAM\n"
        "\tX11Forwarding\tyes\n"
    ))

    assert parse_kv_config(path) == {
        "permitrootlogin": "yes",
        "passwordauthentication": "no",
        "x11forwarding": "yes",
    }


def test_later_value_wins(write_file):
    path = write_file("login.defs", "PASS_MAX_DAYS 99999\nPASS_MAX_DAYS 90\n")
    assert parse_kv_config(path) == {"pass_max_days": "90"}


def test_value_keeps_inner_spaces(write_file):
    path = write_file("sshd_config", "AllowUsers Alice  Bob\n")
    assert parse_kv_config(path) == {"allowusers": "alice  bob"}


def test_comment_only_file_is_empty(write_file):
    path = write_file("empty", "# nothing\n   # here\n\n")
    assert parse_kv_config(path) == {}


def test_undecodable_bytes_do_not_fail(tmp_path):
    path = tmp_path / "binary"
    path.write_bytes(b"PermitRootLogin no\n\xff\xfe junk\n")
    assert parse_kv_config(str(path))["permitrootlogin"] == "no"


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        parse_kv_config(str(tmp_path / "missing"))
