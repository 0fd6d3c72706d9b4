"""Tests for svcs.config — username storage in ``vcs/config.toml``."""
from __future__ import annotations

import tomllib

from svcs._repo import RepositoryHandle
from svcs.config import get_username, set_username


def test_no_username_by_default(repo: RepositoryHandle) -> None:
    assert get_username(repo) == ""


def test_set_username_writes_valid_toml(repo: RepositoryHandle) -> None:
    set_username(repo, 'Ada "the first" Lovelace\\')
    with repo.config_path.open("rb") as fh:
        parsed = tomllib.load(fh)
    assert parsed["user"]["name"] == 'Ada "the first" Lovelace\\'
    assert get_username(repo) == 'Ada "the first" Lovelace\\'


def test_set_username_escapes_control_characters(repo: RepositoryHandle) -> None:
    set_username(repo, "tab\there\x01")
    assert get_username(repo) == "tab\there\x01"


def test_set_username_preserves_other_sections(repo: RepositoryHandle) -> None:
    repo.config_path.write_text('[core]\nautocrlf = false\n\n[user]\nname = "old"\n')
    set_username(repo, "new")
    with repo.config_path.open("rb") as fh:
        parsed = tomllib.load(fh)
    assert parsed == {"user": {"name": "new"}, "core": {"autocrlf": False}}


def test_unparsable_config_means_no_username(repo: RepositoryHandle) -> None:
    repo.config_path.write_text("[user\nname = ")
    assert get_username(repo) == ""


def test_legacy_config_txt_is_honoured(repo: RepositoryHandle) -> None:
    repo.legacy_config_path.write_text("grace")
    assert get_username(repo) == "grace"


def test_config_toml_wins_over_legacy(repo: RepositoryHandle) -> None:
    repo.legacy_config_path.write_text("grace")
    set_username(repo, "alan")
    assert get_username(repo) == "alan"
