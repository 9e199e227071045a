"""Tests for domain models (core/models.py).

Covers defaults, immutability, the network name and decoding of
configuration documents into :class:`Config`.
"""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path

import pytest

from hw_client.core.models import AddressType, Config, OutputFormat, ResolvedConfig
from hw_client.exceptions import ConfigFileError


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

class TestConfigDefaults:
    def test_defaults(self) -> None:
        cfg = Config()
        assert cfg.keyring == "main"
        assert cfg.count == 5
        assert cfg.min_conf == 0
        assert cfg.fee == 10000
        assert cfg.rcpt_fee is False
        assert cfg.sign_tx is True
        assert cfg.addr_type is AddressType.EXTERNAL
        assert cfg.offline is False
        assert cfg.reverse_paging is False
        assert cfg.passphrase is None
        assert cfg.output_format is OutputFormat.NORMAL
        assert cfg.connect == "tcp://127.0.0.1:4000"
        assert cfg.detach is False
        assert cfg.testnet is False
        assert cfg.config_file == "config.yml"
        assert cfg.work_dir == ""
        assert cfg.verbose is False

    def test_every_field_has_a_file_key(self) -> None:
        keys = [fld.metadata.get("key") for fld in fields(Config)]
        assert all(keys)
        assert len(set(keys)) == len(keys)

    def test_frozen(self) -> None:
        cfg = Config()
        with pytest.raises(AttributeError):
            cfg.keyring = "other"  # type: ignore[misc]

    def test_with_changes_returns_new_value(self) -> None:
        cfg = Config()
        changed = cfg.with_changes(keyring="other")
        assert changed.keyring == "other"
        assert cfg.keyring == "main"


class TestNetworkName:
    def test_mainnet(self) -> None:
        assert Config().network_name == "prodnet"

    def test_testnet(self) -> None:
        assert Config(testnet=True).network_name == "testnet3"


# ---------------------------------------------------------------------------
# from_mapping
# ---------------------------------------------------------------------------

class TestFromMapping:
    def test_empty_mapping_gives_defaults(self) -> None:
        assert Config.from_mapping({}) == Config()

    def test_subset_overlays_defaults(self) -> None:
        cfg = Config.from_mapping({"keyring-name": "savings", "output-size": 20})
        assert cfg == Config(keyring="savings", count=20)

    def test_unknown_keys_are_ignored(self) -> None:
        cfg = Config.from_mapping({"bind-socket": "tcp://*:4000", "verbose": True})
        assert cfg == Config(verbose=True)

    def test_enums_are_decoded(self) -> None:
        cfg = Config.from_mapping({"address-type": "internal", "display-format": "json"})
        assert cfg.addr_type is AddressType.INTERNAL
        assert cfg.output_format is OutputFormat.JSON

    def test_passphrase_may_be_null(self) -> None:
        assert Config.from_mapping({"mnemonic-passphrase": None}).passphrase is None

    def test_unknown_enum_member_raises(self) -> None:
        with pytest.raises(ConfigFileError, match="display-format") as exc_info:
            Config.from_mapping({"display-format": "xml"})
        assert exc_info.value.hint is not None
        assert "json" in exc_info.value.hint

    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("output-size", "five"),
            ("output-size", -1),
            ("fee-per-kb", True),
            ("offline", "yes"),
            ("keyring-name", 42),
            ("mnemonic-passphrase", ["a"]),
        ],
    )
    def test_wrong_type_raises(self, key: str, value: object) -> None:
        with pytest.raises(ConfigFileError, match=key):
            Config.from_mapping({key: value})


# ---------------------------------------------------------------------------
# ResolvedConfig
# ---------------------------------------------------------------------------

class TestResolvedConfig:
    def test_network_dir_appends_network_name(self) -> None:
        resolved = ResolvedConfig(
            config=Config(testnet=True),
            work_dir=Path("/wallet"),
            config_file=Path("/wallet/config.yml"),
            loaded_file=False,
        )
        assert resolved.network_dir == Path("/wallet/testnet3")
