"""Tests for airdrop_checker/loader.py — reading addresses from files."""

import pandas as pd
import pytest

from airdrop_checker.errors import FileReadError
from airdrop_checker.loader import load_addresses, normalize_header, parse_addresses


ADDR_1 = "0x742d35Cc6634C0532925a3b8D4C9db96C4b4d8b6"
ADDR_2 = "0x1111111111111111111111111111111111111111"


@pytest.mark.parametrize("header, expected", [
    ("Wallet Address", "WALLETADDRESS"),
    ("wallet_address", "WALLETADDRESS"),
    (" address ", "ADDRESS"),
])
def test_normalize_header(header, expected):
    assert normalize_header(header) == expected


class TestParseAddresses:

    def test_one_per_line(self):
        assert parse_addresses(f"{ADDR_1}\n{ADDR_2}\n") == [ADDR_1, ADDR_2]

    def test_skips_comments_and_blank_lines(self):
        content = f"# airdrop wallets\n\n   \n{ADDR_1}\n  # indented comment\n"
        assert parse_addresses(content) == [ADDR_1]

    def test_splits_commas_and_strips(self):
        assert parse_addresses(f"  {ADDR_1} ,{ADDR_2}  ") == [ADDR_1, ADDR_2]

    def test_keeps_empty_tokens_between_commas(self):
        assert parse_addresses(f"{ADDR_1},,{ADDR_2}") == [ADDR_1, "", ADDR_2]

    def test_windows_line_endings(self):
        assert parse_addresses(f"{ADDR_1}\r\n{ADDR_2}\r\n") == [ADDR_1, ADDR_2]


class TestLoadAddresses:

    def test_text_file(self, tmp_path):
        path = tmp_path / "addresses.txt"
        path.write_text(f"# list\n{ADDR_1}\n{ADDR_2}\n", encoding="utf-8")
        assert load_addresses(path) == [ADDR_1, ADDR_2]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileReadError) as exc:
            load_addresses(tmp_path / "nope.txt")
        assert "nope.txt" in str(exc.value)

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(FileReadError):
            load_addresses(tmp_path)

    def test_binary_garbage_is_read_error(self, tmp_path):
        path = tmp_path / "addresses.txt"
        path.write_bytes(b"\xff\xfe\xfa\x00\x81")
        with pytest.raises(FileReadError):
            load_addresses(path)

    def test_csv_uses_address_column(self, tmp_path):
        path = tmp_path / "wallets.csv"
        pd.DataFrame({
            "Name": ["alice", "bob"],
            "Wallet Address": [ADDR_1, ADDR_2],
        }).to_csv(path, index=False)

        assert load_addresses(path) == [ADDR_1, ADDR_2]

    def test_csv_unknown_header_is_kept_as_a_token(self, tmp_path):
        path = tmp_path / "wallets.csv"
        pd.DataFrame({"wallets_col": [ADDR_1, None, ADDR_2]}).to_csv(path, index=False)

        # not a recognised header, so it surfaces later as an invalid address
        assert load_addresses(path) == ["wallets_col", ADDR_1, ADDR_2]

    def test_headerless_csv_keeps_first_line(self, tmp_path):
        path = tmp_path / "wallets.csv"
        path.write_text(f"{ADDR_1}\n{ADDR_2}\n", encoding="utf-8")

        assert load_addresses(path) == [ADDR_1, ADDR_2]

    def test_multi_column_csv_keeps_every_cell(self, tmp_path):
        addr_3 = "0x" + "3" * 40
        addr_4 = "0x" + "4" * 40
        path = tmp_path / "wallets.csv"
        path.write_text(f"{ADDR_1},{ADDR_2}\n{addr_3},{addr_4}\n", encoding="utf-8")

        assert load_addresses(path) == [ADDR_1, ADDR_2, addr_3, addr_4]

    def test_csv_comment_lines_are_skipped(self, tmp_path):
        path = tmp_path / "wallets.csv"
        path.write_text(f"# team, ops\n{ADDR_1}\n", encoding="utf-8")
        assert load_addresses(path) == [ADDR_1]

    def test_csv_with_header_skips_comment_lines(self, tmp_path):
        path = tmp_path / "wallets.csv"
        path.write_text(f"address\n# team, ops\n{ADDR_1}\n{ADDR_2}\n", encoding="utf-8")

        assert load_addresses(path) == [ADDR_1, ADDR_2]

    def test_headerless_xlsx_keeps_every_cell(self, tmp_path):
        path = tmp_path / "wallets.xlsx"
        pd.DataFrame([[ADDR_1, ADDR_2], [None, "0x12"]]).to_excel(path, index=False, header=False)

        assert load_addresses(path) == [ADDR_1, ADDR_2, "0x12"]

    def test_corrupt_xlsx_is_read_error(self, tmp_path):
        path = tmp_path / "wallets.xlsx"
        path.write_bytes(b"PK\x03\x04" + b"not really a zip archive" * 4)

        with pytest.raises(FileReadError) as exc:
            load_addresses(path)
        assert "wallets.xlsx" in str(exc.value)

    def test_corrupt_xls_is_read_error(self, tmp_path):
        path = tmp_path / "wallets.xls"
        # OLE2 compound-document signature followed by garbage
        path.write_bytes(b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00junk" * 100)

        with pytest.raises(FileReadError):
            load_addresses(path)

    def test_empty_csv(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        assert load_addresses(path) == []

    def test_xlsx(self, tmp_path):
        path = tmp_path / "wallets.xlsx"
        pd.DataFrame({"address": [ADDR_1, ADDR_2]}).to_excel(path, index=False)

        assert load_addresses(path) == [ADDR_1, ADDR_2]
