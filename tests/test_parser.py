import logging

from mac_vendor_registry.parser import VendorRecord, normalize_field, parse_block, parse_registry


def test_parse_known_vendor(registry_text):
    table = parse_registry(registry_text)
    rec = table["E043DB"]
    assert rec.prefix == "E043DB"
    assert rec.name == "Shenzhen ViewAt Technology Co., Ltd."
    assert rec.iso_code == "CN"
    assert rec.address == (
        "9A, Microprofit, 6th Gaoxin South Road, High-Tech Industrial Park, Nanshan, Shenzhen, CHINA.",
        "Shenzhen guangdong 518057",
        "CN",
    )


def test_header_block_skipped(registry_text):
    table = parse_registry(registry_text)
    assert list(table) == ["E043DB", "2C3033", "2405F5", "ACDE48", "A06391"]


def test_duplicate_prefix_first_wins(registry_text):
    table = parse_registry(registry_text)
    assert table["2C3033"].name == "NETGEAR"
    assert table["2C3033"].iso_code == "US"


def test_block_without_address(registry_text):
    rec = parse_registry(registry_text)["ACDE48"]
    assert rec.name == "Private"
    assert rec.address == ()
    assert rec.iso_code is None


def test_crlf_input(registry_text):
    assert parse_registry(registry_text.replace("\n", "\r\n")) == parse_registry(registry_text)


def test_malformed_blocks_are_skipped(registry_text, caplog):
    broken = registry_text + "just one line\n\nZZ-ZZ-ZZ   (hex)\tNobody\nZZZZZZ     (base 16)\tNobody\n"
    with caplog.at_level(logging.WARNING, logger="mac_vendor_registry.parser"):
        table = parse_registry(broken)
    assert len(table) == 5
    assert "malformed" in caplog.text


def test_empty_text():
    assert parse_registry("") == {}


def test_parse_block_lowercase_prefix():
    rec = parse_block("e0-43-db   (hex)\tacme\ne043db     (base 16)\tacme\n\tUS")
    assert rec == VendorRecord(prefix="E043DB", name="Acme", address=("US",), iso_code="US")


def test_parse_block_too_short():
    assert parse_block("E0-43-DB   (hex)\tACME") is None


def test_normalize_field():
    assert normalize_field("  ACME   corp  ") == "ACME corp"
    assert normalize_field("Co.,Ltd.") == "Co., Ltd."
    assert normalize_field("a;b") == "A, b"
    assert normalize_field("a; b") == "A; b"
    assert normalize_field("already, spaced") == "Already, spaced"
    assert normalize_field("trailing,,") == "Trailing"
    assert normalize_field("ends with;") == "Ends with"
    assert normalize_field("iPhone maker") == "IPhone maker"
    assert normalize_field("") == ""
