"""
test_ids.py
-----------

Tests for the opaque identifier encoder.
"""

import pytest

from smallprng.utils.ids import decode_opaque_id, encode_opaque_id


class TestEncode:
    def test_known_values(self):
        assert encode_opaque_id(b"") == "aaaaa-aa"
        assert encode_opaque_id(b"\x04") == "2vxsx-fae"

    def test_format(self):
        text = encode_opaque_id(bytes(range(10)))
        groups = text.split("-")
        assert all(len(g) == 5 for g in groups[:-1])
        assert 0 < len(groups[-1]) <= 5
        assert text == text.lower()
        assert "=" not in text

    def test_round_trip(self):
        blob = bytes([0xFF, 0x00, 0x7F, 0x80, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06])
        assert decode_opaque_id(encode_opaque_id(blob)) == blob


class TestDecode:
    def test_tampered_checksum(self):
        text = encode_opaque_id(bytes(range(10)))
        tampered = ("b" if text[0] != "b" else "c") + text[1:]
        with pytest.raises(ValueError):
            decode_opaque_id(tampered)

    def test_garbage(self):
        with pytest.raises(ValueError):
            decode_opaque_id("not-an-id!")

    def test_too_short(self):
        with pytest.raises(ValueError):
            decode_opaque_id("aa")
