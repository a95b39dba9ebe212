"""Tests for short code encoding and decoding."""

import pytest

from shortlink.core.exceptions import ConfigurationError
from shortlink.utils.codec import (
    DEFAULT_ALPHABET,
    LinkCodec,
    decode_code,
    encode_id,
)


class TestEncode:
    """Tests for id to code encoding."""

    def test_reference_codes(self):
        """Test that known ids encode to pinned codes under the test secret."""
        assert encode_id(1, "secret") == "2Kx2gzL"
        assert encode_id(2, "secret") == "w6xy3v4"
        assert encode_id(42, "secret") == "V9zZ5x3"

    def test_encode_is_deterministic_across_instances(self):
        """Test that separate codecs with the same salt agree."""
        assert LinkCodec("secret").encode(99) == LinkCodec("secret").encode(99) == "Xz18rxr"

    def test_minimum_length(self, codec):
        """Test that small ids are padded to the minimum length."""
        for link_id in range(1, 2000):
            assert len(codec.encode(link_id)) >= 7

    def test_configured_minimum_length(self):
        """Test a custom minimum length floor."""
        codec = LinkCodec("secret", min_length=12)
        for link_id in (1, 10, 1000, 10**9):
            assert len(codec.encode(link_id)) >= 12

    def test_alphabet_closure(self, codec):
        """Test that codes only use alphabet symbols."""
        for link_id in range(1, 2000):
            assert set(codec.encode(link_id)) <= set(DEFAULT_ALPHABET)

    def test_sequential_ids_do_not_share_prefixes(self, codec):
        """Test that neighbouring ids do not produce neighbouring codes."""
        codes = [codec.encode(link_id) for link_id in range(1, 4)]
        assert codes == ["2Kx2gzL", "w6xy3v4", "KrzYMzP"]

    @pytest.mark.parametrize("bad_id", [0, -5, True, "1", 1.5, None])
    def test_encode_rejects_non_positive_ids(self, codec, bad_id):
        """Test that only positive integers can be encoded."""
        with pytest.raises(ValueError):
            codec.encode(bad_id)


class TestDecode:
    """Tests for code to id decoding."""

    def test_round_trip(self, codec):
        """Test that decode inverts encode."""
        for link_id in list(range(1, 1000)) + [2**40, 10**15]:
            assert codec.decode(codec.encode(link_id)) == link_id

    def test_round_trip_for_other_salts(self):
        """Test the round trip holds for arbitrary salts."""
        for salt in ("a", "another secret", "s" * 64, "ünïcode"):
            codec = LinkCodec(salt)
            for link_id in (1, 7, 123456):
                assert codec.decode(codec.encode(link_id)) == link_id

    def test_large_id(self):
        """Test a large id round trip against its pinned code."""
        assert encode_id(2**40, "secret") == "O6X21PweM"
        assert decode_code("O6X21PweM", "secret") == 2**40

    def test_salt_sensitivity(self):
        """Test that codes do not decode to the same id under another salt."""
        first = LinkCodec("secret")
        second = LinkCodec("other-secret")
        assert second.decode(first.encode(1)) is None
        for link_id in range(1, 500):
            assert second.decode(first.encode(link_id)) != link_id

    @pytest.mark.parametrize(
        "code",
        [
            "",
            "!!!!!!!",
            "2Kx2gz!",
            "not-a-real-code",
            "aaaaaaa",
            "2Kx2gzM",
            "2Kx2gz",
            "nonexistent",
        ],
    )
    def test_invalid_codes(self, codec, code):
        """Test that malformed or unissued codes decode to None."""
        assert codec.decode(code) is None

    def test_non_string_input(self, codec):
        """Test that non-string input decodes to None."""
        assert codec.decode(None) is None
        assert codec.decode(12345) is None

    def test_multi_number_code_is_rejected(self, codec):
        """Test that a code carrying several numbers is not a link code."""
        # Hashids encoding of (1, 2) under the test secret
        assert codec.decode("8zY3il7") is None

    def test_zero_is_rejected(self, codec):
        """Test that the encoding of 0 is never a valid link id."""
        # Hashids encoding of 0 under the test secret
        assert codec.decode("YLz067J") is None

    def test_id_beyond_store_range_is_rejected(self, codec):
        """Test that ids too large for a SQLite INTEGER do not decode."""
        assert codec.decode(codec.encode(2**64)) is None
        assert codec.decode(codec.encode(2**63)) is None
        assert codec.decode(codec.encode(2**63 - 1)) == 2**63 - 1


class TestCodecConfiguration:
    """Tests for codec construction."""

    @pytest.mark.parametrize("salt", [None, ""])
    def test_salt_is_required(self, salt):
        """Test that a missing salt is a configuration error."""
        with pytest.raises(ConfigurationError):
            LinkCodec(salt)

    def test_short_alphabet_rejected(self):
        """Test that an alphabet with too few symbols is a configuration error."""
        with pytest.raises(ConfigurationError):
            LinkCodec("secret", alphabet="abc123")

    def test_negative_min_length_rejected(self):
        """Test that a negative minimum length is a configuration error."""
        with pytest.raises(ConfigurationError):
            LinkCodec("secret", min_length=-1)
