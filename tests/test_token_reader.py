import pytest

from judge_errors import TokenExhausted, TokenParseError
from token_reader import TokenReader


class TestTokenizing:
    def test_splits_on_any_whitespace(self):
        r = TokenReader("  a\tb\n\nc  ")
        assert r.total == 3
        assert [r.get_string(), r.get_string(), r.get_string()] == ["a", "b", "c"]

    def test_none_and_empty_are_empty_streams(self):
        assert TokenReader(None).total == 0
        assert TokenReader("").total == 0

    def test_cursor_advances_one_token_per_read(self):
        r = TokenReader("7 -3 x")
        assert r.position == 0
        r.get_uint()
        assert r.position == 1
        assert r.remaining() == 2


class TestUnsigned:
    def test_reads_decimal(self):
        assert TokenReader("42").get_uint() == 42

    def test_reads_uint64_max(self):
        assert TokenReader(str(2**64 - 1)).get_uint() == 2**64 - 1

    def test_rejects_overflow(self):
        with pytest.raises(TokenParseError) as exc:
            TokenReader(str(2**64)).get_uint()
        assert exc.value.token == str(2**64)

    @pytest.mark.parametrize("token", ["-1", "+1", "abc", "1.5", "0x10"])
    def test_rejects_non_unsigned(self, token):
        with pytest.raises(TokenParseError) as exc:
            TokenReader(token).get_uint()
        assert exc.value.token == token


class TestSigned:
    @pytest.mark.parametrize("token,expected", [("-5", -5), ("+5", 5), ("0", 0)])
    def test_reads_signed(self, token, expected):
        assert TokenReader(token).get_int() == expected

    def test_rejects_out_of_int64_range(self):
        with pytest.raises(TokenParseError):
            TokenReader(str(2**63)).get_int()

    def test_rejects_word(self):
        with pytest.raises(TokenParseError):
            TokenReader("ten").get_int()


class TestExhaustion:
    def test_exhausted_carries_total(self):
        r = TokenReader("a b")
        r.get_string()
        r.get_string()
        with pytest.raises(TokenExhausted) as exc:
            r.get_string()
        assert exc.value.total == 2
        assert "2" in str(exc.value)

    def test_exhausted_on_numeric_read(self):
        with pytest.raises(TokenExhausted):
            TokenReader("").get_uint()
