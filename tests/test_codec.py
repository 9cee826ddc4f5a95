"""Tests for the bit cursor and bit-slice codec."""

from __future__ import annotations

import pytest

from puidkit.components.alphabet import AlphabetSpec
from puidkit.core.chars import PRESETS, preset
from puidkit.core.codec import bytes_needed, decode, encode, slice_symbols
from puidkit.core.cursor import BitCursor
from puidkit.core.errors import NonPowerOfTwoAlphabet, UnknownSymbol
from puidkit.core.source import FixedBytes, prng_source

POW2_PRESETS = [name for name, chars in PRESETS.items() if len(chars) & (len(chars) - 1) == 0]


class TestBitCursor:
    """Tests for BitCursor."""

    def test_push_and_peek(self) -> None:
        """Test bytes are read most-significant bit first."""
        cursor = BitCursor()
        cursor.push(b"\x9f\x3a")
        assert cursor.count == 16
        assert cursor.peek(4) == 0x9
        assert cursor.peek(8) == 0x9F
        assert cursor.peek(16) == 0x9F3A

    def test_skip(self) -> None:
        """Test skip drops high bits and keeps the rest."""
        cursor = BitCursor()
        cursor.push(b"\xc0")  # 1100 0000
        cursor.skip(2, rejected=True)
        assert cursor.count == 6
        assert cursor.value == 0
        assert cursor.consumed == 2
        assert cursor.discarded == 2

    def test_take(self) -> None:
        """Test take returns and removes the top bits."""
        cursor = BitCursor()
        cursor.push(b"\xa5")
        assert cursor.take(4) == 0xA
        assert cursor.take(4) == 0x5
        assert cursor.count == 0
        assert cursor.consumed == 8
        assert cursor.discarded == 0

    def test_append_and_pad(self) -> None:
        """Test appending partial values and zero padding."""
        cursor = BitCursor()
        cursor.append(0b101, 3)
        cursor.pad(5)
        assert cursor.count == 8
        assert cursor.take(8) == 0b10100000

    def test_residual_bits_precede_new_bytes(self) -> None:
        """Test residual bits stay ahead of newly pushed bytes."""
        cursor = BitCursor()
        cursor.push(b"\xff")
        cursor.skip(6)
        cursor.push(b"\x00")
        assert cursor.count == 10
        assert cursor.peek(4) == 0b1100

    def test_peek_too_many(self) -> None:
        """Test peeking beyond held bits raises ValueError."""
        cursor = BitCursor()
        cursor.push(b"\x01")
        with pytest.raises(ValueError, match="only 8 held"):
            cursor.peek(9)
        with pytest.raises(ValueError):
            cursor.skip(9)

    def test_invalid_state(self) -> None:
        """Test construction with inconsistent value/count."""
        with pytest.raises(ValueError, match="non-negative"):
            BitCursor(count=-1)
        with pytest.raises(ValueError, match="does not fit"):
            BitCursor(value=0b100, count=2)


class TestSliceSymbols:
    """Tests for slice_symbols (encode with bit-saving)."""

    def test_hex_scenario(self) -> None:
        """Test 16 bits of hex from [0x9F, 0x3A]."""
        assert slice_symbols(preset("hex"), 4, FixedBytes(b"\x9f\x3a")) == "9f3a"
        assert slice_symbols(preset("hex_upper"), 4, FixedBytes(b"\x9f\x3a")) == "9F3A"

    def test_decimal_bit_saving(self) -> None:
        """Test a rejected 1100 slice discards only its top two bits."""
        cursor = BitCursor()
        out = slice_symbols(preset("decimal"), 3, FixedBytes(b"\xc5\x38"), cursor)
        # bits: 1100 0101 0011 1000
        # 1100=12 reject, drop '11' -> 0001=1, 0100=4, 1110=14 reject drop '11' -> 1000=8
        assert out == "148"
        assert cursor.discarded == 4
        assert cursor.consumed == 16

    def test_decimal_three_bit_discard(self) -> None:
        """Test a 1010 slice discards three bits."""
        cursor = BitCursor()
        # 1010 0100 1000 0000: 10 reject, drop '101' -> 0010=2, 0100=4
        out = slice_symbols(preset("decimal"), 2, FixedBytes(b"\xa4\x80"), cursor)
        assert out == "24"
        assert cursor.discarded == 3
        assert cursor.consumed == 11
        assert cursor.count == 5

    def test_fetches_on_demand(self) -> None:
        """Test additional bytes are requested after rejections."""
        requests: list[int] = []
        data = FixedBytes(b"\xff\xff\x00\x00")

        def source(count: int) -> bytes:
            requests.append(count)
            return data(count)

        out = slice_symbols(preset("decimal"), 2, source)
        assert out == "00"
        assert requests[0] == 1
        assert len(requests) > 1

    def test_exhausted_source(self) -> None:
        """Test that an empty fetch stops slicing."""
        with pytest.raises(ValueError, match="exhausted"):
            slice_symbols(preset("decimal"), 4, FixedBytes(b"\xff"))

    def test_zero_count(self) -> None:
        """Test zero symbols requests nothing."""
        source = FixedBytes(b"")
        assert slice_symbols(preset("hex"), 0, source) == ""

    def test_negative_count(self) -> None:
        """Test negative counts are rejected."""
        with pytest.raises(ValueError):
            slice_symbols(preset("hex"), -1, FixedBytes(b""))

    def test_residual_bits_reused(self) -> None:
        """Test a shared cursor carries leftover bits into the next call."""
        cursor = BitCursor()
        source = FixedBytes(b"\x12\x34")
        first = slice_symbols(preset("hex"), 1, source, cursor)
        second = slice_symbols(preset("hex"), 3, source, cursor)
        assert first + second == "1234"

    def test_symbols_in_range(self) -> None:
        """Test every emitted symbol belongs to the alphabet."""
        for name in ("decimal", "alphanum", "safe_ascii", "symbol", "alpha_lower"):
            alphabet = preset(name)
            out = slice_symbols(alphabet, 500, prng_source(seed=1))
            assert len(out) == 500
            assert set(out) <= set(alphabet.symbols)

    def test_bytes_needed(self) -> None:
        """Test whole-byte rounding."""
        assert bytes_needed(4, 4) == 2
        assert bytes_needed(5, 5) == 4
        assert bytes_needed(22, 6) == 17
        assert bytes_needed(4, 4, held=12) == 1
        assert bytes_needed(1, 4, held=8) == 0


class TestEncodeDecode:
    """Tests for power-of-two encode/decode."""

    def test_hex_encode(self) -> None:
        """Test hex encoding of two bytes."""
        assert encode(preset("hex"), b"\x9f\x3a") == "9f3a"

    def test_hex_decode(self) -> None:
        """Test hex decoding of four symbols."""
        assert decode(preset("hex"), "9f3a") == b"\x9f\x3a"

    def test_base32_padding(self) -> None:
        """Test a partial final slice is zero padded."""
        # 0xff = 11111 111(00) -> '7' (31), '4' (28)
        assert encode(preset("base32"), b"\xff") == "74"
        assert decode(preset("base32"), "74") == b"\xff"

    def test_decode_drops_partial_byte(self) -> None:
        """Test trailing bits that do not fill a byte are dropped."""
        assert decode(preset("hex"), "9f3") == b"\x9f"
        assert decode(preset("safe64"), "A") == b""

    @pytest.mark.parametrize("name", POW2_PRESETS)
    def test_round_trip(self, name: str) -> None:
        """Test decode(encode(x)) == x for every power-of-two preset."""
        alphabet = preset(name)
        source = prng_source(seed=42)
        for length in (0, 1, 2, 3, 5, 8, 15, 16, 31, 64):
            data = source(length)
            text = encode(alphabet, data)
            assert len(text) == -(-8 * length // alphabet.bits_per_symbol)
            assert decode(alphabet, text) == data

    def test_round_trip_binary_and_256(self) -> None:
        """Test the 1-bit and 8-bit extremes."""
        binary = AlphabetSpec(symbols=("0", "1"))
        assert encode(binary, b"\x81") == "10000001"
        assert decode(binary, "10000001") == b"\x81"

        wide = AlphabetSpec(symbols=tuple(chr(0x100 + i) for i in range(256)))
        data = bytes(range(256))
        assert decode(wide, encode(wide, data)) == data

    def test_encode_non_pow2(self) -> None:
        """Test encode refuses non-power-of-two alphabets."""
        with pytest.raises(NonPowerOfTwoAlphabet, match="10-symbol"):
            encode(preset("decimal"), b"\x00")

    def test_decode_non_pow2(self) -> None:
        """Test decode refuses non-power-of-two alphabets."""
        with pytest.raises(NonPowerOfTwoAlphabet):
            decode(preset("alphanum"), "abc")

    def test_unknown_symbol(self) -> None:
        """Test decode reports the offending symbol and position."""
        with pytest.raises(UnknownSymbol) as exc_info:
            decode(preset("hex"), "9fz3")
        assert exc_info.value.symbol == "z"
        assert exc_info.value.position == 2
