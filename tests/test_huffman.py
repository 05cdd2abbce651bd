import pytest

from algodrills.huffman import BitList, compress, decompress

SAMPLE = "fsdaj;flksdjflaksdjf;lsdajkf;lsdjfks;dlfjsd;lfjasl;djf;lasdjf"


def test_bitlist_round_trips_bits():
    bits = [True, False, True, True, False, False, True, False, True, True]
    assert list(BitList(bits)) == bits


def test_bitlist_str_matches_bits():
    assert str(BitList([False, True, True, False])) == "0110"


def test_bitlist_num_bytes_grows_and_shrinks():
    bits = BitList([True] * 8)
    assert bits.num_bytes() == 1
    bits.append(True)
    assert bits.num_bytes() == 2
    assert bits.pop() is True
    assert bits.num_bytes() == 1
    assert len(bits) == 8


def test_bitlist_pop_empty_raises():
    with pytest.raises(IndexError):
        BitList().pop()


def test_bitlist_index_out_of_range():
    bits = BitList([True, False])
    assert bits[0] is True
    assert bits[1] is False
    with pytest.raises(IndexError):
        bits.__getitem__(2)
    with pytest.raises(IndexError):
        bits.__setitem__(5, True)
    assert list(bits) == [True, False]


def test_bitlist_setitem_and_negative_index():
    bits = BitList([False, False, False])
    bits[1] = True
    bits[-1] = True
    assert list(bits) == [False, True, True]
    bits[1] = False
    assert list(bits) == [False, False, True]


def test_bitlist_equality_after_pop_clears_bit():
    first = BitList([True, False, True])
    first.pop()
    second = BitList([True, False])
    assert first == second
    assert hash(first) == hash(second)
    assert BitList([True]) != BitList([True, False])


def test_bitlist_extend_with_itself():
    bits = BitList([True, False])
    bits.extend(bits)
    assert list(bits) == [True, False, True, False]


def test_bitlist_clear():
    bits = BitList([True] * 12)
    bits.clear()
    assert len(bits) == 0
    assert bits.num_bytes() == 0
    assert bits == BitList()


def test_compress_round_trip_sample():
    bits, table = compress(SAMPLE)
    assert decompress(bits, table) == SAMPLE


def test_compressed_length_is_sum_of_codewords():
    bits, table = compress(SAMPLE)
    assert len(bits) == sum(len(table[ch]) for ch in SAMPLE)
    assert len(bits) < len(SAMPLE) * 8


def test_codewords_start_with_zero_and_are_prefix_free():
    _, table = compress(SAMPLE)
    assert set(table) == set(SAMPLE)
    codes = [str(code) for code in table.values()]
    assert all(code.startswith("0") for code in codes)
    for a in codes:
        for b in codes:
            if a != b:
                assert not b.startswith(a)


def test_more_frequent_char_has_no_longer_code():
    text = "aaaaaaaabbbc"
    _, table = compress(text)
    assert len(table["a"]) <= len(table["b"]) <= len(table["c"])
    assert decompress(*compress(text)) == text


def test_single_character_text():
    bits, table = compress("aaa")
    assert table == {"a": BitList([False])}
    assert list(bits) == [False, False, False]
    assert decompress(bits, table) == "aaa"


def test_empty_text():
    bits, table = compress("")
    assert len(bits) == 0
    assert table == {}
    assert decompress(bits, table) == ""


def test_decompress_leftover_bits_raises():
    bits, table = compress("abab")
    broken = BitList(bits)
    broken.append(True)
    with pytest.raises(ValueError):
        decompress(broken, table)