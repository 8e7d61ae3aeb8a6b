"""Tests for base-3 digit-sequence addressing."""
import pytest

from selfsimnet.core.ternary import (
    address_to_vertex,
    decode_trits,
    encode_trits,
    vertex_to_address,
)


def test_encode_trits():
    assert encode_trits([]) == 0
    assert encode_trits([2]) == 2
    assert encode_trits([1, 0, 2]) == 11
    assert encode_trits([0, 0, 1]) == 1


def test_encode_rejects_bad_digit():
    with pytest.raises(ValueError):
        encode_trits([0, 3])


def test_decode_trits_pads():
    assert decode_trits(11, 3) == [1, 0, 2]
    assert decode_trits(1, 4) == [0, 0, 0, 1]
    assert decode_trits(0, 0) == []


def test_decode_rejects_overflowing_width():
    with pytest.raises(ValueError):
        decode_trits(9, 2)


def test_decode_inverts_encode_for_all_width_3_values():
    for value in range(27):
        assert encode_trits(decode_trits(value, 3)) == value


def test_vertex_addresses_are_one_based():
    # "10" followed by two zeros lands on the first vertex of the fourth H_2 block
    assert address_to_vertex([1, 0, 0, 0]) == 28
    assert vertex_to_address(28, 4) == [1, 0, 0, 0]
    assert address_to_vertex([0, 0]) == 1
