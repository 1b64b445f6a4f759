import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from volezk.binfield import BF256
from volezk.gf256 import (
    GF256,
    combine_vec,
    dot_product,
    field_base,
    vec_mul_transposed_matrix,
)

elements = st.integers(min_value=0, max_value=(1 << 256) - 1).map(GF256)


def _identity():
    return [1 << i for i in range(256)]


def test_reduction_of_top_monomial_gives_modulus_tail():
    x255 = GF256(1 << 255)
    x = GF256(2)
    assert (x255 * x).value == 0x425


def test_str_is_zero_padded_hex():
    assert str(GF256(1)) == "0x" + "0" * 63 + "1"


def test_from_hex_matches_int():
    assert GF256.from_hex("0x1") == GF256(1)
    assert GF256.from_hex("0XfF") == GF256(255)
    assert GF256.from_hex("0x") == GF256(0)


def test_from_hex_requires_prefix():
    with pytest.raises(ValueError):
        GF256.from_hex("123")


def test_from_hex_too_long():
    with pytest.raises(ValueError):
        GF256.from_hex("0x" + "1" * 65)


def test_to_bytes_little_endian():
    assert GF256(1).to_bytes() == b"\x01" + bytes(31)


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        GF256.from_bytes(bytes(16))


def test_with_coeff_and_is_zero():
    assert GF256(0).is_zero()
    assert GF256(0).with_coeff(200) == GF256(1 << 200)
    with pytest.raises(IndexError):
        GF256(0).with_coeff(256)


def test_inverse_of_zero_is_zero():
    assert GF256(0).inverse().is_zero()


@settings(max_examples=30, deadline=None)
@given(elements)
def test_bytes_round_trip(a):
    assert GF256.from_bytes(a.to_bytes()) == a
    assert GF256.from_hex(str(a)) == a


@settings(max_examples=30, deadline=None)
@given(elements, elements)
def test_matches_bitwise_field(a, b):
    assert (a * b).value == (BF256(a.value) * BF256(b.value)).value


@settings(max_examples=30, deadline=None)
@given(elements, elements, elements)
def test_field_laws(a, b, c):
    assert a * b == b * a
    assert a * (b + c) == a * b + a * c
    assert a - b == a + b
    assert GF256(2) * GF256(3) == GF256(6)


@settings(max_examples=5, deadline=None)
@given(elements.filter(lambda e: not e.is_zero()))
def test_inverse(a):
    inv = a.inverse()
    assert a * inv == GF256(1)
    assert inv == a.inverse_slow()


def test_identity_matrices():
    a = GF256(0x1234_5678_9ABC_DEF0 << 100)
    assert a.multiply_with_matrix(_identity()) == a
    assert a.multiply_with_transposed_matrix(_identity()) == a


def test_matrix_accepts_word_rows():
    rows = [[(1 << i % 64) if w == i // 64 else 0 for w in range(4)] for i in range(256)]
    a = GF256((1 << 255) | 5)
    assert a.multiply_with_transposed_matrix(rows) == a


def test_transposed_matches_transpose():
    rows = [((i * 0x9E3779B97F4A7C15) ^ (i << 130)) & ((1 << 256) - 1) for i in range(256)]
    transposed = [
        sum(((rows[j] >> i) & 1) << j for j in range(256)) for i in range(256)
    ]
    a = GF256(0xDEADBEEF << 77 | 0x31)
    assert a.multiply_with_transposed_matrix(rows) == a.multiply_with_matrix(transposed)


def test_matrix_wrong_size():
    with pytest.raises(ValueError):
        GF256(1).multiply_with_matrix([1, 2, 3])


def test_dot_product():
    lhs = [GF256(3 << i) for i in range(10)]
    rhs = [GF256((1 << 255) | i) for i in range(10)]
    expected = GF256(0)
    for a, b in zip(lhs, rhs):
        expected += a * b
    assert dot_product(lhs, rhs) == expected
    assert dot_product([], []).is_zero()


def test_dot_product_size_mismatch():
    with pytest.raises(ValueError):
        dot_product([GF256(1)], [])


def test_field_base():
    base = field_base()
    assert len(base) == 256
    assert base[0] == GF256(1)
    assert base[255] == GF256(1 << 255)


def test_combine_vec_reverses_bits_in_byte():
    vec = [GF256(0)] * 256
    vec[0] = GF256(1)
    assert combine_vec(vec) == field_base()[7]
    assert combine_vec([GF256(1)] * 256) == GF256((1 << 256) - 1)


def test_vec_mul_transposed_matrix_identity():
    vec = [GF256(0)] * 256
    vec[0] = GF256(1)
    assert vec_mul_transposed_matrix(vec, _identity()) == field_base()[7]
    with pytest.raises(ValueError):
        vec_mul_transposed_matrix(vec[:10], _identity())