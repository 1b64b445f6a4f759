import itertools
import random

import pytest

from volezk.binfield import BF128
from volezk.hamming import (
    constrain_prover,
    constrain_verifier,
    full_adder,
    gen_witness_255,
    get_bit,
    half_adder,
    mutigate_u,
    mutigate_values,
    set_bit,
)

WITNESS_SIZE = 100


def _vole(witness, seed):
    rng = random.Random(seed)
    delta = BF128(rng.getrandbits(128) | 1)
    v = [BF128(rng.getrandbits(128)) for _ in range(8 * len(witness))]
    q = [
        vk + delta if (witness[k // 8] >> (k % 8)) & 1 else vk
        for k, vk in enumerate(v)
    ]
    return v, q, delta


def test_get_bit():
    assert get_bit(0b100, 2) == 1
    assert get_bit(0b100, 1) == 0


def test_set_bit_sets_and_clears():
    assert set_bit(0, 3, 1) == 0b1000
    assert set_bit(0xFF, 0, 0) == 0xFE
    assert set_bit(0b1000, 3, 1) == 0b1000


def test_set_bit_rejects_position():
    with pytest.raises(ValueError):
        set_bit(0, 8, 1)


@pytest.mark.parametrize("bits", list(itertools.product((0, 1), repeat=3)))
def test_full_adder_adds(bits):
    x1, x2, x3 = bits
    values = bytearray(4)
    values[0] = x1 | (x2 << 1) | (x3 << 2)
    full_adder(values, 0, 5, 0, 7)
    total = get_bit(values[1], 0) + 2 * get_bit(values[2], 0)
    assert total == x1 + x2 + x3


@pytest.mark.parametrize("bits", list(itertools.product((0, 1), repeat=2)))
def test_half_adder_final_layer_adds(bits):
    x1, x2 = bits
    values = bytearray(3)
    values[0] = x2 | (x1 << 7)
    half_adder(values, 0, 7, 7)
    total = get_bit(values[1], 7) + 2 * get_bit(values[2], 7)
    assert total == x1 + x2


def test_half_adder_is_noop_for_n8():
    values = bytearray(b"\xff" * 200)
    half_adder(values, 0, 0, 8)
    assert values == bytearray(b"\xff" * 200)


def test_gen_witness_keeps_inputs():
    inputs = bytes(random.Random(1).getrandbits(8) for _ in range(32))
    witness = gen_witness_255(inputs, 7, WITNESS_SIZE)
    assert len(witness) == WITNESS_SIZE
    assert witness[:32] == inputs
    assert gen_witness_255(inputs, 7, WITNESS_SIZE) == witness


def test_gen_witness_zero_input_is_zero():
    assert gen_witness_255(bytes(32), 7, WITNESS_SIZE) == bytes(WITNESS_SIZE)


def test_gen_witness_errors():
    with pytest.raises(ValueError):
        gen_witness_255(bytes(32), 6, WITNESS_SIZE)
    with pytest.raises(ValueError):
        gen_witness_255(bytes(16), 7, WITNESS_SIZE)
    with pytest.raises(ValueError):
        gen_witness_255(bytes(32), 7, 40)


def test_mutigate_u_gate_count_and_product_bit():
    inputs = bytes(random.Random(2).getrandbits(8) for _ in range(32))
    witness = gen_witness_255(inputs, 7, WITNESS_SIZE)
    gates = mutigate_u(witness, 7)
    assert len(gates) == 255
    assert all(0 <= g < 8 for g in gates)
    assert all(get_bit(g, 2) == get_bit(g, 0) & get_bit(g, 1) for g in gates)


def test_mutigate_values_matches_gate_count():
    witness = gen_witness_255(bytes(range(32)), 7, WITNESS_SIZE)
    v, _, _ = _vole(witness, 3)
    assert len(mutigate_values(v, 7)) == 3 * len(mutigate_u(witness, 7))


def test_mutigate_values_too_short():
    with pytest.raises(ValueError):
        mutigate_values([BF128(1)] * 10, 7)


def test_zero_witness_satisfies_all_gates():
    witness = gen_witness_255(bytes(32), 7, WITNESS_SIZE)
    v, q, delta = _vole(witness, 4)
    a_0, a_1 = constrain_prover(v, witness, 255, 7)
    b = constrain_verifier(q, delta, 255, 7)
    assert len(b) == 255
    assert all(bi == x + y * delta for bi, x, y in zip(b, a_0, a_1))


def test_first_layer_full_adders_hold_for_random_input():
    inputs = bytes(random.Random(5).getrandbits(8) for _ in range(32))
    witness = gen_witness_255(inputs, 7, WITNESS_SIZE)
    v, q, delta = _vole(witness, 6)
    a_0, a_1 = constrain_prover(v, witness, 255, 7)
    b = constrain_verifier(q, delta, 255, 7)
    for i in range(127):
        assert b[i] == a_0[i] + a_1[i] * delta


def test_tampered_carry_breaks_gate():
    inputs = bytes(random.Random(7).getrandbits(8) for _ in range(32))
    witness = gen_witness_255(inputs, 7, WITNESS_SIZE)
    tampered = bytearray(witness)
    tampered[48] ^= 1
    v, q, delta = _vole(bytes(tampered), 8)
    a_0, a_1 = constrain_prover(v, witness, 255, 7)
    b = constrain_verifier(q, delta, 255, 7)
    assert b[0] == a_0[0] + a_1[0] * delta + delta * delta
    assert b[0] != a_0[0] + a_1[0] * delta


def test_mutigate_num_out_of_range():
    witness = gen_witness_255(bytes(32), 7, WITNESS_SIZE)
    v, q, delta = _vole(witness, 9)
    with pytest.raises(ValueError):
        constrain_prover(v, witness, 256, 7)
    with pytest.raises(ValueError):
        constrain_verifier(q, delta, 256, 7)


def test_prover_truncates_to_mutigate_num():
    witness = gen_witness_255(bytes(range(32)), 7, WITNESS_SIZE)
    v, _, _ = _vole(witness, 10)
    a_0, a_1 = constrain_prover(v, witness, 10, 7)
    full_0, full_1 = constrain_prover(v, witness, 255, 7)
    assert a_0 == full_0[:10]
    assert a_1 == full_1[:10]