# volezk

Building blocks for VOLE-based zero-knowledge proofs, in pure Python with no
third-party dependencies.

## Modules

- `volezk.binfield`: the binary extension fields `BF8`, `BF64`, `BF128`, `BF192` and
  `BF256`, all derived from `BinaryField`. Elements support `+`, `-` (both XOR), `*`,
  `mul_64` and `mul_bit`. They also provide `zero`, `one`, `from_bit`, `random`,
  `from_bytes` and `to_bytes`, and bytes are little-endian. `BF128`, `BF192` and `BF256`
  provide `byte_combine` and `byte_combine_bits`. Every field has `sum_poly`.
  `BF8.inverse` gives the inverse in GF(2^8).
- `volezk.gf256`: the field `GF256` with modulus x^256 + x^10 + x^5 + x^2 + 1. It
  provides `from_hex`, `from_bytes`, `to_bytes`, `with_coeff`, `inverse`, `inverse_slow`,
  `multiply_with_matrix` and `multiply_with_transposed_matrix`. The module also has
  `dot_product`, `field_base`, `combine_vec` and `vec_mul_transposed_matrix`.
  `from_hex` raises `ValueError` for input without a `0x`/`0X` prefix or with more than
  64 hex digits.
- `volezk.poly`: polynomials as coefficient lists, lowest degree first. Functions:
  `get_first_n_field_elements`, `build_from_roots`, `evaluate`, `poly_add`,
  `poly_scale`, `poly_mul`, `precompute_lagrange_polynomials` and
  `interpolate_with_precomputation`. They work with any field class in this package.
- `volezk.univhash`: `vole_hash(sd, x, ell, lambda_)` compresses a VOLE column to
  `lambda/8 + 2` bytes. A `lambda_` of 192 or 256 selects that field; any other value
  uses GF(2^128). `ZkHasher` and `zk_hash(sd, xs, lambda_)` fold field elements into one
  digest. They accept only 128, 192 or 256.
- `volezk.vectorcom`: seed-tree layout and opening. It provides `ParamSet`,
  `binary_tree_node_count`, `node_index`, `bit_dec`, `num_rec` and `vector_open`.
  `vector_open` returns the sibling seeds along the path to a leaf and that leaf's
  commitment.
- `volezk.product`: `gen_witness_dot_product`, `constrain_prover_dot_product` and
  `constrain_verifier_dot_product`, for dot-product gates.
- `volezk.hamming`: the adder-tree witness `gen_witness_255` for 256-bit (`n=7`) and
  512-bit (`n=8`) inputs, with `full_adder`, `half_adder`, `mutigate_u`,
  `mutigate_values`, `constrain_prover` and `constrain_verifier`. It also has `get_bit`
  and `set_bit`.
- `volezk.randomness`: `rand_bytes(length)` returns bytes from the operating system's
  secure random source.

## Installation

```
pip install .
```

To install with the test tools and run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from volezk.binfield import BF128
from volezk.gf256 import GF256
from volezk.poly import build_from_roots, evaluate

a = BF128.random()
assert a * BF128.one() == a

x = GF256.from_hex("0x1234")
assert x * x.inverse() == GF256(1)

poly = build_from_roots(GF256, [GF256(2), GF256(3)])
assert evaluate(poly, GF256(2)).is_zero()
```

## What it does not do

This package provides arithmetic and proof components, not a complete proof or
signature system. It does not:

- generate seed trees;
- compute or reconstruct vector commitments;
- produce or check complete proofs;
- provide a command-line program.

`vectorcom` covers only tree indexing and opening a tree you supply.