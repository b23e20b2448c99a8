# dilithium_verify

A small Python package with no dependencies that verifies CRYSTALS-Dilithium
signatures. It unpacks public keys and signatures and expands the public
matrix from its seed with SHAKE128. It then runs the number-theoretic
transform, reconstructs the high bits with the hint vector and checks the
challenge hash with SHAKE256.

All three parameter sets are supported: Dilithium2, Dilithium3 and
Dilithium5. Dilithium5 is the default.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Verifying a signature

```python
from dilithium_verify.params import get_params
from dilithium_verify.sign import verify

params = get_params(2)          # Dilithium2; 3 and 5 select the other sets

ok = verify(signature, message, public_key, b"", params)
```

`signature`, `message` and `public_key` are `bytes`. `verify` returns `True`
for a valid signature and `False` otherwise. Each of the following makes it
return `False`:

- a signature of the wrong length,
- a malformed hint encoding,
- a response vector outside its bound,
- a challenge that does not match.

The context string defaults to `b""`, and `params` defaults to Dilithium5
(`get_params()` with no argument). Some inputs raise `ValueError` instead of
returning `False`:

- a context longer than 255 bytes,
- a public key of the wrong size,
- an unknown mode passed to `get_params`.

`ParameterSet` is a frozen dataclass. It holds the fields `mode`, `name`,
`k`, `l`, `eta`, `tau`, `beta`, `gamma1`, `gamma2`, `omega` and
`ctilde_bytes`, and it derives the sizes as properties:

```python
params = get_params(5)
params.name                  # "Dilithium5"
params.public_key_bytes      # 2592
params.signature_bytes       # 4627
params.secret_key_bytes      # 4896
```

### Lower-level pieces

- `dilithium_verify.sign.verify_internal(signature, message, prefix, public_key, params)`
  verifies against an explicit message prefix instead of a context string.
- `dilithium_verify.packing.unpack_pk` returns `(rho, t1)`.
  `dilithium_verify.packing.unpack_sig` returns `(c, z, h)` and raises
  `MalformedSignatureError` (a `ValueError`) on a wrong length or a bad hint
  encoding.
- `dilithium_verify.shake` provides incremental SHAKE128/SHAKE256.
  `Shake` has `absorb`, `finalize`, `squeeze` and `squeeze_blocks`. The
  module also has `shake128()`, `shake256_xof()`,
  `shake256(data, outlen)` and `stream128(seed, nonce)`.
- `dilithium_verify.keccak.keccak_f1600` is the underlying permutation.
- `dilithium_verify.ntt`, `dilithium_verify.poly`,
  `dilithium_verify.polyvec`, `dilithium_verify.reduce` and
  `dilithium_verify.rounding` provide the polynomial arithmetic modulo
  q = 8380417. Polynomials are plain lists of 256 integers, and vectors are
  lists of polynomials. The functions return new lists and leave their
  inputs untouched.

## Base64 keys and signatures

Keys and signatures are often stored as Base64 text:

```python
from dilithium_verify.base64codec import b64_decode, b64_encode

public_key = b64_decode(public_key_text)
text = b64_encode(public_key)
```

`b64_decode` accepts `str` or `bytes`. It stops at the first `=` and ignores
whatever follows it. It raises `ValueError` when the length is not a multiple
of four, or when a character outside the alphabet appears before the
padding. `encoded_size` and `decoded_size` give the buffer sizes for a given
input length.

## Console demo

The package also includes a small formatted-output demo:

```
dilithium-verify-hello
```

It prints:

```
Hello RISC-V 32!
Number 1234 = 0x4d2
```

`dilithium_verify.console.format_message(fmt, *args)` applies the same
formatting from Python. It supports `%c`, `%s`, `%d` and `%x`. It drops any
other specifier together with its `%`, and it raises `TypeError` when there
are too few arguments.

## What this package does not do

It only verifies. It cannot generate key pairs or create signatures, and it
has no command for verifying files. Verification is done by calling `verify`
from Python.