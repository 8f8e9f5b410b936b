# cairozero

Building blocks for working with Cairo Zero programs: arithmetic on elements
of the Stark prime field, Keccak-256 hashing in the word layout Cairo uses,
and loading of compiled Cairo Zero JSON.

## Modules

### `cairozero.felt`

Field elements are plain Python integers reduced modulo `PRIME`
(`2**251 + 17 * 2**192 + 1`).

- `to_felt(value)` — reduce an integer into `[0, PRIME)`.
- `parse_felt(text)` — parse a decimal or `0x`/`0b`/`0o` literal, with an
  optional sign, into a field element; raises `ValueError` on bad input.
- `felt_lt(a, b)`, `felt_le(a, b)` — compare canonical representatives.
- `felt_is_positive(felt)` — whether the element is below `2**128`.
- `felt_mod(a, b)`, `felt_div_rem(a, b)` — integer remainder and
  quotient/remainder of the canonical representatives (not field division).
- `safe_offset(x, y)` — add a signed offset to an unsigned 64-bit value;
  returns the wrapped result and an overflow flag.
- `next_power_of_two(n)` — `n` if it is already a power of two, otherwise the
  next power of two above it.
- `reverse(items)` — reverse a mutable sequence in place.

Constants such as `FELT_MAX_128`, `FELT_UPPER_BOUND`, `PRIME_HIGH`,
`UINT256_MAX_128`, `ALPHA` and `BETA` are also defined here.

### `cairozero.keccak`

- `keccak256(data)` — Keccak-256 digest of bytes.
- `add_padding(words, last_input_word, last_input_num_bytes)` — append
  Keccak padding to a list of 64-bit words so it fills a whole 17-word block.
  `last_input_num_bytes` must be 0–7, otherwise `KeccakPaddingError` (a
  `ValueError`) is raised.
- `convert_to_byte_data(words)` — serialise 64-bit words little-endian.
- `cairo_keccak(words, last_input_word, last_input_num_bytes)` — pad,
  serialise and hash.
- `u128_split(value)` — split the low 128 bits into `(high, low)` 64-bit words.
- `keccak_add_u256_le(keccak_input, value)`,
  `keccak_add_u256_be(keccak_input, value)` — return a new word list with a
  256-bit value appended as four (or, for big-endian, eight) words.
- `reverse_bytes_128(value)` — reverse the minimal big-endian byte form of a value.
- `keccak_u256s_le_inputs(inputs)`, `keccak_u256s_be_inputs(inputs)` — hash a
  sequence of 256-bit integers; values outside `[0, 2**256)` raise `ValueError`.

### `cairozero.program`

- `Program` — a dataclass with `bytecode` (list of field elements),
  `entrypoints` and `labels` (name → pc, with the main scope prefix removed)
  and `builtins` (list of builtin names).
- `load_cairo_zero_program(zero_program)` — build a `Program` from an
  already decoded compiled-program mapping.
- `load_cairo_zero_program_from_json(text)` — parse JSON text or bytes and
  build a `Program`.

Malformed input raises `ProgramLoadError` (a `ValueError`).

## Installation

```
pip install .
```

## Examples

```python
from cairozero.felt import felt_div_rem, safe_offset

felt_div_rem(102495, 23)      # (4456, 7)
safe_offset(4, -10)           # (18446744073709551610, True)
```

```python
from cairozero.keccak import cairo_keccak, keccak_u256s_le_inputs

cairo_keccak([1, 0, 0, 0], 0, 0).hex()
keccak_u256s_le_inputs([123456789]).hex()
```

```python
from cairozero.program import load_cairo_zero_program_from_json

with open("fib_compiled.json") as fh:
    program = load_cairo_zero_program_from_json(fh.read())

program.entrypoints["main"]   # pc of main
program.labels                # e.g. {"__start__": 0, "__end__": 4}
```

## What this package does not do

It loads programs but does not execute them: there is no virtual machine,
no runner, no builtins, no hint processing, no trace or memory output and no
command-line tool. It does not compile or assemble Cairo source either.

## Running the tests

```
pip install .[test]
pytest
```