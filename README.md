# shadigest

The SHA-256 algorithm written in plain Python with no dependencies, and a
command that prints the SHA-256 digest of files.

## Installation

```
pip install .
```

## Command line

```
shadigest FILE [FILE ...]
```

The command prints one line for each file argument, in the order given. Each
line holds the name, a colon and a space, then the lowercase hex digest. If a
file cannot be opened, the text `file not found!` takes the place of the
digest:

```
$ printf hello > notes.txt
$ shadigest notes.txt missing.txt
notes.txt: 2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824
missing.txt: file not found!
```

If no file is given, `Atleast one file is required` goes to standard error and
the command exits with status 1. In every other case it exits with status 0,
including when some files cannot be opened.

The same command is also available as `python -m shadigest.cli`.

## Library

```python
import io
from shadigest.core import hash_bytes, hash_stream

hash_bytes(b"abc")
# 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'

hash_stream(io.BytesIO(b""))
# 'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'

with open("notes.txt", "rb") as handle:
    digest = hash_stream(handle)
```

`hash_stream` reads any binary stream 64 bytes at a time until the stream is
exhausted. `shadigest.cli.file_hash(path)` returns the digest of a file, or
`file not found!` if opening or reading it raises `OSError`.

### Building blocks

`shadigest.core` also provides each step of the computation:

- `iter_blocks(stream)` yields the padded 64-byte blocks of a stream.
- `block_words(block)` splits a block into 16 big-endian 32-bit words.
- `message_schedule(words)` extends 16 words to the 64-word schedule.
- `compress(state, words)` runs the 64 rounds and returns the new 8-word state.
- `to_hex(state)` renders a state as 64 lowercase hex digits.
- `zero_padding(length)` and `length_suffix(total_bytes)` give the padding
  for a block and the big-endian length in bits.
- The word functions are `rotate_right`, `schedule_sigma0`, `schedule_sigma1`,
  `hashing_sigma0`, `hashing_sigma1`, `choose`, `majority` and `group_bytes`.

The starting state and the round constants are `INITIAL_HASH` and
`ROUND_CONSTANTS`.

`block_words`, `message_schedule`, `compress` and `zero_padding` raise
`ValueError` when given input of the wrong size.

## Running the tests

```
pip install .[test]
pytest
```