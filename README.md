# bytecrypt

bytecrypt encrypts and decrypts files in place with a simple byte-shift
cipher. Each byte of a file is shifted up by an integer key (modulo 256) to
encrypt it, and shifted back down by the same key to decrypt it.

It is a small tool for scrambling files, not a secure cipher: anyone who
knows the scheme can reverse it.

## Installation

```
pip install .
```

## The key

The key is an integer read from a file named `.env` in the current working
directory. The file must begin with the integer, for example:

```
7
```

Leading whitespace and a sign are accepted, and anything after the digits
is ignored. If the file holds no integer at its start, a `ValueError` is
raised. Use the same key to decrypt that you used to encrypt.

## Encrypting or decrypting a directory

```
bytecrypt
```

The command asks for a directory path and an action. Type `encrypt` to
encrypt; any other answer decrypts. Every regular file in the directory and
in all of its subdirectories is rewritten in place, one after another, and
each is announced as `Executing task: <path>,<ACTION>`. Files that cannot be
opened are reported with `Unable to open file: <path>` and skipped. If the
path is not a directory, the command prints `Invalid directory path!` and
changes nothing; other file-system errors are printed as
`Filesystem error: ...`.

## Encrypting or decrypting a single file

```
bytecrypt-cryption "notes.txt,ENCRYPT"
bytecrypt-cryption "notes.txt,DECRYPT"
```

The single argument is a task string: a file path, a comma, then `ENCRYPT`
or `DECRYPT`. Anything other than `ENCRYPT` after the comma decrypts. With
no argument or more than one, the command prints a usage line to standard
error and exits with status 1.

## Using it from Python

```python
from bytecrypt.cli import parse_action, run
from bytecrypt.cryption import decrypt_bytes, encrypt_bytes, execute_cryption
from bytecrypt.env import read_key
from bytecrypt.process_management import ProcessManagement
from bytecrypt.task import Action, Task

scrambled = encrypt_bytes(b"hello", 7)
assert decrypt_bytes(scrambled, 7) == b"hello"

# Transform one file in place, reading the key from a given .env file.
# Returns the number of bytes transformed.
execute_cryption("notes.txt,ENCRYPT", ".env")

# A task string round-trips through Task, which opens the file it names.
with Task.from_string("notes.txt,DECRYPT") as task:
    assert task.action is Action.DECRYPT
    assert task.to_string() == "notes.txt,DECRYPT"

# Encrypt a whole directory tree; returns how many files were processed.
run("documents", parse_action("encrypt"), ".env")

key = read_key(".env")
```

- `bytecrypt.fileio.open_file` opens an existing file for binary reading
  and writing without creating or truncating it.
- `bytecrypt.env.read_env` returns the text of the environment file;
  `read_key` returns the integer key at its start.
- `bytecrypt.cryption.transform_stream` encrypts or decrypts a seekable
  binary stream in place from its current position.
- `bytecrypt.cli.collect_tasks` opens every regular file below a directory
  as a `Task`.
- `ProcessManagement(env_path)` queues tasks with `submit_to_queue` and runs
  them in order with `execute_tasks`, which returns how many were run.

A task string without a comma or without an action raises
`TaskFormatError`; a task naming a file that cannot be opened raises
`OSError`. `run` raises `NotADirectoryError` if the path is not an existing
directory.

## What it does not do

Tasks run one after another in the calling process; bytecrypt does not
spread work over several processes or threads. The key is always a single
integer, and there is no check that a file was encrypted before it is
decrypted.

## Running the tests

```
pip install ".[test]"
pytest
```