# leveldbpy

Core pieces of a LevelDB-style storage engine, with no dependencies outside
the standard library:

- `leveldbpy.codec`: little-endian fixed-width integer encoding
  (`encode_fixed32`, `encode_fixed64`, `decode_fixed32`, `decode_fixed64`).
  Out-of-range values and too-short inputs raise `ValueError`.
- `leveldbpy.hashing`: `hash_bytes(data, seed)`, a 32-bit hash of a byte
  string.
- `leveldbpy.bloom`: `BloomFilterPolicy(bits_per_key)`, which builds filters
  with `create_filter(keys)` and tests keys with `key_may_match(key, filter_data)`;
  `bloom_hash(key)` is the hash it uses.
- `leveldbpy.dbformat`: internal keys (`InternalKey`, `ParsedInternalKey`,
  `LookupKey`), `ValueType`, `pack_sequence_and_type`, `append_internal_key`,
  `extract_user_key` and `InternalKeyComparator`, which orders internal keys by
  user key and then by decreasing sequence/type tag.
- `leveldbpy.filename`: database file names (`log_file_name`,
  `table_file_name`, `descriptor_file_name`, `current_file_name`, ...) and
  `parse_filename`, which maps a base name to `(number, FileType)` or `None`.
- `leveldbpy.dumpfile`: `guess_type(file_name)` and `dump_file(file_name)`.
- `leveldbpy.skiplist`: `SkipList`, an ordered set of distinct keys with an
  optional comparison function; supports `insert`, `contains`, `in`, `len`
  and iteration in sorted order.
- `leveldbpy.rng`: `Random`, a small deterministic generator with `next`,
  `uniform`, `one_in` and `skew`.
- `leveldbpy.escaping`: `escape_string`, which keeps printable ASCII and writes
  other bytes as `\xNN`, and `number_to_string`.
- `leveldbpy.interfaces`: the abstract `Comparator` and `FilterPolicy`, plus
  `Range`, `CompressionType`, `Options`, `ReadOptions` and `WriteOptions`.
- `leveldbpy.status`: the exception hierarchy rooted at `LevelDBError`
  (`NotFoundError`, `CorruptionError`, `NotSupportedError`,
  `InvalidArgumentError`, `IOStatusError`).

## Installation

```
pip install .
```

## Example

```python
from leveldbpy.bloom import BloomFilterPolicy
from leveldbpy.filename import FileType, parse_filename, log_file_name

policy = BloomFilterPolicy(10)
keys = [b"apple", b"banana"]
filt = policy.create_filter(keys)
assert all(policy.key_may_match(k, filt) for k in keys)

assert parse_filename("MANIFEST-000005") == (5, FileType.DESCRIPTOR_FILE)
print(log_file_name("/tmp/db", 7))  # /tmp/db/7.log
```

Failures are reported by raising subclasses of `LevelDBError`, such as
`InvalidArgumentError` or `NotSupportedError`.

## What this package does not do

This is a set of building blocks, not a working database. There is no way to
open a database, store or read keys, or iterate over its contents: there is no
memtable, write-ahead log, table format, block cache or compaction. The option
records in `leveldbpy.interfaces` describe such a database but nothing here
consumes them.

`dump_file` recognises log, table and descriptor files by name but cannot read
any of them: for those it raises `NotSupportedError`, and for any other name it
raises `InvalidArgumentError`.

## Running the tests

```
pip install .[test]
pytest
```