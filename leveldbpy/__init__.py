"""Building blocks of a LevelDB-style key-value store: codecs, hashing, bloom
filters, internal keys, file names, a skip list and error types."""

__version__ = "0.1.0"