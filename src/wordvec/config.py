"""
Configuration & Constants
=========================
This module serves as the central registry for the names used to locate and
read a word-vector bundle.

Why is this file needed?
------------------------
1. Abstraction: It prevents the payload entry name and the record keys from
   being hardcoded across the reader and the parser.
2. Versioning: It resolves the installed package version once, so log lines
   and the CLI report the same value.

Exports:
    PAYLOAD_ENTRY_NAME (str): Substring identifying the payload entry in a bundle.
    APP_VERSION (str): Installed version of the package.
"""
from importlib.metadata import version, PackageNotFoundError

try:
    APP_VERSION: str = version("wordvec")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

# Entry inside the bundle whose name contains this substring holds the model
PAYLOAD_ENTRY_NAME: str = "model.json"

# Keys of the serialized record
ATTRIBUTES_KEY: str = "attributes"
OP_KEY: str = "op"
WORDS_KEY: str = "words"
INDICES_KEY: str = "indices"
WORD_VECTORS_KEY: str = "word_vectors"

# Value lists inside each attribute are keyed by their element type
STRING_VALUES_KEY: str = "string"
LONG_VALUES_KEY: str = "long"
DOUBLE_VALUES_KEY: str = "double"
TYPE_TAG_KEY: str = "type"
