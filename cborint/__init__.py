"""Fixed-width unsigned and negative integer items of the CBOR data model."""

__version__ = "0.1.0"