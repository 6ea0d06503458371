"""TOML tokenizer, token and error types, value helpers and conversion of Python data to TOML values."""

__version__ = "0.1.0"
__all__ = ["tokens", "tokenizer", "value", "convert"]