"""Tokenizer, signal descriptions and helpers for a small command shell."""

__version__ = "0.1.0"