"""Normalization package.

Canonicalizes identifier values and replaces them with SHA-256 digests.
Each canonicalizer takes a raw value and returns the canonical string that
is hashed, or ``None`` when the value must be left untouched.

Safety rule: raw values are never logged.
"""
