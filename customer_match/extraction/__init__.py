"""Extraction package.

Turns loosely-keyed contact records into a canonical ``UserData`` whose
``userIdentifiers`` list holds one entry per email, phone number and
address block found.

Safety rule: raw values are never logged.
"""
