"""Customer match preprocessing: extract, hash and project contact records."""
