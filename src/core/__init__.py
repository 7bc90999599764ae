"""fakeiban core: IBAN registry, MOD 97-10 checksum, generation and validation."""
