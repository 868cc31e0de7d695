"""Operation implementations: pure functions plus argument-validating handlers."""
