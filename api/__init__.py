"""HTTP API for ABA file generation and parsing."""
