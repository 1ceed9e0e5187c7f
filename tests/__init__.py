"""The decobox test suite."""
