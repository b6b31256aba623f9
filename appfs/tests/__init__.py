"""Define all tests for appfs itself."""
