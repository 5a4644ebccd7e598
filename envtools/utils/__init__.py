"""Environment variable lookups."""
