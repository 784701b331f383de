"""spec_lifecycle package."""
