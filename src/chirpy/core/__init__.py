"""Authentication primitives, configuration and error types."""
