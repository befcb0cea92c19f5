"""Request parameter type conversion demo service."""
