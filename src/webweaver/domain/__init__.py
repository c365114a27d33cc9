"""Domain definitions and projected record types."""
