"""Application configuration and static lookup tables."""
