"""Chat pipeline and completion clients."""
