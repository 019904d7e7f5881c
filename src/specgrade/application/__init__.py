"""Application layer — use cases orchestrating the engine."""
