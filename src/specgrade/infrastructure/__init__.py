"""Infrastructure layer — concrete loaders and report renderers."""
