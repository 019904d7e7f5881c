"""Domain layer — document model, rule results, errors and ports."""
