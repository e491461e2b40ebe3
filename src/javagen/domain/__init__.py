"""Domain layer: entity models and the errors they raise."""
