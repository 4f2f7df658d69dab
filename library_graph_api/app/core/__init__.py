"""Core building blocks: configuration, logging, errors and the entity store."""
