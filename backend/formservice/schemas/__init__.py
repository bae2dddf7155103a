"""API Schemas - Pydantic request bodies and response models."""
