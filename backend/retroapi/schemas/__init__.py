# Schemas package init
"""Pydantic request/response models, one module per resource plus the shared envelope."""
