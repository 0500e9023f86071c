"""Application layer: client facades composed from features and platform adapters."""
