"""Platform adapters: logging and HTTP transport."""
