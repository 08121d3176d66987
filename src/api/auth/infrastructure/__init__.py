"""Auth infrastructure adapters."""
