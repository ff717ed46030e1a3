"""Core interfaces (Protocol contracts implemented by adapters)."""
