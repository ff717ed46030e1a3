"""Services orchestrating the core building blocks."""
