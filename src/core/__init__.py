"""Core: domain, charset assembly, sampling and configuration."""
