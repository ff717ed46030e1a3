"""Adapters: OS randomness and output exporters."""
