"""Domain models and constants.

Pure data only: character tables, the generation request and range-parsing
diagnostics. Nothing here knows about the CLI, files or the OS random source.
"""
