"""Parsing engine and its collaborators (icon resolution, file discovery, config, logging)."""
