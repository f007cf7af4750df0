"""Command line interface for idlproto."""
