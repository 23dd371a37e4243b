"""Command line tools for tnetcodec."""
