"""Validated settings for the command line tool."""
