"""Argument building, tool discovery, process execution and settings files."""
