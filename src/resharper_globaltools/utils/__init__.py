"""Shared utilities for resharper_globaltools."""
