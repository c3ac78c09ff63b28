"""Filesystem helpers shared by every checker."""
