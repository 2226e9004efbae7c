"""Compilation pipeline and its collaborators."""
