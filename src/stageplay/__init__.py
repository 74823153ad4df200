"""Staged-builder media player."""
