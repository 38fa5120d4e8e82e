"""Changelog generation collaborators."""

from .generator import ChangelogGenerator, GitCliffGenerator

__all__ = ["ChangelogGenerator", "GitCliffGenerator"]
