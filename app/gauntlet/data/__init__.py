"""Bundled data files for gauntlet."""
