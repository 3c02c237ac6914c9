"""gauntlet - Snap half of a directory tree out of existence.

Recursively enumerates a directory, skips version-control metadata,
dependency directories and secrets, randomly picks half of what is
left and reports or deletes it.
"""

__version__ = "1.0.0"
