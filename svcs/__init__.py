"""SVCS — a minimal local version-control engine.

Tracks files in a working directory, snapshots them into content-addressed
commits under ``vcs/commits/<fingerprint>/`` and restores prior snapshots on
demand.
"""

__version__ = "0.1.0"
