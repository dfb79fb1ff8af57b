"""Infrastructure: file-backed persistence and logging setup.

Invariants:
    - Only layer that touches the filesystem
"""
