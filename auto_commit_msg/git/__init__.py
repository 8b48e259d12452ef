"""Git Operations Package"""

from auto_commit_msg.git.analyzer import (
    GitAnalyzer, GitError, EmptyDiffError, DiffStats, StagedChanges, parse_shortstat,
)

__all__ = [
    "GitAnalyzer",
    "GitError",
    "EmptyDiffError",
    "DiffStats",
    "StagedChanges",
    "parse_shortstat",
]
