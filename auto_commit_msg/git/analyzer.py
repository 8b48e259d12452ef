"""Git Analyzer - Extract the staged diff and its size from git."""

import re
import subprocess
from dataclasses import dataclass, field

# "3 files changed, 12 insertions(+), 8 deletions(-)"; either count clause may be missing
SHORTSTAT_FILES_RE = re.compile(r'(\d+)\s+files?\s+changed')
SHORTSTAT_INSERTIONS_RE = re.compile(r'(\d+)\s+insertions?\(\+\)')
SHORTSTAT_DELETIONS_RE = re.compile(r'(\d+)\s+deletions?\(-\)')


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class EmptyDiffError(GitError):
    """Raised when nothing is staged."""
    pass


@dataclass(frozen=True)
class DiffStats:
    """Counts from `git diff --shortstat`."""
    files_changed: int = 0
    insertions: int = 0
    deletions: int = 0

    @property
    def total_changes(self) -> int:
        return self.insertions + self.deletions


@dataclass
class StagedChanges:
    """Staged diff text plus its summary counts."""
    diff: str = ""
    stats: DiffStats = field(default_factory=DiffStats)


def parse_shortstat(text: str) -> DiffStats:
    """Parse a shortstat summary line.

    Git leaves out the insertions or deletions clause when that count is
    zero, so each clause is matched on its own and defaults to 0.
    Empty output (nothing staged) yields all zeros.
    """
    text = text.strip()
    if not text:
        return DiffStats()

    files = SHORTSTAT_FILES_RE.search(text)
    insertions = SHORTSTAT_INSERTIONS_RE.search(text)
    deletions = SHORTSTAT_DELETIONS_RE.search(text)

    if not (files or insertions or deletions):
        raise GitError(f"Unrecognized shortstat output: {text[:80]}")

    return DiffStats(
        files_changed=int(files.group(1)) if files else 0,
        insertions=int(insertions.group(1)) if insertions else 0,
        deletions=int(deletions.group(1)) if deletions else 0,
    )


class GitAnalyzer:
    """Reads staged changes from git."""

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def get_staged_diff(self) -> str:
        return self._run_git('diff', '--cached')

    def get_staged_stats(self) -> DiffStats:
        return parse_shortstat(self._run_git('diff', '--cached', '--shortstat'))

    def get_staged_changes(self) -> StagedChanges:
        """Get the staged diff and its stats. Fails fast when nothing is staged."""
        diff = self.get_staged_diff()
        if not diff.strip():
            raise EmptyDiffError("No staged changes. Run 'git add' first.")
        return StagedChanges(diff=diff, stats=self.get_staged_stats())
