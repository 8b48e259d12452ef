"""Command Line Interface"""

from auto_commit_msg.cli.main import main, run

__all__ = ["main", "run"]
