"""
Auto Commit Message

Conventional commit messages from staged git changes, written by an
OpenAI-compatible chat completion endpoint.
"""

__version__ = "0.4.0"

# Reported in trace blocks so traces from different builds can be told apart
TRACE_LANGUAGE = "python"
TRACE_KEY = "auto-commit-msg"
