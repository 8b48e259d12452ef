"""Shared fixtures: fake git and a fake chat/completions endpoint."""

import io
import json
import subprocess
import urllib.error

import pytest


SAMPLE_DIFF = (
    "diff --git a/src/app.py b/src/app.py\n"
    "--- a/src/app.py\n"
    "+++ b/src/app.py\n"
    "@@ -1,3 +1,4 @@\n"
    "+import logging\n"
    " def main():\n"
    "-    print('hi')\n"
    "+    logging.info('hi')\n"
)

SAMPLE_SHORTSTAT = " 1 file changed, 2 insertions(+), 1 deletion(-)\n"


def completion_body(*messages):
    """JSON body with one choice per (role, content) pair."""
    return json.dumps({
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "choices": [
            {"index": i, "message": {"role": role, "content": content}, "finish_reason": "stop"}
            for i, (role, content) in enumerate(messages)
        ],
    }).encode('utf-8')


class FakeResponse:
    def __init__(self, body: bytes, status: int = 200):
        self._body = body
        self.status = status

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False


class FakeEndpoint:
    """Stands in for urllib.request.urlopen and records every request."""

    def __init__(self):
        self.requests = []
        self.body = completion_body(("assistant", "feat(app): log greeting instead of printing"))
        self.error = None

    def __call__(self, req, *args, **kwargs):
        self.requests.append(req)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.body)

    def fail_with_status(self, code: int, reason: str, body: bytes = b""):
        self.error = urllib.error.HTTPError(
            "https://example.test/chat/completions", code, reason, {}, io.BytesIO(body)
        )

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].data.decode('utf-8'))


class FakeGit:
    """Stands in for subprocess.run, answering the two staged-diff commands."""

    def __init__(self, diff: str = SAMPLE_DIFF, shortstat: str = SAMPLE_SHORTSTAT):
        self.outputs = {
            ('git', 'diff', '--cached'): diff,
            ('git', 'diff', '--cached', '--shortstat'): shortstat,
        }
        self.calls = []
        self.fail_with = None

    def __call__(self, cmd, *args, **kwargs):
        self.calls.append(tuple(cmd))
        if self.fail_with is not None:
            raise self.fail_with
        return subprocess.CompletedProcess(cmd, 0, stdout=self.outputs[tuple(cmd)], stderr="")


@pytest.fixture
def endpoint(monkeypatch):
    fake = FakeEndpoint()
    monkeypatch.setattr("urllib.request.urlopen", fake)
    return fake


@pytest.fixture
def fake_git(monkeypatch):
    fake = FakeGit()
    monkeypatch.setattr("subprocess.run", fake)
    return fake


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Empty working directory with the default token set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GEMINI_API_KEY", "test-token")
    return tmp_path
