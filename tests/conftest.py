"""Shared test fixtures."""

import subprocess

import pytest


class FakeRun:
    """Stand-in for subprocess.run that records calls."""

    def __init__(self, returncode=0, stdout="", stderr="", raises=None):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.raises = raises
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append((args, kwargs))
        if self.raises is not None:
            raise self.raises
        return subprocess.CompletedProcess(args, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def stub_run(monkeypatch):
    """Replace subprocess.run with a FakeRun built from keyword arguments."""

    def install(**kwargs):
        fake = FakeRun(**kwargs)
        monkeypatch.setattr(subprocess, "run", fake)
        return fake

    return install
