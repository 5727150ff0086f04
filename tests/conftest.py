"""
Pytest configuration and shared fixtures for PAR CC Statusline tests.
"""

import json
import os
from pathlib import Path

import pytest

from par_cc_statusline.config import Config


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all PAR_CC_STATUSLINE environment variables."""
    env_vars = [k for k in os.environ if k.startswith("PAR_CC_STATUSLINE_")]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def mock_config():
    """Create a plain-text configuration with a fixed home directory."""
    return Config(home_dir="/home/alice", color_enabled=False, git_enabled=False)


@pytest.fixture
def sample_request():
    """A typical Claude Code status line request."""
    return {
        "session_id": "abc123",
        "transcript_path": "/home/alice/.claude/projects/-home-alice-proj/abc123.jsonl",
        "model": {"id": "claude-opus-4-5", "display_name": "Opus 4.5"},
        "workspace": {"current_dir": "/home/alice/proj", "project_dir": "/home/alice/proj"},
        "cost": {"total_cost_usd": 4.6, "total_duration_ms": 120000},
        "cwd": "/home/alice/proj",
        "context_window": {"context_window_size": 100000, "used_percentage": 50.0},
    }


@pytest.fixture
def sample_request_json(sample_request):
    """The sample request encoded as JSON bytes."""
    return json.dumps(sample_request).encode("utf-8")


def make_git_repo(path: Path, head: str = "ref: refs/heads/main\n") -> Path:
    """Create a minimal regular git repository at path."""
    git_dir = path / ".git"
    git_dir.mkdir(parents=True)
    (git_dir / "HEAD").write_text(head, encoding="utf-8")
    return git_dir


def make_worktree(main_repo: Path, worktree: Path, name: str, head: str = "ref: refs/heads/feature\n") -> Path:
    """Create a worktree of main_repo at worktree with a gitdir pointer file."""
    gitdir = main_repo / ".git" / "worktrees" / name
    gitdir.mkdir(parents=True)
    (gitdir / "HEAD").write_text(head, encoding="utf-8")
    worktree.mkdir(parents=True)
    (worktree / ".git").write_text(f"gitdir: {gitdir}\n", encoding="utf-8")
    return gitdir


@pytest.fixture
def git_repo(tmp_path):
    """A regular repository named 'project' on branch main."""
    repo = tmp_path / "project"
    make_git_repo(repo)
    return repo


@pytest.fixture
def git_worktree(tmp_path):
    """A worktree of 'main-repo' checked out on branch feature."""
    main_repo = tmp_path / "main-repo"
    make_git_repo(main_repo)
    worktree = tmp_path / "wt-feature"
    make_worktree(main_repo, worktree, "wt-feature")
    return worktree


@pytest.fixture
def git_factory():
    """Expose the repository builders to tests that need custom layouts."""
    return {"repo": make_git_repo, "worktree": make_worktree}
