"""Tests for reading git metadata for the status line."""

from unittest.mock import patch

from par_cc_statusline.git_info import find_branch, find_gitdir, find_repo_name, repo_label


class TestFindGitdir:
    """Test locating the git metadata directory."""

    def test_regular_repo(self, git_repo):
        """Test that a .git directory is returned as is."""
        assert find_gitdir(str(git_repo)) == git_repo / ".git"

    def test_worktree(self, git_worktree, tmp_path):
        """Test that a worktree resolves to its gitdir pointer."""
        assert find_gitdir(str(git_worktree)) == tmp_path / "main-repo" / ".git" / "worktrees" / "wt-feature"

    def test_relative_worktree_pointer(self, tmp_path):
        """Test that a relative gitdir pointer is resolved against the worktree."""
        worktree = tmp_path / "wt"
        worktree.mkdir()
        (worktree / ".git").write_text("gitdir: ../main/.git/worktrees/wt\n", encoding="utf-8")

        assert find_gitdir(str(worktree)) == worktree / "../main/.git/worktrees/wt"

    def test_not_a_repo(self, tmp_path):
        """Test a directory without .git."""
        assert find_gitdir(str(tmp_path)) is None

    def test_missing_directory(self, tmp_path):
        """Test a directory that does not exist."""
        assert find_gitdir(str(tmp_path / "missing")) is None

    def test_empty_cwd(self):
        """Test that an empty path is never inspected."""
        assert find_gitdir("") is None

    def test_malformed_git_file(self, tmp_path):
        """Test a .git file without a gitdir pointer."""
        (tmp_path / ".git").write_text("not a pointer\n", encoding="utf-8")
        assert find_gitdir(str(tmp_path)) is None


class TestFindRepoName:
    """Test repository name resolution."""

    def test_regular_repo(self, git_repo):
        """Test that a regular repo is named after its directory."""
        assert find_repo_name(str(git_repo)) == "project"

    def test_worktree_uses_main_repo_name(self, git_worktree):
        """Test that a worktree is named after the main repository."""
        assert find_repo_name(str(git_worktree)) == "main-repo"

    def test_worktree_pointer_too_short(self, tmp_path):
        """Test a gitdir pointer without enough components for a main repo."""
        (tmp_path / ".git").write_text("gitdir: worktrees/wt\n", encoding="utf-8")
        assert find_repo_name(str(tmp_path)) is None

    def test_not_a_repo(self, tmp_path):
        """Test a directory without .git."""
        assert find_repo_name(str(tmp_path)) is None

    def test_unreadable_git_file(self, tmp_path):
        """Test that read errors are swallowed."""
        (tmp_path / ".git").write_text("gitdir: /a/b/.git/worktrees/c\n", encoding="utf-8")

        with patch("pathlib.Path.read_text", side_effect=PermissionError("denied")):
            assert find_repo_name(str(tmp_path)) is None

    def test_undecodable_git_file(self, tmp_path):
        """Test that a .git file with invalid UTF-8 is ignored."""
        (tmp_path / ".git").write_bytes(b"gitdir: \xff\xfe")
        assert find_repo_name(str(tmp_path)) is None


class TestFindBranch:
    """Test branch name resolution."""

    def test_regular_repo(self, git_repo):
        """Test reading the branch of a regular repo."""
        assert find_branch(str(git_repo)) == "main"

    def test_worktree(self, git_worktree):
        """Test reading the branch of a worktree."""
        assert find_branch(str(git_worktree)) == "feature"

    def test_branch_with_slashes(self, tmp_path, git_factory):
        """Test that branch names keep their slashes."""
        git_factory["repo"](tmp_path, head="ref: refs/heads/feature/statusline\n")
        assert find_branch(str(tmp_path)) == "feature/statusline"

    def test_detached_head(self, tmp_path, git_factory):
        """Test that a detached HEAD has no branch."""
        git_factory["repo"](tmp_path, head="4b825dc642cb6eb9a060e54bf8d69288fbee4904\n")
        assert find_branch(str(tmp_path)) is None

    def test_missing_head(self, tmp_path):
        """Test a .git directory without HEAD."""
        (tmp_path / ".git").mkdir()
        assert find_branch(str(tmp_path)) is None

    def test_not_a_repo(self, tmp_path):
        """Test a directory without .git."""
        assert find_branch(str(tmp_path)) is None


class TestRepoLabel:
    """Test the combined repository label."""

    def test_repo_and_branch(self, git_repo):
        """Test the repo:branch label."""
        assert repo_label(str(git_repo)) == "project:main"

    def test_worktree_label(self, git_worktree):
        """Test the label of a worktree."""
        assert repo_label(str(git_worktree)) == "main-repo:feature"

    def test_repo_without_branch(self, tmp_path, git_factory):
        """Test that a detached HEAD shows only the repo name."""
        repo = tmp_path / "detached"
        git_factory["repo"](repo, head="4b825dc642cb6eb9a060e54bf8d69288fbee4904\n")
        assert repo_label(str(repo)) == "detached"

    def test_not_a_repo(self, tmp_path):
        """Test that no label is produced outside git."""
        assert repo_label(str(tmp_path)) is None

    def test_empty_cwd(self):
        """Test that an empty path produces no label."""
        assert repo_label("") is None

    def test_relative_cwd(self, git_repo, monkeypatch):
        """Test a relative working directory."""
        monkeypatch.chdir(git_repo.parent)
        assert repo_label("project") == "project:main"

    def test_file_instead_of_directory(self, tmp_path):
        """Test a cwd that is a regular file."""
        file_path = tmp_path / "file.txt"
        file_path.write_text("x", encoding="utf-8")
        assert repo_label(str(file_path)) is None

    def test_trailing_separator(self, git_repo):
        """Test a working directory with a trailing separator."""
        assert repo_label(f"{git_repo}/") == "project:main"
