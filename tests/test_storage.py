"""Tests for the environment store and alias files."""

import pytest

from alienv.errors import (
    AlreadyExists,
    CorruptFile,
    InvalidName,
    NotFound,
    UsageError,
)
from alienv.storage.aliases import AliasFile
from alienv.storage.base import Alias
from alienv.storage.file import EnvironmentStore, is_valid_env_name


class TestEnvironmentStore:
    """Tests for EnvironmentStore."""

    @pytest.fixture
    def store(self, tmp_path):
        """Create a store rooted in a fresh temporary directory."""
        store = EnvironmentStore(root_dir=tmp_path / "alienv")
        store.init()
        return store

    def test_create_then_exists(self, store):
        """Test create followed by exists."""
        alias_file = store.create("work")
        assert store.exists("work")
        assert alias_file.exists()
        assert alias_file.read_text() == ""

    def test_delete_then_not_exists(self, store):
        """Test delete removes the environment."""
        store.create("work")
        store.delete("work")
        assert not store.exists("work")
        assert not store.env_dir("work").exists()

    def test_create_invalid_name(self, store):
        """Test invalid names are rejected before touching disk."""
        with pytest.raises(InvalidName):
            store.create("bad name!")
        assert list(store.root_dir.iterdir()) == []

    def test_create_dot_names(self, store):
        """Test `.` and `..` are not environment names."""
        for name in (".", ".."):
            with pytest.raises(InvalidName):
                store.create(name)

    def test_create_sentinel_name(self, tmp_path):
        """Test the sentinel can never become an environment."""
        store = EnvironmentStore(root_dir=tmp_path, sentinel="none")
        with pytest.raises(InvalidName):
            store.create("none")

    def test_create_existing(self, store):
        """Test creating an environment twice."""
        store.create("work")
        with pytest.raises(AlreadyExists):
            store.create("work")

    def test_delete_missing(self, store):
        """Test deleting an environment that does not exist."""
        with pytest.raises(NotFound):
            store.delete("ghost")

    def test_list(self, store):
        """Test listing environments."""
        for name in ("a", "b.c", "d_e-f"):
            store.create(name)
        assert sorted(store.list()) == ["a", "b.c", "d_e-f"]

    def test_exists_is_exact(self, store):
        """Test exists does not match prefixes."""
        store.create("work")
        assert not store.exists("wor")
        assert not store.exists("work2")

    def test_valid_names(self):
        """Test the name character class."""
        assert is_valid_env_name("web-1.0_beta")
        assert not is_valid_env_name("")
        assert not is_valid_env_name("a/b")
        assert not is_valid_env_name("bad name!")
        assert not is_valid_env_name("NO ENV")
        assert not is_valid_env_name(".")
        assert not is_valid_env_name("..")


class TestAliasFile:
    """Tests for AliasFile."""

    @pytest.fixture
    def aliases(self, tmp_path):
        """Create an empty alias file."""
        path = tmp_path / "aliases"
        path.touch()
        return AliasFile(path)

    def test_append_and_read(self, aliases):
        """Test appending and reading records."""
        aliases.append("ll", "ls -la")
        aliases.append("gs", "git status")

        assert aliases.read_all() == [
            Alias("ll", "ls -la"),
            Alias("gs", "git status"),
        ]
        assert aliases.path.read_text() == (
            'alias ll="ls -la"\nalias gs="git status"\n'
        )

    def test_remove(self, aliases):
        """Test removing a record."""
        aliases.append("ll", "ls -la")
        aliases.append("gs", "git status")

        assert aliases.remove("ll") is True
        assert aliases.read_all() == [Alias("gs", "git status")]

    def test_remove_missing_leaves_file_unchanged(self, aliases):
        """Test removing an unknown alias."""
        aliases.append("ll", "ls -la")
        before = aliases.path.read_bytes()

        assert aliases.remove("gs") is False
        assert aliases.path.read_bytes() == before

    def test_remove_does_not_match_prefix(self, aliases):
        """Test removing `l` keeps `ll`."""
        aliases.append("ll", "ls -la")
        aliases.append("l", "ls")

        assert aliases.remove("l") is True
        assert aliases.read_all() == [Alias("ll", "ls -la")]

    def test_remove_drops_duplicates(self, aliases):
        """Test every record for the name is removed."""
        aliases.append("ll", "ls -l")
        aliases.append("ll", "ls -la")

        assert aliases.remove("ll") is True
        assert aliases.read_all() == []

    def test_remove_leaves_no_temp_files(self, aliases):
        """Test the rewrite replaces the file in place."""
        aliases.append("ll", "ls -la")
        aliases.remove("ll")
        assert [p.name for p in aliases.path.parent.iterdir()] == ["aliases"]

    def test_quotes_in_command(self, aliases):
        """Test commands containing quotes and backslashes."""
        command = 'echo "hi" \\o/'
        aliases.append("hi", command)
        assert aliases.read_all() == [Alias("hi", command)]

    def test_append_rejects_multiline_command(self, aliases):
        """Test a command with a line break never reaches the file."""
        for command in ("echo a\necho b", "echo a\recho b", "echo a\x0cecho b"):
            with pytest.raises(UsageError):
                aliases.append("x", command)
        assert aliases.path.read_bytes() == b""

    def test_non_utf8_file(self, aliases):
        """Test undecodable bytes are reported as a corrupt file."""
        aliases.path.write_bytes(b'alias x="\xff"\n')
        with pytest.raises(CorruptFile):
            aliases.read_all()
        with pytest.raises(CorruptFile):
            aliases.remove("x")

    def test_corrupt_file(self, aliases):
        """Test a non-record line."""
        aliases.path.write_text('alias ll="ls -la"\nrm -rf /\n')
        with pytest.raises(CorruptFile):
            aliases.read_all()
