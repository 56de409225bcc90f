import pytest

from dirbundle.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def gitignore_file(tmp_path):
    path = tmp_path / ".gitignore"
    path.write_text("*.log\n!keep.log\nbuild/\n*.py[cod]\n**/__pycache__/\n# comment\n")
    return path


@pytest.fixture
def bundleignore_file(tmp_path):
    path = tmp_path / ".bundleignore"
    path.write_text("*.tmp\nsecrets/\n!secrets/public.pem\n")
    return path


@pytest.mark.parametrize(
    "path,expected",
    [
        ("server.log", True),
        ("keep.log", False),
        ("logs/server.log", True),
        ("module.pyc", True),
        ("module.py", False),
        ("build/", True),
        ("build/output.bin", True),
        ("src/build/", True),
        ("build", False),
        ("pkg/__pycache__/", True),
        ("pkg/__pycache__/mod.cpython-312.pyc", True),
        ("# comment", False),
        ("README.md", False),
    ],
)
def test_gitignore_rules(gitignore_file, path, expected):
    rules = GitIgnoreExclusionRules(gitignore_file)
    assert rules.exclude(path) == expected, f"Failed for path: {path}"


def test_empty_rules_exclude_nothing(tmp_path):
    empty = tmp_path / "empty.ignore"
    empty.write_text("")
    rules = GitIgnoreExclusionRules(empty)
    assert not rules.exclude("anything.txt")
    assert not rules.has_rules()


def test_missing_rules_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GitIgnoreExclusionRules(tmp_path / "nonexistent")


def test_multiple_rules_files(gitignore_file, bundleignore_file):
    rules = GitIgnoreExclusionRules([gitignore_file, str(bundleignore_file)])
    assert rules.exclude("server.log")
    assert rules.exclude("scratch.tmp")
    assert rules.exclude("secrets/")
    assert rules.exclude("secrets/private.pem")
    assert not rules.exclude("secrets/public.pem")


def test_add_rule_after_loading(gitignore_file):
    rules = GitIgnoreExclusionRules(gitignore_file)
    assert not rules.exclude("notes.md")
    rules.add_rule("*.md")
    assert rules.exclude("notes.md")
    rules.add_rule("!README.md")
    assert not rules.exclude("README.md")


def test_later_rules_override_earlier_ones():
    rules = GitIgnoreExclusionRules()
    assert not rules.has_rules()
    rules.add_rule("!keep.txt")
    rules.add_rule("*.txt")
    assert rules.has_rules()
    assert rules.exclude("keep.txt")
