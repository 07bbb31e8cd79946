import pytest


def pytest_collection_modifyitems(items):
    for item in items:
        if "init-cmd" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def template_dir(tmp_path):
    """A small template tree with a README and a single skill."""
    root = tmp_path / "template"
    (root / "skills" / "foo").mkdir(parents=True)
    (root / "README.md").write_text("# Readme\n")
    (root / "skills" / "foo" / "SKILL.md").write_text("---\nname: foo\n---\nDo foo.\n")
    return root


@pytest.fixture
def project_dir(tmp_path):
    root = tmp_path / "project"
    root.mkdir()
    return root
