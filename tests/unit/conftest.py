import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep the user's real config and environment out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path_factory.mktemp("xdg")))
    monkeypatch.delenv("SHARECODE_CONFIG", raising=False)
    monkeypatch.delenv("SHARECODE_ROOT", raising=False)


def make_tree(root, *paths):
    """Create files (and their parent directories) under `root`; names ending in '/' become directories."""
    for rel in paths:
        p = root / rel
        if rel.endswith("/"):
            p.mkdir(parents=True, exist_ok=True)
        else:
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text("")
    return root
