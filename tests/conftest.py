import io

import pytest


@pytest.fixture
def sample_markdown():
    return (
        "# Title\n"
        "\n"
        "Some paragraph with `inline code`.\n"
        "\n"
        "```rust\n"
        "fn main() {\n"
        "    println!(\"Hello\");\n"
        "}\n"
        "```\n"
        "\n"
        "More text with ``double backticks`` inline.\n"
        "\n"
        "```python\n"
        "x = 1\n"
        "y = 2\n"
        "```\n"
    )


@pytest.fixture
def markdown_file_factory(tmp_path):
    def _create_file(content, name="doc.md"):
        path = tmp_path / name
        data = content if isinstance(content, bytes) else content.encode("utf-8")
        path.write_bytes(data)
        return path
    return _create_file


@pytest.fixture
def stdin_factory(monkeypatch):
    def _feed(content):
        data = content if isinstance(content, bytes) else content.encode("utf-8")
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))
    return _feed


@pytest.fixture
def project_root(tmp_path, monkeypatch):
    from strip_codeblocks.config import Config
    monkeypatch.setattr(Config, "get_project_root", classmethod(lambda cls: tmp_path))
    return tmp_path
