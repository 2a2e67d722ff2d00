import pytest

from core.errors import AccessDeniedError, ValidationError
from filesystem.factory import build_local_filesystem
from tools import rename_path as rename_tool


class FakeFileSystem:
    def __init__(self, out):
        self._out = out
        self.calls = []

    async def rename(self, *, source: str, target: str):
        self.calls.append((source, target))
        return self._out


@pytest.mark.asyncio
@pytest.mark.parametrize("source,target", [("", "b.txt"), ("a.txt", "  ")])
async def test_rename_tool_validates_inputs(dummy_mcp, source, target):
    fake_fs = FakeFileSystem(out="x")
    rename_tool.register(dummy_mcp, filesystem=fake_fs)
    fn = dummy_mcp.tools["rename_path"]

    with pytest.raises(ValidationError):
        await fn(source=source, target=target)
    assert fake_fs.calls == []


@pytest.mark.asyncio
async def test_rename_tool_delegates_to_injected_filesystem(dummy_mcp):
    fake_fs = FakeFileSystem(out="docs/new.md")
    rename_tool.register(dummy_mcp, filesystem=fake_fs)
    fn = dummy_mcp.tools["rename_path"]

    out = await fn(source=" old.md ", target="docs/new.md")

    assert out == "Renamed: old.md -> docs/new.md"
    assert fake_fs.calls == [(" old.md ", "docs/new.md")]


@pytest.mark.asyncio
async def test_rename_tool_end_to_end(dummy_mcp, tmp_path):
    (tmp_path / "a.txt").write_text("hello", encoding="utf-8")
    rename_tool.register(dummy_mcp, filesystem=build_local_filesystem(project_root=tmp_path))
    fn = dummy_mcp.tools["rename_path"]

    assert await fn(source="a.txt", target="b.txt") == "Renamed: a.txt -> b.txt"
    assert (tmp_path / "b.txt").read_text(encoding="utf-8") == "hello"

    with pytest.raises(AccessDeniedError):
        await fn(source="b.txt", target="../../escaped.txt")
