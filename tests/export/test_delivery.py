from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from engine.export import delivery as delivery_mod
from engine.export.delivery import ClipboardDelivery, FileDelivery, deliver_with_fallback
from engine.export.service import ExportService
from ramps import DeliveryError, Palette, SerializationError
from ramps.export import ExportFormat, export_palette
from tests._utils.samples import make_entry, make_palette


class RecordingDelivery:
    """呼び出しを記録し、固定の成否を返す配信チャネル。"""

    def __init__(self, name: str, ok: bool) -> None:
        self.name = name
        self.ok = ok
        self.calls: list[tuple[str, str, str]] = []

    def deliver(self, payload: str, filename: str, mime_type: str) -> bool:
        self.calls.append((payload, filename, mime_type))
        return self.ok


def test_primary_success_skips_fallback(blue_palette: Palette) -> None:
    doc = export_palette(blue_palette, "json")
    primary = RecordingDelivery("primary", True)
    fallback = RecordingDelivery("fallback", True)
    used = deliver_with_fallback(doc, primary, fallback)
    assert used is primary
    assert len(primary.calls) == 1
    assert fallback.calls == []


def test_fallback_receives_identical_content(blue_palette: Palette) -> None:
    doc = export_palette(blue_palette, "figma")
    primary = RecordingDelivery("clipboard", False)
    fallback = RecordingDelivery("file", True)
    used = deliver_with_fallback(doc, primary, fallback)
    assert used is fallback
    # 一次チャネルは 1 回のみ（再試行なし）
    assert len(primary.calls) == 1
    assert primary.calls == fallback.calls
    assert fallback.calls[0] == (doc.payload, "figma_color_styles.json", "application/json")


def test_all_channels_failing_raises(blue_palette: Palette) -> None:
    doc = export_palette(blue_palette, "csv")
    with pytest.raises(DeliveryError) as ei:
        deliver_with_fallback(doc, RecordingDelivery("clipboard", False), RecordingDelivery("file", False))
    assert ei.value.filename == "color_palette.csv"
    assert ei.value.channels == ["clipboard", "file"]
    with pytest.raises(DeliveryError):
        deliver_with_fallback(doc, RecordingDelivery("file", False))


def test_file_delivery_writes_exact_payload(tmp_path: Path, red_palette: Palette) -> None:
    doc = export_palette(red_palette, "csv")
    out = tmp_path / "nested" / "dir"
    fd = FileDelivery(out)
    assert fd.deliver(doc.payload, doc.filename, doc.mime_type) is True
    written = out / "color_palette.csv"
    assert fd.last_path == written
    assert written.read_bytes() == doc.payload.encode("utf-8")
    assert not (out / "color_palette.csv.part").exists()


def test_file_delivery_reports_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")
    assert FileDelivery(blocker).deliver("{}", "a.json", "application/json") is False


def test_file_delivery_failure_leaves_no_part_file(tmp_path: Path) -> None:
    # 最終パスがディレクトリなので replace が失敗する
    (tmp_path / "color_palette.csv").mkdir()
    fd = FileDelivery(tmp_path)
    assert fd.deliver("Color Name,0\n", "color_palette.csv", "text/csv") is False
    assert sorted(p.name for p in tmp_path.iterdir()) == ["color_palette.csv"]
    assert (tmp_path / "color_palette.csv").is_dir()
    assert fd.last_path is None


def test_clipboard_without_commands_fails() -> None:
    assert ClipboardDelivery(commands=()).deliver("x", "a.json", "application/json") is False


def test_clipboard_pipes_payload(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[tuple[list[str], bytes]] = []

    def fake_run(cmd, input, **kwargs):  # noqa: A002 - subprocess.run と同名
        seen.append((cmd, input))
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr(delivery_mod.shutil, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(delivery_mod.subprocess, "run", fake_run)
    cb = ClipboardDelivery(commands=[("xclip", "-selection", "clipboard")])
    assert cb.deliver("payload", "a.json", "application/json") is True
    assert seen == [(["xclip", "-selection", "clipboard"], b"payload")]


def test_clipboard_tries_next_command_on_error(monkeypatch: pytest.MonkeyPatch) -> None:
    tried: list[str] = []

    def fake_run(cmd, input, **kwargs):  # noqa: A002
        tried.append(cmd[0])
        if cmd[0] == "wl-copy":
            raise subprocess.CalledProcessError(1, cmd)
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr(delivery_mod.shutil, "which", lambda name: name)
    monkeypatch.setattr(delivery_mod.subprocess, "run", fake_run)
    cb = ClipboardDelivery(commands=[("wl-copy",), ("xsel", "--clipboard", "--input")])
    assert cb.deliver("p", "a.json", "application/json") is True
    assert tried == ["wl-copy", "xsel"]


def test_service_routes_figma_through_clipboard(blue_palette: Palette) -> None:
    clip = RecordingDelivery("clipboard", False)
    file_ = RecordingDelivery("file", True)
    svc = ExportService(file_delivery=file_, clipboard=clip)
    result = svc.export(blue_palette, ExportFormat.FIGMA)
    assert result.channel == "file"
    assert result.fell_back is True
    assert clip.calls == file_.calls


def test_service_sends_other_formats_to_file(blue_palette: Palette) -> None:
    clip = RecordingDelivery("clipboard", True)
    file_ = RecordingDelivery("file", True)
    svc = ExportService(file_delivery=file_, clipboard=clip)
    for fmt in ("json", "csv", "tokens"):
        result = svc.export(blue_palette, fmt)
        assert result.channel == "file" and not result.fell_back
    assert clip.calls == []
    assert [c[1] for c in file_.calls] == ["color_palette.json", "color_palette.csv", "design_tokens.json"]


def test_service_without_clipboard_writes_figma_file(blue_palette: Palette) -> None:
    file_ = RecordingDelivery("file", True)
    result = ExportService(file_delivery=file_).export(blue_palette, "figma")
    assert result.channel == "file" and not result.fell_back


def test_service_does_not_deliver_malformed_palette() -> None:
    file_ = RecordingDelivery("file", True)
    bad = make_palette("Bad", [make_entry(0, "#000000")], [0, 100])
    with pytest.raises(SerializationError):
        ExportService(file_delivery=file_).export(bad, "json")
    assert file_.calls == []
