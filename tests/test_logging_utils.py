import json
import logging

from cryptgen import logging_utils
from cryptgen.server import _configure_logging


def test_key_value_format(monkeypatch):
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    line = logging_utils._format("info", event="layout_generated", rooms=5, note="two words", skip=None)
    assert line.startswith("level=info ts=")
    assert "event=layout_generated" in line
    assert "rooms=5" in line
    assert "note=two_words" in line
    assert "skip" not in line


def test_json_format(monkeypatch):
    monkeypatch.setattr(logging_utils, "JSON_MODE", True)
    rec = json.loads(logging_utils._format("warn", event="x", start=(1, 2)))
    assert rec["level"] == "warn"
    assert rec["event"] == "x"
    assert "ts" in rec


def test_level_threshold(monkeypatch, capsys):
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", logging_utils.LEVELS["warn"])
    log = logging_utils.get_logger("cryptgen.test")
    log.info(event="hidden")
    log.warn(event="shown")
    log.error(event="to_stderr")
    captured = capsys.readouterr()
    assert "hidden" not in captured.out
    assert "event=shown" in captured.out and "logger=cryptgen.test" in captured.out
    assert "event=to_stderr" in captured.err


def test_get_logger_is_cached():
    assert logging_utils.get_logger("a.b") is logging_utils.get_logger("a.b")


def test_coords_render_compact(monkeypatch):
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    line = logging_utils._format("debug", event="path_not_found", start=(3, -4))
    assert "start=3,-4" in line


def test_bind_repeats_context(monkeypatch, capsys):
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", logging_utils.LEVELS["info"])
    base = logging_utils.get_logger("cryptgen.bind")
    child = base.bind(seed=42).bind(phase="walls")
    child.info(event="one")
    child.info(event="two", seed=7)
    base.info(event="three")
    lines = capsys.readouterr().out.splitlines()
    assert "seed=42" in lines[0] and "phase=walls" in lines[0]
    assert "seed=7" in lines[1] and "seed=42" not in lines[1]
    assert "seed=" not in lines[2]
    assert child is not base
    assert logging_utils.get_logger("cryptgen.bind") is base


def test_generation_events_carry_seed(monkeypatch, capsys):
    from cryptgen.dungeon import DungeonConfig, DungeonLayoutGenerator

    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", logging_utils.LEVELS["debug"])
    DungeonLayoutGenerator(DungeonConfig(room_count=1)).generate(77)
    lines = capsys.readouterr().out.splitlines()
    skipped = [ln for ln in lines if "event=corridors_skipped" in ln]
    generated = [ln for ln in lines if "event=layout_generated" in ln]
    assert skipped and "seed=77" in skipped[0]
    assert generated and "seed=77" in generated[0]


def test_configure_logging_writes_file(tmp_path):
    root = logging.getLogger()
    saved_level = root.level
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        _configure_logging(str(tmp_path))
        log_path = _configure_logging(str(tmp_path))
        ours = [h for h in root.handlers if h.get_name() == "cryptgen-file"]
        assert len(ours) == 1
        assert foreign in root.handlers
        logging.getLogger("cryptgen.test").info("hello file")
        ours[0].flush()
        assert log_path == str(tmp_path / "app.log")
        assert "hello file" in (tmp_path / "app.log").read_text()
    finally:
        for h in [h for h in root.handlers if h.get_name() == "cryptgen-file"]:
            root.removeHandler(h)
            h.close()
        root.removeHandler(foreign)
        root.setLevel(saved_level)
