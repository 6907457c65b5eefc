# -*- coding: utf-8 -*-
import json
import logging

import pytest
from objmesh.utils import Config, DEFAULT_CONFIG, Profiler, set_level, logger
from objmesh.loader import ObjLoader, VertexLayout


def test_missing_config_is_created(tmp_path):
    path = tmp_path / "objmesh.json"
    cfg = Config(path)
    assert path.is_file()
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG
    assert cfg["loader"]["layout"] == "inlined"


def test_defaults_are_not_shared(tmp_path):
    cfg = Config(tmp_path / "a.json")
    cfg.data["loader"]["layout"] = "segmented"
    assert DEFAULT_CONFIG["loader"]["layout"] == "inlined"


def test_loader_from_config(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text(json.dumps({"loader": {"layout": "segmented", "load_color_data": True}}),
                    encoding="utf-8")
    loader = ObjLoader.from_config(Config(path))
    assert loader.layout is VertexLayout.SEGMENTED
    assert loader.load_color_data is True
    assert loader.validate_indices is True


def test_broken_config_falls_back_to_defaults(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text("{not json", encoding="utf-8")
    cfg = Config(path)
    assert cfg.data == DEFAULT_CONFIG
    # файл перезаписан корректным JSON
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG


def test_invalid_layout_in_config(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text(json.dumps({"loader": {"layout": "zigzag"}}), encoding="utf-8")
    with pytest.raises(ValueError):
        Config(path).loader_options()


def test_non_boolean_flag_in_config(tmp_path):
    path = tmp_path / "objmesh.json"
    path.write_text(json.dumps({"loader": {"load_color_data": "yes"}}), encoding="utf-8")
    with pytest.raises(ValueError):
        Config(path).loader_options()


def test_setitem_persists(tmp_path):
    path = tmp_path / "objmesh.json"
    cfg = Config(path)
    cfg["log_level"] = "DEBUG"
    assert Config(path)["log_level"] == "DEBUG"


def test_set_level_by_name():
    old = logger.level
    try:
        set_level("debug")
        assert logger.level == logging.DEBUG
        with pytest.raises(ValueError):
            set_level("chatty")
    finally:
        logger.setLevel(old)


def test_profiler_logs_elapsed(caplog):
    with caplog.at_level(logging.DEBUG, logger="objmesh"):
        with Profiler("block") as prof:
            pass
    assert prof.elapsed_ms >= 0.0
    assert "[Profiler] block: done" in caplog.text
