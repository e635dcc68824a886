import json
import pytest
from verlet_cloth.config import ClothConfig
from verlet_cloth.io.json_io import (
    config_from_json,
    config_to_json,
    load_config,
    load_config_raw,
    save_config,
)


def test_defaults():
    """Stock cloth: 10x10, spacing 20, one pass, gravity 98.2 px/s² down."""
    c = ClothConfig()
    assert (c.rows, c.cols) == (10, 10)
    assert c.num_particles == 100
    assert c.rest_length == 20.0
    assert c.iterations == 1
    assert c.intersect_threshold == c.particle_radius + 3.0
    assert c.gravity == pytest.approx((0.0, 98.2, 0.0))
    assert c.dt == pytest.approx(1 / 60, rel=1e-5)
    assert config_from_json({}) == c
    assert config_to_json(c) == {}


def test_save_load_round_trip(tmp_path):
    config = ClothConfig(rows=4, cols=7, iterations=5, gravity=(0, 50, 0),
                         damping=0.01, pins="none", seed=42, window=(1024, 768))
    path = tmp_path / "cloth.json"

    save_config(config, str(path))
    raw = load_config_raw(str(path))
    loaded = load_config(str(path))

    assert raw["rows"] == 4
    assert raw["gravity"] == [0.0, 50.0, 0.0]
    assert "dt" not in raw
    assert loaded == config


def test_rejects_bad_configs():
    with pytest.raises(ValueError, match="Unknown config key"):
        config_from_json({"rows": 3, "colums": 4})
    with pytest.raises(ValueError):
        config_from_json([1, 2, 3])
    with pytest.raises(ValueError):
        config_from_json({"rows": 0})
    with pytest.raises(ValueError):
        config_from_json({"gravity": [0, 9.8]})
    with pytest.raises(ValueError):
        config_from_json({"pins": "corners"})
    with pytest.raises(ValueError):
        config_from_json({"iterations": 0})
    with pytest.raises(ValueError):
        config_from_json({"damping": -0.1})
    for key, bad in (("iterations", 2.5), ("rows", 2.5), ("cols", "4"), ("rows", True)):
        with pytest.raises(ValueError, match="integer"):
            config_from_json({key: bad})


def test_load_errors_propagate(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"))

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_config(str(bad))
