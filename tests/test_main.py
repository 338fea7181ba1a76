"""Tests for the command-line entry point's config handling."""

import main


def test_missing_explicit_config_is_an_error(tmp_path, capsys):
    missing = tmp_path / "nope.yaml"
    assert main.main(["--config", str(missing), "--no-tb"]) == 2
    assert "Cannot read config" in capsys.readouterr().err


def test_invalid_config_exits_with_status_2(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("interaction:\n  arm_padding: '8'\n")
    assert main.main(["--config", str(path), "--no-tb"]) == 2
    assert "Invalid config" in capsys.readouterr().err


def test_missing_default_config_falls_back(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    launched = []

    class FakeVisualizer:
        def __init__(self, controller, cfg):
            launched.append(cfg)

        def run(self, tb_logger=None):
            pass

    import kinematic_pendulum.visualizer as visualizer
    monkeypatch.setattr(visualizer, "PendulumVisualizer", FakeVisualizer)

    assert main.main(["--no-tb"]) == 0
    assert launched[0]["pendulum"]["anchor"] == [150.0, 200.0]
