from pathlib import Path

import pytest

from realtime_detector.config import Config, load_config, save_example_config


def test_defaults_when_no_path() -> None:
    config = load_config(None)
    assert config.network.backend == "opencv"
    assert config.network.target == "cpu"
    assert config.display.window_title == "Real-Time Object Detection"
    assert config.logging.level == "INFO"


def test_missing_file_falls_back_to_defaults(tmp_path: Path) -> None:
    assert load_config(str(tmp_path / "absent.yaml")) == Config()


def test_empty_file_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(str(path)) == Config()


def test_overrides_are_loaded(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "network:\n  target: opencl\n"
        "logging:\n  level: debug\n"
    )
    config = load_config(str(path))
    assert config.network.target == "opencl"
    assert config.logging.level == "DEBUG"


@pytest.mark.parametrize("body", [
    "logging:\n  level: LOUD\n",
    "network:\n  backend: tensorrt\n",
    "network: [unclosed\n",
])
def test_invalid_config_raises(tmp_path: Path, body: str) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(body)
    with pytest.raises(RuntimeError, match="Failed to load configuration"):
        load_config(str(path))


def test_example_config_is_loadable(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.yaml"
    save_example_config(str(path))
    assert load_config(str(path)) == Config()


def test_camera_and_exit_key_are_not_configurable(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "camera:\n  index: 3\n"
        "display:\n  exit_key: 113\n  wait_ms: 500\n"
    )
    config = load_config(str(path))
    assert not hasattr(config, "camera")
    assert not hasattr(config.display, "exit_key")
    assert not hasattr(config.display, "wait_ms")
