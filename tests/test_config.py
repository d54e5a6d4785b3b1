import json

import pytest
from pydantic import ValidationError

from f4jumble.config import Settings, load_settings, with_overrides
from f4jumble.utils.repro import make_run_dir, write_json, write_text


@pytest.fixture
def fresh_settings():
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def test_defaults(fresh_settings, monkeypatch):
    for name in (
        "GLOBAL_SEED",
        "F4JUMBLE_ROUNDTRIP_VECTORS",
        "F4JUMBLE_AVALANCHE_TRIALS",
        "F4JUMBLE_MAX_SAMPLE_LEN",
        "F4JUMBLE_LOG_LEVEL",
        "F4JUMBLE_RUNS_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("f4jumble.config.load_dotenv", lambda: False)

    s = load_settings()
    assert s.global_seed == 1337
    assert s.roundtrip_vectors == 200
    assert s.log_level == "INFO"


def test_env_overrides(fresh_settings, monkeypatch):
    monkeypatch.setattr("f4jumble.config.load_dotenv", lambda: False)
    monkeypatch.setenv("GLOBAL_SEED", "7")
    monkeypatch.setenv("F4JUMBLE_AVALANCHE_TRIALS", "12")
    monkeypatch.setenv("F4JUMBLE_LOG_LEVEL", "debug")

    s = load_settings()
    assert s.global_seed == 7
    assert s.avalanche_trials == 12
    assert s.log_level == "DEBUG"


def test_sample_len_bounded():
    with pytest.raises(ValidationError):
        Settings(max_sample_len=10)


def test_run_dir_and_json(tmp_path):
    paths = make_run_dir(tmp_path, "my run!")
    assert paths.run_dir.exists()
    assert paths.run_dir.name.endswith("my_run_")
    write_json(paths.report_json, {"b": 1, "a": [1, 2]})
    assert json.loads(paths.report_json.read_text(encoding="utf-8")) == {"a": [1, 2], "b": 1}
    write_text(paths.summary_txt, "ok\n")
    assert paths.summary_txt.read_text(encoding="utf-8") == "ok\n"


def test_with_overrides_applies_values():
    s = with_overrides(Settings(), max_sample_len=500, global_seed=3)
    assert s.max_sample_len == 500
    assert s.global_seed == 3
    assert s.roundtrip_vectors == 200


@pytest.mark.parametrize("max_len", [10, 5_000_000])
def test_with_overrides_validates_bounds(max_len):
    with pytest.raises(ValidationError):
        with_overrides(Settings(), max_sample_len=max_len)


def test_settings_fields():
    assert set(Settings.model_fields) == {
        "global_seed",
        "roundtrip_vectors",
        "avalanche_trials",
        "max_sample_len",
        "log_level",
        "runs_dir",
    }
