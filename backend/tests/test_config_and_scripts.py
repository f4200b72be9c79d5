import importlib.util
import json
from pathlib import Path

import pytest

from daemon_registry import services
from daemon_registry.config import Settings


SCRIPT = Path(__file__).resolve().parents[1] / 'scripts' / 'seed_daemons.py'


def _load_seed_script():
    spec = importlib.util.spec_from_file_location('seed_daemons', SCRIPT)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_settings_defaults(monkeypatch):
    for var in ('ENV', 'LOG_LEVEL', 'ALLOW_DEV_CORS', 'HOST', 'PORT'):
        monkeypatch.delenv(var, raising=False)
    s = Settings()
    assert s.ENV == 'dev'
    assert s.PORT == 8080
    assert s.LOG_LEVEL == 'INFO'
    assert s.ALLOW_DEV_CORS is True


def test_settings_rejects_bad_port(monkeypatch):
    monkeypatch.setenv('PORT', '70000')
    with pytest.raises(RuntimeError):
        Settings()


def test_settings_rejects_dev_cors_outside_dev(monkeypatch):
    monkeypatch.setenv('ENV', 'prod')
    monkeypatch.setenv('ALLOW_DEV_CORS', 'true')
    with pytest.raises(RuntimeError):
        Settings()
    monkeypatch.setenv('ALLOW_DEV_CORS', 'false')
    assert Settings().ENV == 'prod'


def test_settings_rejects_empty_database_url(monkeypatch):
    monkeypatch.setenv('DATABASE_URL', '  ')
    with pytest.raises(RuntimeError):
        Settings()


def test_seed_script_defaults_then_noop():
    mod = _load_seed_script()
    assert mod.main() == len(services.DEFAULT_DAEMONS)
    assert mod.main() == 0


def test_seed_script_from_file(tmp_path):
    f = tmp_path / 'daemons.json'
    f.write_text(json.dumps([{'name': 'cupsd', 'port': 631, 'description': 'print server'}]), encoding='utf-8')
    mod = _load_seed_script()
    assert mod.main(file=str(f)) == 1
    assert mod.main(file=str(tmp_path / 'missing.json')) == 0


def test_seed_script_rejects_non_array(tmp_path):
    f = tmp_path / 'daemons.json'
    f.write_text('{"name": "x"}', encoding='utf-8')
    mod = _load_seed_script()
    with pytest.raises(ValueError):
        mod.main(file=str(f))


def test_settings_rejects_non_numeric_port(monkeypatch):
    monkeypatch.setenv('PORT', 'http')
    with pytest.raises(RuntimeError):
        Settings()


def test_seed_script_rejects_non_object_element(tmp_path):
    f = tmp_path / 'daemons.json'
    f.write_text('["sshd"]', encoding='utf-8')
    mod = _load_seed_script()
    with pytest.raises(ValueError):
        mod.main(file=str(f))
