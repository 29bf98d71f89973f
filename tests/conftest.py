import sys
from pathlib import Path
import pytest

# Add project root to sys.path
# This ensures that 'gathio' is importable as a top-level module during tests
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def write_config(tmp_path):
    """Write `config/config.toml` under tmp_path and return a service reading it."""
    from gathio.services.config_service import ConfigService

    def _write(text: str):
        config_dir = tmp_path / "config"
        config_dir.mkdir(exist_ok=True)
        config_file = config_dir / "config.toml"
        config_file.write_text(text, encoding="utf-8")
        return ConfigService(config_path=config_file)

    return _write


@pytest.fixture
def exit_calls(monkeypatch):
    """Record fatal exits instead of reporting them to stderr."""
    calls = []

    def _fake_exit(message, exit_code=1):
        calls.append(message)
        raise SystemExit(exit_code)

    monkeypatch.setattr("gathio.services.config_service.exit_with_error", _fake_exit)
    return calls
