from gathio.defaults import get_default_config
from gathio.services.config_service import merge_config


def test_merge_keeps_defaults_for_missing_sections():
    defaults = get_default_config()
    merged = merge_config(defaults, {})
    assert merged == defaults
    assert "static_pages" not in merged


def test_merge_replaces_database_section_as_a_whole():
    defaults = get_default_config()
    merged = merge_config(defaults, {"database": {"mongodb_url": "mongodb://db:27017/events"}})
    assert merged["database"] == {"mongodb_url": "mongodb://db:27017/events"}
    assert merged["general"] == defaults["general"]


def test_merge_does_not_deep_merge_general():
    merged = merge_config(get_default_config(), {"general": {"domain": "events.example.org"}})
    assert merged["general"] == {"domain": "events.example.org"}
    assert "email" not in merged["general"]


def test_merge_passes_unknown_sections_through():
    merged = merge_config(get_default_config(), {"matrix": {"room": "#gathio"}})
    assert merged["matrix"] == {"room": "#gathio"}


def test_merge_does_not_mutate_inputs():
    defaults = get_default_config()
    parsed = {"general": {"domain": "a.example"}}
    merge_config(defaults, parsed)
    assert defaults["general"]["domain"] == "localhost:3000"
    assert parsed == {"general": {"domain": "a.example"}}


def test_default_config_is_a_fresh_copy():
    first = get_default_config()
    first["general"]["creator_email_addresses"].append("a@b.com")
    assert get_default_config()["general"]["creator_email_addresses"] == []
