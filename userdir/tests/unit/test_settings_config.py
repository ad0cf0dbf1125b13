import pytest

from userdir.viewmodels.settings_vm import DEFAULT_API_BASE_URL, SettingsConfig


def test_defaults() -> None:
    cfg = SettingsConfig()
    assert cfg.api_base_url == DEFAULT_API_BASE_URL
    assert cfg.page_size == 8
    assert cfg.retries == 0
    assert not cfg.offline


def test_from_env_reads_prefixed_variables() -> None:
    cfg = SettingsConfig.from_env(
        {
            "USERDIR_PAGE_SIZE": "12",
            "USERDIR_OFFLINE": "yes",
            "USERDIR_API_KEY": "  ",
            "USERDIR_STABLE_ENRICHMENT": "1",
            "UNRELATED": "x",
        }
    )
    assert cfg.page_size == 12
    assert cfg.offline is True
    assert cfg.api_key is None
    assert cfg.stable_enrichment is True


def test_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="Unsupported settings keys: colour"):
        SettingsConfig.from_mapping({"colour": "blue"})


@pytest.mark.parametrize(
    "payload",
    [
        {"page_size": "0"},
        {"page_size": "eight"},
        {"retries": -1},
        {"request_timeout_s": True},
        {"api_base_url": " "},
    ],
)
def test_invalid_values_raise(payload) -> None:
    with pytest.raises(ValueError):
        SettingsConfig.from_mapping(payload)


def test_apply_returns_updated_copy() -> None:
    cfg = SettingsConfig()
    updated = cfg.apply({"offline": True, "users_path": "/people"})
    assert updated is not cfg
    assert updated.users_path == "/people"
    assert updated.offline is True
    assert cfg.apply({}) is cfg
