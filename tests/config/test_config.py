from config.config import ApiConfig, AppConfig, AssistantConfig


def test_api_config_defaults():
    config = ApiConfig()
    assert config.title == "MarginIQ API"
    assert config.version == "1.0.0"
    assert config.cors_origins == ["*"]
    assert config.default_page_limit == 50


def test_api_config_default_factory():
    """Each instance gets its own CORS origin list."""
    config1 = ApiConfig()
    config2 = ApiConfig()
    config1.cors_origins.append("http://localhost:5173")
    assert config2.cors_origins == ["*"]


def test_assistant_config_defaults():
    config = AssistantConfig()
    assert config.model == "gpt-4o-mini"
    assert config.api_key is None
    assert config.temperature == 0.3
    assert config.retry_attempts == 3
    assert config.max_history == 200
    assert config.top_loss_count == 10
    assert config.llm_enabled is False


def test_assistant_llm_enabled_requires_real_key():
    assert AssistantConfig(api_key="sk-live").llm_enabled is True
    assert AssistantConfig(api_key="").llm_enabled is False
    assert AssistantConfig(api_key="YOUR_API_KEY_HERE").llm_enabled is False


def test_app_config_from_env(monkeypatch):
    monkeypatch.setenv("MARGINIQ_API_TITLE", "Margins")
    monkeypatch.setenv("MARGINIQ_CORS_ORIGINS", "http://a.test, http://b.test ,")
    monkeypatch.setenv("MARGINIQ_PAGE_LIMIT", "25")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("MARGINIQ_MODEL", "gpt-4o")
    monkeypatch.setenv("MARGINIQ_TEMPERATURE", "0.7")
    monkeypatch.setenv("MARGINIQ_MAX_HISTORY", "20")

    config = AppConfig.from_env()

    assert config.api.title == "Margins"
    assert config.api.cors_origins == ["http://a.test", "http://b.test"]
    assert config.api.default_page_limit == 25
    assert config.assistant.api_key == "sk-env"
    assert config.assistant.model == "gpt-4o"
    assert config.assistant.temperature == 0.7
    assert config.assistant.max_history == 20
    assert config.assistant.llm_enabled is True


def test_from_env_ignores_malformed_numbers(monkeypatch):
    monkeypatch.setenv("MARGINIQ_PAGE_LIMIT", "lots")
    monkeypatch.setenv("MARGINIQ_TEMPERATURE", "warm")
    monkeypatch.setenv("MARGINIQ_RETRY_ATTEMPTS", "")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    config = AppConfig.from_env()

    assert config.api.default_page_limit == 50
    assert config.assistant.temperature == 0.3
    assert config.assistant.retry_attempts == 3
    assert config.assistant.api_key is None
