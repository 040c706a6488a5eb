from undercover import config


def test_read_env_file_accepts_both_separators(tmp_path):
    env = tmp_path / ".env"
    env.write_text(
        "# judge settings\n"
        "OPENAI_API_KEY=\"sk-one\"\n"
        "UNDERCOVER_JUDGE_API_KEY: sk-two\n"
        "\n"
        "not a pair\n"
        "URL=https://judge.test/v1\n",
        encoding="utf-8",
    )

    values = config._read_env_file(env)

    assert values == {
        "OPENAI_API_KEY": "sk-one",
        "UNDERCOVER_JUDGE_API_KEY": "sk-two",
        "URL": "https://judge.test/v1",
    }


def test_judge_key_prefers_environment(monkeypatch):
    monkeypatch.setenv("UNDERCOVER_JUDGE_API_KEY", " sk-env ")
    assert config._load_judge_api_key() == "sk-env"


def test_seed_from_environment(monkeypatch):
    monkeypatch.setenv("UNDERCOVER_SEED", "42")
    assert config._load_seed() == 42

    monkeypatch.setenv("UNDERCOVER_SEED", "-7")
    assert config._load_seed() == -7

    monkeypatch.setenv("UNDERCOVER_SEED", "abc")
    assert config._load_seed() is None

    monkeypatch.delenv("UNDERCOVER_SEED")
    assert config._load_seed() is None


def test_game_rules():
    assert config.GAME_CONFIG["min_players"] == 3
    assert config.GAME_CONFIG["mr_white_guess_seconds"] == 30
