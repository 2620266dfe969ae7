"""Tests for configuration loading."""

from record_history.config import Config


class TestConfig:
    """Test Config.from_env()."""

    def test_defaults(self):
        config = Config.from_env()

        assert config.speedrun_api_url == "https://www.speedrun.com"
        assert config.game_id == "9d35xw1l"
        assert config.category_id == "ndxjper2"
        assert config.vary == 1692741938
        assert config.request_timeout == 30.0
        assert config.csv_path is None

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SPEEDRUN_GAME_ID", "game")
        monkeypatch.setenv("SPEEDRUN_CATEGORY_ID", "cat")
        monkeypatch.setenv("SPEEDRUN_VARY", "7")
        monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("RECORD_HISTORY_CSV_PATH", "/tmp/runs.csv")

        config = Config.from_env()

        assert config.game_id == "game"
        assert config.category_id == "cat"
        assert config.vary == 7
        assert config.request_timeout == 2.5
        assert config.port == 9000
        assert config.csv_path == "/tmp/runs.csv"

    def test_leaderboard_filter(self):
        leaderboard_filter = Config(game_id="g", category_id="c").leaderboard_filter()

        assert leaderboard_filter.gameId == "g"
        assert leaderboard_filter.categoryId == "c"
        assert leaderboard_filter.obsolete == 1
        assert leaderboard_filter.verified == 1
        assert leaderboard_filter.platformIds == []
