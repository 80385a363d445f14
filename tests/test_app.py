import app
from bot_config import Settings


def test_main_exits_nonzero_without_token(monkeypatch):
    monkeypatch.delenv("DISCORD_TOKEN", raising=False)
    monkeypatch.setattr(app, "load_dotenv", lambda: None)
    monkeypatch.setattr(app, "setup_logging", lambda *a, **k: None)
    ran = []
    monkeypatch.setattr(app, "run_bot", lambda settings: ran.append(settings))

    assert app.main() == 1
    assert ran == []


def test_create_bot_attaches_settings():
    settings = Settings(token="abc")
    bot = app.create_bot(settings)
    assert bot.settings is settings
    assert bot.intents.message_content is True
    assert app.COGS_TO_LOAD == ["cogs.leaderboard"]
