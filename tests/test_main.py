import pytest

main = pytest.importorskip("blackjack_graphical.main")


class Recording_Sounds:
    def __init__(self, calls):
        self.calls = calls

    def play(self, name):
        pass

    def unload(self):
        self.calls.append("unload")


def test_play_tears_down_window_when_loop_fails(tmp_path, monkeypatch):
    calls = []
    for name in ("init_window", "set_target_fps", "set_exit_key", "init_audio_device"):
        monkeypatch.setattr(main, name, lambda *args: None)
    monkeypatch.setattr(main, "close_audio_device", lambda: calls.append("close_audio"))
    monkeypatch.setattr(main, "close_window", lambda: calls.append("close_window"))
    monkeypatch.setattr(main, "Sound_Bank", lambda: Recording_Sounds(calls))

    def broken_run(session):
        raise RuntimeError("frame failed")

    monkeypatch.setattr(main, "run", broken_run)

    with pytest.raises(RuntimeError):
        main.play(stats_file=str(tmp_path / "stats.txt"), seed=None, log_level="WARNING")
    assert calls == ["unload", "close_audio", "close_window"]
