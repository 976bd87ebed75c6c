import pytest

from conftest import FakeSerial

import cli.app as app
from core.frame_reader import FrameReader, FrameReaderConnectionError


class RecordingReader(FrameReader):
    instances = []

    def connect(self, port=None):
        RecordingReader.instances.append(self)
        self.attach(FakeSerial())
        return True


class FailingReader(FrameReader):
    def connect(self, port=None):
        raise FrameReaderConnectionError("Failed to open serial port: No such file or directory")


def stop_immediately(interval):
    raise KeyboardInterrupt


def test_list_ports(monkeypatch, capsys):
    monkeypatch.setattr(FrameReader, "list_ports", staticmethod(lambda: ["/dev/ttyUSB0", "/dev/ttyS0"]))
    assert app.main(["--list-ports"]) == 0
    assert capsys.readouterr().out.split() == ["/dev/ttyUSB0", "/dev/ttyS0"]


def test_base_and_game_required(capsys):
    with pytest.raises(SystemExit) as exc:
        app.main(["--base", "http://localhost:8080"])
    assert exc.value.code == 2
    assert "--base and --game are required" in capsys.readouterr().err


def test_unopenable_port_exits_with_failure(monkeypatch, capsys):
    monkeypatch.setattr(app, "FrameReader", FailingReader)
    assert app.main(["--base", "http://localhost:8080", "--game", "ABC"]) == 1
    assert "Failed to open serial port" in capsys.readouterr().err


def test_bad_card_table_exits_with_failure(tmp_path, capsys):
    path = tmp_path / "cards.json"
    path.write_text("[]")
    assert app.main(["--base", "http://h", "--game", "G", "--cards", str(path)]) == 1
    assert "must be a JSON object" in capsys.readouterr().err


def test_startup_and_shutdown(monkeypatch, capsys):
    RecordingReader.instances = []
    monkeypatch.setattr(app, "FrameReader", RecordingReader)
    monkeypatch.setattr(app, "_keep_alive", stop_immediately)

    code = app.main([
        "--base", "http://localhost:8080",
        "--game", "ABC123",
        "--port", "/dev/ttyUSB5",
        "--baud", "9600",
    ])

    assert code == 0
    reader = RecordingReader.instances[0]
    assert reader.port == "/dev/ttyUSB5"
    assert reader.baud_rate == 9600
    assert not reader.is_connected
    out = capsys.readouterr().out
    assert "Using game -> http://localhost:8080/api/scanner/ABC123/scan" in out
    assert "Shutting down" in out


def test_settings_file_and_overrides(tmp_path):
    from config.settings import Settings

    path = str(tmp_path / "settings.json")
    saved = Settings()
    saved.service.base_url = "http://from-file"
    saved.service.game = "FILE"
    saved.serial.port = "/dev/ttyACM0"
    saved.save_to_file(path)

    args = app.build_parser().parse_args(["--settings", path, "--game", "CLI", "--debug"])
    settings = app.load_settings(args)
    assert settings.service.base_url == "http://from-file"
    assert settings.service.game == "CLI"
    assert settings.serial.port == "/dev/ttyACM0"
    assert settings.log_level == "DEBUG"
