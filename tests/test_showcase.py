import gc

import pytest

from latencykit.showcase import (
    Circle,
    Device,
    EventBus,
    FileGuard,
    Rectangle,
    Sensor,
    SmartSensor,
    Subscriber,
    Triangle,
    Wireless,
    header,
    main,
    parse_int,
)


def test_file_guard_writes_and_closes(tmp_path, capsys):
    path = tmp_path / "out.txt"
    with FileGuard.open(path) as guard:
        guard.write("Written safely via RAII\n")
        assert not guard.closed
    assert guard.closed
    assert path.read_text(encoding="utf-8") == "Written safely via RAII\n"
    out = capsys.readouterr().out
    assert f"[RAII] FileGuard acquired: {path}" in out
    assert f"[RAII] FileGuard released: {path}" in out


def test_file_guard_write_after_close(tmp_path):
    guard = FileGuard.open(tmp_path / "x.txt")
    guard.close()
    with pytest.raises(ValueError):
        guard.write("late")


def test_file_guard_open_failure():
    with pytest.raises(OSError, match="Cannot open '/no/such/path/file.txt'"):
        FileGuard.open("/no/such/path/file.txt")


def test_circle_area_uses_source_pi():
    assert Circle(1.0).area() == 3.14159265358979


def test_rectangle_area_symmetry():
    assert Rectangle(4.0, 6.0).area() == Rectangle(6.0, 4.0).area()


def test_triangle_is_half_rectangle():
    assert Triangle(3.0, 8.0).area() * 2 == Rectangle(3.0, 8.0).area()


def test_kinds_format_dimensions():
    assert Circle(2.5).kind() == "Circle(r=2.5)"
    assert Rectangle(4.0, 6.0).kind() == "Rect(4×6)"
    assert Triangle(3.0, 8.5).kind() == "Tri(b=3,h=8.5)"


def test_describe_layout():
    assert Rectangle(4.0, 6.0).describe() == "[vtable]    Rect(4×6)  area =   24.000"


def test_smart_sensor_status_and_single_device():
    sensor = SmartSensor("dev-42", 2400, "temperature")
    device: Device = sensor
    assert device.status() == "[SmartSensor] id=dev-42  freq=2400 MHz  type=temperature"
    assert sum(line.startswith("Device") for line in sensor.trace) == 1
    assert sensor.trace[-1] == "SmartSensor ctor"


def test_wireless_and_sensor_status():
    assert Wireless("w1", 900).status() == "  Device id=w1\n  Wireless freq=900 MHz"
    assert Sensor("s1", "humidity").status() == "  Device id=s1\n  Sensor type=humidity"


@pytest.mark.parametrize("text", ["42", "100", "7"])
def test_parse_int_digits(text):
    assert parse_int(text) == int(text)


def test_parse_int_rejects_non_digit():
    with pytest.raises(ValueError, match="'x' is not a digit in '3x7'"):
        parse_int("3x7")


def test_subscriber_posts_while_bus_alive(capsys):
    bus = EventBus()
    alice = Subscriber("Alice", bus)
    assert alice.try_post("Hello") is True
    assert bus.log == ["Alice: Hello"]
    assert "[EventBus] Alice: Hello" in capsys.readouterr().out


def test_subscriber_does_not_keep_bus_alive(capsys):
    bus = EventBus()
    bob = Subscriber("Bob", bus)
    del bus
    gc.collect()
    assert bob.bus is None
    assert bob.try_post("anyone?") is False
    assert "dropping 'anyone?'" in capsys.readouterr().out


def test_header_lines_align():
    lines = header("title").split("\n")
    assert len(lines) == 3
    assert len({len(line) for line in lines}) == 1
    assert "title" in lines[1]


def test_main_runs_all_sections(tmp_path, capsys):
    out_file = tmp_path / "demo.txt"
    assert main(["--output", str(out_file)]) == 0
    out = capsys.readouterr().out
    assert "✓ All done." in out
    assert "'x' is not a digit in '3x7'" in out
    assert "[handled]" in out
    assert out_file.read_text(encoding="utf-8") == "Written safely via RAII\n"