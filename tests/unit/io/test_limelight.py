"""Testy jednostkowe kamery Limelight.

Testowane:
- Wartości liczbowe enumów LEDMode, CameraMode, StreamMode
- Tryby startowe zapisywane przy tworzeniu
- Odczyty (tv, tx, ty, ta, ts) i wartość domyślna 0.0 dla brakujących wpisów
- Zapisy trybów, pipeline'u i snapshotu
- Rejestracja komendy domyślnej
- Współpraca z prawdziwą instancją NetworkTables
"""

from unittest.mock import MagicMock

import commands2
import ntcore
import pytest

from twilight_lib.io.device.sensor import CameraMode, LEDMode, Limelight, StreamMode


class FakeTable:
    """Tablica NetworkTables w pamięci."""

    def __init__(self, values=None):
        self.values = dict(values or {})
        self.writes = []

    def getNumber(self, key, default):
        return self.values.get(key, default)

    def putNumber(self, key, value):
        self.writes.append((key, value))
        self.values[key] = value
        return True

    def containsKey(self, key):
        return key in self.values


class FakeInstance:
    def __init__(self, table=None):
        self.table = table if table is not None else FakeTable()
        self.requested = []

    def getTable(self, name):
        self.requested.append(name)
        return self.table


@pytest.fixture(autouse=True)
def scheduler():
    """Świeży globalny CommandScheduler dla każdego testu."""
    commands2.CommandScheduler.resetInstance()
    yield commands2.CommandScheduler.getInstance()
    commands2.CommandScheduler.resetInstance()


@pytest.fixture
def table():
    return FakeTable()


@pytest.fixture
def limelight(table):
    return Limelight("limelight", instance=FakeInstance(table))


class TestModeEnums:
    """Testy kodów liczbowych trybów."""

    def test_led_mode_values(self):
        assert LEDMode.USE_PIPELINE.value == 0
        assert LEDMode.OFF.value == 1
        assert LEDMode.BLINK.value == 2
        assert LEDMode.ON.value == 3

    def test_camera_mode_values(self):
        assert CameraMode.VISION_PROCESSING.value == 0
        assert CameraMode.DRIVER_CAMERA.value == 1

    def test_stream_mode_values(self):
        assert StreamMode.STANDARD.value == 0
        assert StreamMode.PIP_MAIN.value == 1
        assert StreamMode.PIP_SECONDARY.value == 2


class TestLimelightInitialization:
    """Testy tworzenia kamery."""

    def test_binds_to_named_table(self):
        """Sprawdza, że tablica jest pobierana po nazwie."""
        instance = FakeInstance()
        limelight = Limelight("limelight-front", instance=instance)

        assert instance.requested == ["limelight-front"]
        assert limelight.table is instance.table
        assert limelight.device_name == "limelight-front"

    def test_default_modes_written(self, table, limelight):
        """Sprawdza zapis trybów startowych przed innymi wywołaniami."""
        assert table.writes == [("ledMode", 0), ("camMode", 0), ("stream", 0)]

    def test_default_modes_override_previous_contents(self):
        """Poprzednia zawartość tablicy nie wpływa na tryby startowe."""
        table = FakeTable({"ledMode": 3, "camMode": 1, "stream": 2})
        Limelight("limelight", instance=FakeInstance(table))

        assert table.values["ledMode"] == 0
        assert table.values["camMode"] == 0
        assert table.values["stream"] == 0

    def test_custom_startup_modes(self, table):
        Limelight(
            "limelight",
            instance=FakeInstance(table),
            led_mode=LEDMode.OFF,
            camera_mode=CameraMode.DRIVER_CAMERA,
            stream_mode=StreamMode.PIP_MAIN,
        )

        assert table.values["ledMode"] == 1
        assert table.values["camMode"] == 1
        assert table.values["stream"] == 1

    def test_with_message_logger(self, table):
        mock_logger = MagicMock()
        limelight = Limelight(
            "limelight", instance=FakeInstance(table), message_logger=mock_logger
        )

        assert limelight.message_logger is mock_logger
        mock_logger.info.assert_called_once()


class TestLimelightGetters:
    """Testy odczytów."""

    @pytest.mark.parametrize("value, expected", [(1.0, True), (0.0, False)])
    def test_can_see_target(self, table, limelight, value, expected):
        table.values["tv"] = value
        assert limelight.can_see_target() is expected

    def test_can_see_target_absent_entry(self, limelight):
        assert limelight.can_see_target() is False

    def test_can_see_target_only_exactly_one(self, table, limelight):
        table.values["tv"] = 0.5
        assert limelight.can_see_target() is False

    def test_geometry_getters(self, table, limelight):
        table.values.update({"tx": -12.5, "ty": 4.25, "ta": 37.0, "ts": -45.0})

        assert limelight.get_x_offset() == -12.5
        assert limelight.get_y_offset() == 4.25
        assert limelight.get_target_size() == 37.0
        assert limelight.get_target_skew() == -45.0

    def test_absent_entries_read_as_zero(self, limelight):
        assert limelight.get_x_offset() == 0.0
        assert limelight.get_y_offset() == 0.0
        assert limelight.get_target_size() == 0.0
        assert limelight.get_target_skew() == 0.0

    def test_out_of_range_values_pass_through(self, table, limelight):
        table.values["tx"] = 400.0
        assert limelight.get_x_offset() == 400.0

    def test_is_reporting(self, table, limelight):
        assert limelight.is_reporting() is False

        table.values["tv"] = 0.0
        assert limelight.is_reporting() is True

    def test_to_dict(self, table, limelight):
        table.values.update({"tv": 1.0, "tx": 3.0})

        snapshot = limelight.to_dict()

        assert snapshot["name"] == "limelight"
        assert snapshot["reporting"] is True
        assert snapshot["target_visible"] is True
        assert snapshot["x_offset"] == 3.0
        assert snapshot["y_offset"] == 0.0


class TestLimelightSetters:
    """Testy zapisów."""

    @pytest.mark.parametrize("mode", list(LEDMode))
    def test_set_led_mode(self, table, limelight, mode):
        limelight.set_led_mode(mode)
        assert table.values["ledMode"] == mode.value

    @pytest.mark.parametrize("mode", list(CameraMode))
    def test_set_camera_mode(self, table, limelight, mode):
        limelight.set_camera_mode(mode)
        assert table.values["camMode"] == mode.value

    @pytest.mark.parametrize("mode", list(StreamMode))
    def test_set_stream_mode(self, table, limelight, mode):
        limelight.set_stream_mode(mode)
        assert table.values["stream"] == mode.value

    def test_blink_writes_two(self, table, limelight):
        limelight.set_led_mode(LEDMode.BLINK)
        assert table.writes[-1] == ("ledMode", 2)

    def test_set_mode_wrong_type(self, table, limelight):
        """Zły typ trybu nie zmienia tablicy."""
        writes_before = list(table.writes)

        with pytest.raises(TypeError):
            limelight.set_led_mode(CameraMode.DRIVER_CAMERA)
        with pytest.raises(TypeError):
            limelight.set_stream_mode(2)

        assert table.writes == writes_before

    @pytest.mark.parametrize("pipeline", [0, 5, 9, 1_000_000])
    def test_set_pipeline(self, table, limelight, pipeline):
        limelight.set_pipeline(pipeline)
        assert table.values["pipeline"] == pipeline

    def test_take_snapshot(self, table, limelight):
        limelight.take_snapshot()
        assert table.values["snapshot"] == 1

    def test_each_setter_writes_once(self, table, limelight):
        table.writes.clear()

        limelight.set_pipeline(2)
        limelight.take_snapshot()

        assert table.writes == [("pipeline", 2), ("snapshot", 1)]


class TestLimelightDefaultCommand:
    """Testy komendy domyślnej."""

    def test_default_command_property(self, table):
        command = object()
        limelight = Limelight(
            "limelight", default_command=command, instance=FakeInstance(table)
        )

        assert limelight.default_command is command

    def test_register_default_command(self, table):
        command = object()
        scheduler = MagicMock()
        limelight = Limelight(
            "limelight", default_command=command, instance=FakeInstance(table)
        )

        limelight.register_default_command(scheduler)

        scheduler.setDefaultCommand.assert_called_once_with(limelight, command)

    def test_register_without_default_command(self, limelight):
        scheduler = MagicMock()

        limelight.register_default_command(scheduler)

        scheduler.setDefaultCommand.assert_not_called()


class TestLimelightFromConfig:
    """Testy tworzenia z konfiguracji."""

    def test_from_config(self, table):
        config = MagicMock()
        config.get_table_name.return_value = "limelight-rear"
        config.get_led_mode.return_value = LEDMode.ON
        config.get_camera_mode.return_value = CameraMode.VISION_PROCESSING
        config.get_stream_mode.return_value = StreamMode.PIP_SECONDARY
        config.get_pipeline.return_value = 4
        instance = FakeInstance(table)

        limelight = Limelight.from_config(config, instance=instance)

        assert instance.requested == ["limelight-rear"]
        assert limelight.device_name == "limelight-rear"
        assert table.values["ledMode"] == 3
        assert table.values["stream"] == 2
        assert table.values["pipeline"] == 4

    def test_from_config_without_pipeline(self, table):
        config = MagicMock()
        config.get_table_name.return_value = "limelight"
        config.get_led_mode.return_value = LEDMode.USE_PIPELINE
        config.get_camera_mode.return_value = CameraMode.VISION_PROCESSING
        config.get_stream_mode.return_value = StreamMode.STANDARD
        config.get_pipeline.return_value = None

        Limelight.from_config(config, instance=FakeInstance(table))

        assert "pipeline" not in table.values


class TestLimelightNetworkTables:
    """Testy z prawdziwą, lokalną instancją NetworkTables."""

    @pytest.fixture
    def nt_instance(self):
        instance = ntcore.NetworkTableInstance.create()
        yield instance
        ntcore.NetworkTableInstance.destroy(instance)

    def test_startup_modes_read_back(self, nt_instance):
        Limelight("limelight", instance=nt_instance)
        table = nt_instance.getTable("limelight")

        assert table.getNumber("ledMode", -1.0) == 0
        assert table.getNumber("camMode", -1.0) == 0
        assert table.getNumber("stream", -1.0) == 0

    def test_target_readings(self, nt_instance):
        limelight = Limelight("limelight", instance=nt_instance)
        table = nt_instance.getTable("limelight")

        assert limelight.is_reporting() is False
        assert limelight.can_see_target() is False

        table.putNumber("tv", 1)
        table.putNumber("tx", -3.5)

        assert limelight.is_reporting() is True
        assert limelight.can_see_target() is True
        assert limelight.get_x_offset() == -3.5

    def test_pipeline_and_snapshot(self, nt_instance):
        limelight = Limelight("limelight", instance=nt_instance)
        table = nt_instance.getTable("limelight")

        limelight.set_pipeline(5)
        limelight.take_snapshot()

        assert table.getNumber("pipeline", -1.0) == 5
        assert table.getNumber("snapshot", -1.0) == 1

    def test_partitions_are_independent(self, nt_instance):
        front = Limelight("limelight-front", instance=nt_instance)
        rear = Limelight("limelight-rear", instance=nt_instance)

        front.set_led_mode(LEDMode.ON)

        assert nt_instance.getTable("limelight-front").getNumber("ledMode", -1.0) == 3
        assert nt_instance.getTable("limelight-rear").getNumber("ledMode", -1.0) == 0
        assert rear.get_x_offset() == 0.0


class TestLimelightCommandScheduler:
    """Testy współpracy z prawdziwym commands2.CommandScheduler."""

    def test_is_subsystem(self, limelight):
        assert isinstance(limelight, commands2.Subsystem)

    def test_default_command_runs(self, table, scheduler):
        """Komenda domyślna wymagająca kamery jest uruchamiana przez scheduler."""
        calls = []
        limelight = Limelight("limelight", instance=FakeInstance(table))
        command = commands2.RunCommand(
            lambda: calls.append(limelight.get_x_offset()), limelight
        ).ignoringDisable(True)
        limelight._initial_default_command = command

        limelight.register_default_command(scheduler)
        scheduler.run()
        scheduler.run()

        assert scheduler.getDefaultCommand(limelight) is command
        assert scheduler.isScheduled(command)
        assert calls == [0.0]

    def test_run_without_default_command(self, table, scheduler):
        """Scheduler wywołuje periodic() kamery bez komendy domyślnej."""
        limelight = Limelight("limelight", instance=FakeInstance(table))

        scheduler.run()

        assert scheduler.getDefaultCommand(limelight) is None

    def test_init_default_command(self, table, scheduler):
        limelight = Limelight("limelight", instance=FakeInstance(table))
        command = commands2.RunCommand(lambda: None, limelight)
        limelight._initial_default_command = command

        limelight.init_default_command()

        assert scheduler.getDefaultCommand(limelight) is command
