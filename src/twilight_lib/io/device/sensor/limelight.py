"""Kamera wizyjna Limelight obsługiwana przez NetworkTables.

Limelight publikuje wyniki przetwarzania obrazu w swojej tablicy
NetworkTables i odczytuje z niej tryby pracy. Ta klasa jedynie tłumaczy
wywołania metod na odczyty/zapisy wpisów tej tablicy.

Dokumentacja wpisów: http://docs.limelightvision.io/en/latest/
"""

from enum import Enum

import commands2
import ntcore

from twilight_lib.io.device import check_table_connection
from twilight_lib.util.logger import MessageLogger, debug, info


class LEDMode(Enum):
    """Tryby diod LED Limelighta."""

    USE_PIPELINE = 0
    OFF = 1
    BLINK = 2
    ON = 3


class CameraMode(Enum):
    """Tryby pracy kamery: przetwarzanie obrazu lub kamera kierowcy."""

    VISION_PROCESSING = 0
    DRIVER_CAMERA = 1


class StreamMode(Enum):
    """Tryby strumienia wideo. PIP - obraz w obrazie (picture in picture)."""

    STANDARD = 0
    PIP_MAIN = 1
    PIP_SECONDARY = 2


class Limelight(commands2.Subsystem):
    """Kamera Limelight (przetwarzanie obrazu lub szerokokątna kamera kierowcy).

    Przy tworzeniu ustawia tryby LED, kamery i strumienia na wartości
    domyślne, niezależnie od poprzedniej zawartości tablicy. Nieobecne wpisy
    są odczytywane jako 0.0.

    Args:
        device_name (str): Nazwa tablicy NetworkTables kamery (ustawiana na
            stronie konfiguracyjnej Limelighta, pozwala na kilka kamer).
        default_command: Komenda uruchamiana, gdy żadna inna nie używa kamery.
        instance (ntcore.NetworkTableInstance | None): Instancja NetworkTables,
            domyślnie `NetworkTableInstance.getDefault()`.
        message_logger (MessageLogger | None): Logger wiadomości.

    Przykład:
        >>> limelight = Limelight("limelight")
        >>> if limelight.can_see_target():
        ...     turn = limelight.get_x_offset()
    """

    def __init__(
        self,
        device_name: str,
        default_command=None,
        instance: ntcore.NetworkTableInstance | None = None,
        message_logger: MessageLogger | None = None,
        led_mode: LEDMode = LEDMode.USE_PIPELINE,
        camera_mode: CameraMode = CameraMode.VISION_PROCESSING,
        stream_mode: StreamMode = StreamMode.STANDARD,
    ):
        super().__init__()
        self.device_name = device_name
        self.message_logger: MessageLogger | None = message_logger
        if instance is None:
            instance = ntcore.NetworkTableInstance.getDefault()
        self.table: ntcore.NetworkTable = instance.getTable(device_name)
        self._initial_default_command = default_command

        self.set_led_mode(led_mode)
        self.set_camera_mode(camera_mode)
        self.set_stream_mode(stream_mode)
        info(
            f"{self.device_name} Limelight initialized (led={led_mode.name}, "
            f"camera={camera_mode.name}, stream={stream_mode.name})",
            message_logger=self.message_logger,
        )

    @classmethod
    def from_config(
        cls,
        config,
        default_command=None,
        instance: ntcore.NetworkTableInstance | None = None,
        message_logger: MessageLogger | None = None,
    ) -> "Limelight":
        """Tworzy kamerę na podstawie sekcji LIMELIGHT z `SensorsConfig`."""
        limelight = cls(
            config.get_table_name(),
            default_command=default_command,
            instance=instance,
            message_logger=message_logger,
            led_mode=config.get_led_mode(),
            camera_mode=config.get_camera_mode(),
            stream_mode=config.get_stream_mode(),
        )
        pipeline = config.get_pipeline()
        if pipeline is not None:
            limelight.set_pipeline(pipeline)
        return limelight

    def _get_entry_value(self, key: str) -> float:
        return self.table.getNumber(key, 0.0)

    def _set_entry(self, key: str, value: int):
        self.table.putNumber(key, value)

    def _set_mode(self, key: str, mode, mode_type: type[Enum]):
        if not isinstance(mode, mode_type):
            raise TypeError(
                f"{self.device_name} expected {mode_type.__name__}, got {type(mode).__name__}"
            )
        self._set_entry(key, mode.value)
        debug(
            f"{self.device_name} {key} set to {mode.name}",
            message_logger=self.message_logger,
        )

    # Odczyty

    def can_see_target(self) -> bool:
        """Czy kamera widzi cel ("tv": 0 - nie widzi, 1 - widzi)."""
        return self._get_entry_value("tv") == 1

    def get_x_offset(self) -> float:
        """Kąt poziomy od środka kadru do środka celu. Zakres: (-27, 27) stopni."""
        return self._get_entry_value("tx")

    def get_y_offset(self) -> float:
        """Kąt pionowy od środka kadru do środka celu. Zakres: (-20.5, 20.5) stopni."""
        return self._get_entry_value("ty")

    def get_target_size(self) -> float:
        """Procent obrazu zajmowany przez cel. Zakres: (0, 100) %."""
        return self._get_entry_value("ta")

    def get_target_skew(self) -> float:
        """Obrót celu w płaszczyźnie XY. Zakres: (-90, 0) stopni.

        Zakres z dokumentacji wydaje się niedokładny.
        """
        return self._get_entry_value("ts")

    def is_reporting(self) -> bool:
        """Czy kamera opublikowała wpis "tv".

        Pozwala odróżnić brak danych od rzeczywistego odczytu 0.0.
        """
        return check_table_connection(
            self.device_name, self.table, "tv", message_logger=self.message_logger
        )

    # Zapisy

    def set_camera_mode(self, camera_mode: CameraMode):
        self._set_mode("camMode", camera_mode, CameraMode)

    def set_led_mode(self, led_mode: LEDMode):
        self._set_mode("ledMode", led_mode, LEDMode)

    def set_stream_mode(self, stream_mode: StreamMode):
        self._set_mode("stream", stream_mode, StreamMode)

    def set_pipeline(self, pipeline: int):
        """Ustawia aktywny pipeline (ID ze strony konfiguracyjnej Limelighta)."""
        self._set_entry("pipeline", pipeline)
        debug(
            f"{self.device_name} pipeline set to {pipeline}",
            message_logger=self.message_logger,
        )

    def take_snapshot(self):
        """Zapisuje zrzut aktualnego obrazu, celu i danych na kamerze."""
        self._set_entry("snapshot", 1)

    # Komenda domyślna

    @property
    def default_command(self):
        return self._initial_default_command

    def init_default_command(self):
        """Ustawia komendę domyślną w globalnym `CommandScheduler`."""
        self.register_default_command(commands2.CommandScheduler.getInstance())

    def register_default_command(self, scheduler):
        """Rejestruje komendę domyślną w harmonogramie komend.

        Args:
            scheduler: Obiekt z metodą `setDefaultCommand(subsystem, command)`,
                np. `commands2.CommandScheduler.getInstance()`.
        """
        if self._initial_default_command is None:
            return
        scheduler.setDefaultCommand(self, self._initial_default_command)
        info(
            f"{self.device_name} Default command registered",
            message_logger=self.message_logger,
        )

    def to_dict(self) -> dict:
        """Zwraca słownik z aktualnymi odczytami kamery."""
        return {
            "name": self.device_name,
            "reporting": self.is_reporting(),
            "target_visible": self.can_see_target(),
            "x_offset": self.get_x_offset(),
            "y_offset": self.get_y_offset(),
            "target_size": self.get_target_size(),
            "target_skew": self.get_target_skew(),
        }

    def __str__(self) -> str:
        return f"Limelight(name='{self.device_name}')"
