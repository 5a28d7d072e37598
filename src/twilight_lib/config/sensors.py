from configparser import ConfigParser

from twilight_lib.io.device.sensor.limelight import CameraMode, LEDMode, StreamMode

from .common import Config

LIMELIGHT_SECTION = "LIMELIGHT"
NAVX_SECTION = "NAVX"


class SensorsConfig(Config):
    """Konfiguracja czujników robota (Limelight i navX).

    Wartości domyślne są wbudowane, plik INI może je nadpisać. Brak pliku
    oznacza pracę na samych wartościach domyślnych.

    Przykład pliku:
        [LIMELIGHT]
        TABLE_NAME = limelight-front
        LED_MODE = OFF

        [NAVX]
        PORT = kUSB1
    """

    def __init__(self, config_file, read_only=True):
        super().__init__(config_file, read_only)
        self.config = ConfigParser()
        self.config.optionxform = str
        self.config.read_dict(
            {
                LIMELIGHT_SECTION: {
                    "TABLE_NAME": "limelight",
                    "LED_MODE": "USE_PIPELINE",
                    "CAMERA_MODE": "VISION_PROCESSING",
                    "STREAM_MODE": "STANDARD",
                    "PIPELINE": "",
                },
                NAVX_SECTION: {
                    "PORT": "kMXP_SPI",
                },
            }
        )
        super().read_from_file()

    def get(self, section, key):
        element = self.config.get(section, key)
        try:
            return int(element)
        except ValueError:
            pass

        try:
            return float(element)
        except ValueError:
            pass

        return element

    def _get_enum(self, section, key, enum_type):
        name = str(self.get(section, key)).strip().upper()
        try:
            return enum_type[name]
        except KeyError:
            raise ValueError(
                f"Unknown {enum_type.__name__} '{name}' in [{section}] {key}"
            ) from None

    def get_table_name(self) -> str:
        return self.config.get(LIMELIGHT_SECTION, "TABLE_NAME")

    def get_led_mode(self):
        return self._get_enum(LIMELIGHT_SECTION, "LED_MODE", LEDMode)

    def get_camera_mode(self):
        return self._get_enum(LIMELIGHT_SECTION, "CAMERA_MODE", CameraMode)

    def get_stream_mode(self):
        return self._get_enum(LIMELIGHT_SECTION, "STREAM_MODE", StreamMode)

    def get_pipeline(self) -> int | None:
        """Zwraca numer pipeline'u lub None, gdy nie został skonfigurowany."""
        value = self.get(LIMELIGHT_SECTION, "PIPELINE")
        if value == "":
            return None
        if not isinstance(value, int):
            raise ValueError(f"Pipeline must be an integer, got '{value}'")
        return value

    def get_navx_port(self) -> str:
        return self.config.get(NAVX_SECTION, "PORT")

    def __del__(self):
        self._dump_all()
