"""Procesor ruchu navX dostępny jako statyczny "podsystem".

Jeden obiekt sterownika `navx.AHRS` na proces, tworzony leniwie przy
pierwszym użyciu. Funkcje modułowe (`get_heading()`, `zero_yaw()`, ...)
odwołują się do tej jednej instancji. Ten sam interfejs jest dostępny jako
metody `NavX`, gdy wygodniej przekazać jawny uchwyt.

Brak blokad: wywołanie `set_port()` równolegle z odczytem z innego wątku nie
jest obsługiwane.

Dokumentacja sterownika: https://pdocs.kauailabs.com/navx-mxp/software/roborio-libraries/
"""

from twilight_lib.util.logger import MessageLogger, info, warning

DEFAULT_PORT = "kMXP_SPI"


def create_ahrs(port):
    """Tworzy sterownik `navx.AHRS` dla podanego portu.

    Args:
        port: `navx.AHRS.NavXComType` lub nazwa typu jako string (np. "kUSB1").

    Raises:
        ValueError: Gdy nazwa portu nie istnieje w `NavXComType`.
    """
    import navx

    if isinstance(port, str):
        try:
            port = getattr(navx.AHRS.NavXComType, port)
        except AttributeError:
            raise ValueError(f"Unknown navX port '{port}'") from None
    return navx.AHRS(port)


class NavX:
    """Uchwyt do czujnika navX.

    Args:
        port: Port komunikacyjny czujnika (domyślnie MXP SPI na roboRIO).
        driver_factory: Funkcja `port -> sterownik` (domyślnie `create_ahrs`).
        message_logger (MessageLogger | None): Logger wiadomości.
    """

    _instance: "NavX | None" = None
    _default_port = DEFAULT_PORT
    _default_driver_factory = staticmethod(create_ahrs)
    _default_message_logger: MessageLogger | None = None

    def __init__(
        self,
        port=DEFAULT_PORT,
        driver_factory=create_ahrs,
        message_logger: MessageLogger | None = None,
    ):
        self.message_logger: MessageLogger | None = message_logger
        self._driver_factory = driver_factory
        self._port = port
        self._driver = driver_factory(port)
        info(f"navX bound to port {port}", message_logger=self.message_logger)

    # Singleton

    @classmethod
    def get_instance(cls) -> "NavX":
        """Zwraca jedyną instancję, tworząc ją przy pierwszym wywołaniu."""
        if cls._instance is None:
            cls._instance = cls(
                port=cls._default_port,
                driver_factory=cls._default_driver_factory,
                message_logger=cls._default_message_logger,
            )
        return cls._instance

    @classmethod
    def configure(
        cls,
        port=None,
        driver_factory=None,
        message_logger: MessageLogger | None = None,
    ):
        """Ustawia parametry kolejnego utworzenia instancji.

        Nie zmienia już istniejącej instancji; wywołaj `reset_instance()` lub
        `set_port()`, aby zmiana zadziałała od razu.
        """
        if port is not None:
            cls._default_port = port
        if driver_factory is not None:
            cls._default_driver_factory = staticmethod(driver_factory)
        if message_logger is not None:
            cls._default_message_logger = message_logger

    @classmethod
    def configure_from(cls, config, message_logger: MessageLogger | None = None):
        """Ustawia port kolejnej instancji z sekcji NAVX `SensorsConfig`."""
        cls.configure(port=config.get_navx_port(), message_logger=message_logger)

    @classmethod
    def reset_instance(cls):
        """Usuwa instancję; następne użycie utworzy nową."""
        cls._instance = None

    # Port

    def set_port(self, port):
        """Zastępuje sterownik nowym, podłączonym do `port`."""
        self._driver = self._driver_factory(port)
        self._port = port
        info(f"navX rebound to port {port}", message_logger=self.message_logger)

    def get_port(self):
        return self._port

    @property
    def driver(self):
        return self._driver

    # Odczyty

    def get_heading(self) -> float:
        """Aktualny kurs (yaw). Zakres: (-180, 180) stopni."""
        return self._driver.getYaw()

    def get_heading_rate(self) -> float:
        """Prędkość zmiany kursu w stopniach/s."""
        return self._driver.getRate()

    def get_accumulated_angle(self) -> float:
        """Całkowity skumulowany kąt w stopniach, bez zakresu (liczy pełne obroty)."""
        return self._driver.getAngle()

    def get_x_accel(self) -> float:
        """Przyspieszenie liniowe w osi X (przód-tył) w g, układ świata."""
        return self._driver.getWorldLinearAccelX()

    def get_y_accel(self) -> float:
        """Przyspieszenie liniowe w osi Y (lewo-prawo) w g, układ świata."""
        return self._driver.getWorldLinearAccelY()

    def get_z_accel(self) -> float:
        """Przyspieszenie liniowe w osi Z (góra-dół) w g, układ świata."""
        return self._driver.getWorldLinearAccelZ()

    def is_connected(self) -> bool:
        return self._driver.isConnected()

    def is_calibrating(self) -> bool:
        return self._driver.isCalibrating()

    # Zerowanie

    def zero_yaw(self):
        """Programowo zeruje kurs.

        Kolejne odczyty kursu są liczone względem aktualnej orientacji. Nie
        przerywa próbkowania, bezpieczne w trakcie ruchu.
        """
        self._driver.zeroYaw()

    def recalibrate_yaw(self):
        """Pełna rekalibracja czujnika kursu.

        Powoduje przerwę w odczytach na czas rekalibracji. Używać przed lub po
        ruchu, nigdy w trakcie.
        """
        warning(
            "navX yaw recalibration requested, readings pause until it completes",
            message_logger=self.message_logger,
        )
        self._driver.reset()

    def to_dict(self) -> dict:
        """Zwraca słownik z aktualnymi odczytami czujnika."""
        return {
            "port": str(self._port),
            "heading": self.get_heading(),
            "heading_rate": self.get_heading_rate(),
            "accumulated_angle": self.get_accumulated_angle(),
            "x_accel": self.get_x_accel(),
            "y_accel": self.get_y_accel(),
            "z_accel": self.get_z_accel(),
        }


def set_port(port):
    NavX.get_instance().set_port(port)


def get_heading() -> float:
    return NavX.get_instance().get_heading()


def get_heading_rate() -> float:
    return NavX.get_instance().get_heading_rate()


def get_accumulated_angle() -> float:
    return NavX.get_instance().get_accumulated_angle()


def get_x_accel() -> float:
    return NavX.get_instance().get_x_accel()


def get_y_accel() -> float:
    return NavX.get_instance().get_y_accel()


def get_z_accel() -> float:
    return NavX.get_instance().get_z_accel()


def zero_yaw():
    NavX.get_instance().zero_yaw()


def recalibrate_yaw():
    NavX.get_instance().recalibrate_yaw()
