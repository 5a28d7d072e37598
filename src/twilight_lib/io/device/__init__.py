"""Moduł urządzeń: funkcje pomocnicze i podmoduł `sensor`.

Zawiera narzędzie do sprawdzania, czy urządzenie publikuje dane w tablicy
NetworkTables, oraz eksportuje pakiet z definicjami czujników.
"""

from twilight_lib.util.logger import debug


def check_table_connection(device_name: str, table, key: str, message_logger=None):
    """Sprawdza, czy urządzenie opublikowało wpis w swojej tablicy.

    Brak wpisu oznacza, że urządzenie jeszcze nie raportuje (lub jest
    odłączone). Wartość wpisu nie jest sprawdzana.

    Args:
        device_name (str): Nazwa urządzenia do logowania.
        table: Tablica NetworkTables z metodą `containsKey`.
        key (str): Klucz wpisu publikowanego przez urządzenie.
        message_logger: Logger do zapisu komunikatów.

    Returns:
        bool: True jeśli wpis istnieje; w przeciwnym razie False.
    """
    connected = bool(table.containsKey(key))
    if not connected:
        debug(
            f"{device_name} No '{key}' entry published yet",
            message_logger=message_logger,
        )
    return connected


from . import sensor

__all__ = [
    "check_table_connection",
    "sensor",
]
