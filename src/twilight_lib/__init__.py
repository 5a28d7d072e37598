"""
Twilight Lib
===================================================

Biblioteka czujników robota FRC: kamera wizyjna Limelight publikująca dane
w NetworkTables oraz procesor ruchu navX.

## Moduły

#### config - Zarządzanie Konfiguracją
Konfiguracja czujników w plikach INI z wbudowanymi wartościami domyślnymi.
- `Config`: Bazowa klasa konfiguracji z obsługą odczytu/zapisu
- `SensorsConfig`: Nazwa tablicy i tryby startowe Limelighta, port navX

#### io - Czujniki
- `Limelight`: Odczyty celu (tv, tx, ty, ta, ts) i tryby pracy kamery
- `NavX`: Kurs, prędkość kątowa, przyspieszenia i zerowanie kursu

#### util - Narzędzia Pomocnicze
- `logger`: `MessageLogger` i funkcje `debug`/`info`/`warning`/`error`
"""
