"""
#### Moduł Config - Konfiguracja Czujników

Zarządzanie konfiguracją czujników robota w plikach INI z wbudowanymi
wartościami domyślnymi.

#### Komponenty:
- `Config`: Klasa bazowa do zarządzania plikami konfiguracyjnymi
- `SensorsConfig`: Konfiguracja kamery Limelight i czujnika navX

#### Przykład użycia:
```python
from twilight_lib.config import SensorsConfig

config = SensorsConfig("sensors.ini")
table_name = config.get_table_name()     # "limelight"
led_mode = config.get_led_mode()         # LEDMode.USE_PIPELINE
navx_port = config.get_navx_port()       # "kMXP_SPI"
```
"""

from .common import Config
from .sensors import SensorsConfig

__all__ = ["Config", "SensorsConfig"]
