"""
#### Moduł I/O - Czujniki Robota

Cienkie nakładki na urządzenia robota dostępne przez NetworkTables
(kamera Limelight) lub przez sterownik producenta (navX).

#### Komponenty:
- `device`: Funkcje pomocnicze urządzeń
- `device.sensor`: `Limelight` (z enumami `LEDMode`, `CameraMode`, `StreamMode`) i `NavX`

#### Przykład użycia:
```python
from twilight_lib.io.device.sensor import Limelight, LEDMode, navx_imu

limelight = Limelight("limelight")
limelight.set_led_mode(LEDMode.OFF)

navx_imu.zero_yaw()
heading = navx_imu.get_heading()
```
"""

from . import device

__all__ = ["device"]
