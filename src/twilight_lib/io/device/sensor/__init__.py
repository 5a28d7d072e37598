from . import navx_imu
from .limelight import CameraMode, LEDMode, Limelight, StreamMode
from .navx_imu import NavX

__all__ = [
    "CameraMode",
    "LEDMode",
    "Limelight",
    "NavX",
    "StreamMode",
    "navx_imu",
]
