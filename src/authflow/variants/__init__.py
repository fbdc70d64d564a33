from .base import AuthenticationVariant
from .face_id import FaceIDAuthentication
from .pin import PINAuthentication
from .touch_id import TouchIDAuthentication

__all__ = [
    "AuthenticationVariant",
    "FaceIDAuthentication",
    "PINAuthentication",
    "TouchIDAuthentication",
]
