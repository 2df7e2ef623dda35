"""Core — device classes, valeurs responsives, erreurs."""
from .errors import (
    HeroError,
    DataIntegrityError,
    AssetResolutionError,
    ActionDispatchError,
    ElementNotFoundError,
)
from .viewport import (
    DeviceClass,
    DEVICE_CLASSES,
    DeviceSource,
    FixedViewport,
    ViewportClassifier,
    classify_width,
)
from .responsive import Responsive, resolve

__all__ = [
    "HeroError",
    "DataIntegrityError",
    "AssetResolutionError",
    "ActionDispatchError",
    "ElementNotFoundError",
    "DeviceClass",
    "DEVICE_CLASSES",
    "DeviceSource",
    "FixedViewport",
    "ViewportClassifier",
    "classify_width",
    "Responsive",
    "resolve",
]
