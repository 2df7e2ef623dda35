"""
Classification viewport → device class.

Seuils : < 768 mobile, 768–1023 tablet, >= 1024 desktop.
Le classifier est la seule pièce alimentée par l'environnement (événements resize) ;
il est injectable via le protocole DeviceSource (FixedViewport en test).
"""
from enum import Enum
from typing import Callable, List, Protocol, runtime_checkable

TABLET_MIN_WIDTH  = 768
DESKTOP_MIN_WIDTH = 1024


class DeviceClass(str, Enum):
    MOBILE  = "mobile"
    TABLET  = "tablet"
    DESKTOP = "desktop"


DEVICE_CLASSES = (DeviceClass.MOBILE, DeviceClass.TABLET, DeviceClass.DESKTOP)


def classify_width(width: float) -> DeviceClass:
    if width < TABLET_MIN_WIDTH:
        return DeviceClass.MOBILE
    if width < DESKTOP_MIN_WIDTH:
        return DeviceClass.TABLET
    return DeviceClass.DESKTOP


@runtime_checkable
class DeviceSource(Protocol):
    @property
    def current(self) -> DeviceClass: ...


class FixedViewport:
    """Device class figée — pour les tests et le rendu serveur."""

    def __init__(self, device: DeviceClass | str = DeviceClass.DESKTOP):
        self._device = DeviceClass(device)

    @property
    def current(self) -> DeviceClass:
        return self._device


Listener = Callable[[DeviceClass], None]


class ViewportClassifier:
    """
    Suit la largeur de la surface de rendu et expose la device class courante.

    on_resize() est idempotent : les abonnés ne sont notifiés que lorsque la
    classe change réellement.
    """

    def __init__(self, width: float = DESKTOP_MIN_WIDTH):
        self._width = width
        self._current = classify_width(width)
        self._listeners: List[Listener] = []

    @property
    def width(self) -> float:
        return self._width

    @property
    def current(self) -> DeviceClass:
        return self._current

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Abonne un callback ; retourne la fonction de désabonnement."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def on_resize(self, width: float) -> DeviceClass:
        self._width = width
        device = classify_width(width)
        if device is not self._current:
            self._current = device
            for listener in list(self._listeners):
                listener(device)
        return self._current
