"""
Valeurs responsives — une valeur par device class, les trois clés obligatoires.

Responsive[T] est un record à forme fixe : une map partielle ne peut pas être
construite, ce qui garantit l'invariant de complétude dès la création.
resolve() ne fait aucun repli entre classes (pas de cascade desktop → mobile).
"""
from typing import Any, Generic, Mapping, TypeVar, Union

from pydantic import BaseModel, ConfigDict

from .errors import DataIntegrityError
from .viewport import DeviceClass

T = TypeVar("T")


class Responsive(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True, extra="forbid")

    mobile: T
    tablet: T
    desktop: T

    @classmethod
    def uniform(cls, value: Any) -> "Responsive":
        """Même valeur sur les trois devices."""
        return cls(mobile=value, tablet=value, desktop=value)

    def replace(self, device: Union[DeviceClass, str], value: Any) -> "Responsive":
        """Copie validée avec une seule tranche modifiée."""
        key = DeviceClass(device).value
        data = self.model_dump()
        data[key] = value.model_dump() if isinstance(value, BaseModel) else value
        return type(self).model_validate(data)


def resolve(values: Union[Responsive, Mapping[str, Any]], device: Union[DeviceClass, str]) -> Any:
    """
    Retourne la valeur de la device class demandée.

    Clé absente → DataIntegrityError (donnée corrompue, pas un cas normal).
    """
    key = DeviceClass(device).value
    if isinstance(values, Responsive):
        return getattr(values, key)
    try:
        return values[key]
    except KeyError:
        raise DataIntegrityError(f"Valeur responsive sans clé {key!r} : {dict(values)!r}") from None
