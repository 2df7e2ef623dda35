"""
Arbre visuel — sortie du renderer, indépendante de tout support.

Un Node est immuable ; `key` reprend l'id de l'élément (clé de diff stable).
"""
from typing import Dict, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: str = "div"
    classes: Tuple[str, ...] = ()
    style: Tuple[Tuple[str, str], ...] = ()
    attrs: Tuple[Tuple[str, str], ...] = ()
    text: Optional[str] = None
    raw_html: bool = False
    key: Optional[str] = None
    children: Tuple["Node", ...] = ()

    @property
    def style_dict(self) -> Dict[str, str]:
        return dict(self.style)

    @property
    def attr_dict(self) -> Dict[str, str]:
        return dict(self.attrs)

    def walk(self) -> Iterator["Node"]:
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, css_class: str) -> list:
        return [n for n in self.walk() if css_class in n.classes]

    def find_key(self, key: str) -> Optional["Node"]:
        return next((n for n in self.walk() if n.key == key), None)


def node(tag: str = "div", *children: Node, classes=(), style=None, attrs=None, text=None,
         raw_html: bool = False, key: Optional[str] = None) -> Node:
    """Raccourci de construction ; style/attrs None ou vides sont omis."""
    return Node(
        tag=tag,
        classes=tuple(c for c in classes if c),
        style=tuple((k, v) for k, v in (style or {}).items() if v is not None),
        attrs=tuple((k, v) for k, v in (attrs or {}).items() if v is not None),
        text=text,
        raw_html=raw_html,
        key=key,
        children=tuple(children),
    )
