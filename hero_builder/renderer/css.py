"""
CSS du bloc Hero — SCSS compilé (libsass), une seule fois par process.
"""
from pathlib import Path

_SCSS_CACHE: dict = {}
_SCSS_DIR = Path(__file__).parent.parent / "scss"


def get_compiled_scss() -> str:
    """Compile hero.scss une seule fois, met en cache (libsass requis)."""
    if "hero" not in _SCSS_CACHE:
        import sass
        _SCSS_CACHE["hero"] = sass.compile(
            filename=str(_SCSS_DIR / "hero.scss"),
            output_style="compressed",
        )
    return _SCSS_CACHE["hero"]


def invalidate_scss_cache():
    """Force la recompilation SCSS (dev only)."""
    _SCSS_CACHE.clear()
