"""core/tuning.py — Data-driven tuning constants.

Every gameplay number (letter damage, mistake penalty, gravity, banner
durations, frame target) lives in ``data/tuning.toml`` and is loaded
once at startup.  Any system reads a value with::

    from core.tuning import get
    dmg = get("combat", "letter_damage", 8)

The default always lives at the call site, so a missing file or key
never breaks the game.

Hot-reload: call ``reload()`` to re-read the file.  In-game, press F4.
"""

from __future__ import annotations
import tomllib
from pathlib import Path


_data: dict = {}
_path: Path | None = None


def load(path: str | Path | None = None) -> None:
    """Load (or reload) tuning constants from *path*.

    If *path* is ``None``, default to ``data/tuning.toml`` relative to
    the project root (one level above ``core/``).
    """
    global _data, _path

    if path is None:
        root = Path(__file__).resolve().parent.parent
        path = root / "data" / "tuning.toml"
    else:
        path = Path(path)

    _path = path

    if not path.exists():
        print(f"[TUNING] {path} not found — using defaults")
        _data = {}
        return

    try:
        with open(path, "rb") as f:
            _data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        print(f"[TUNING] {path} is not valid TOML ({exc}) — using defaults")
        _data = {}
        return

    count = _count_leaves(_data)
    print(f"[TUNING] Loaded {count} values from {path}")


def reload() -> None:
    """Re-read the tuning file from disk (hot-reload)."""
    load(_path)


def override(values: dict) -> None:
    """Replace the loaded table wholesale (tests and tools)."""
    global _data
    _data = dict(values)


def _table(section: str) -> dict | None:
    node = _data
    for part in section.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    return node if isinstance(node, dict) else None


def get(section: str, key: str, default=None):
    """Read a tuning value.

    *section* uses dot-notation to traverse nested tables, e.g.
    ``"ui.damage_text"`` looks up ``[ui.damage_text]``.

    >>> get("combat", "letter_damage", 8)
    8
    """
    table = _table(section)
    if table is None:
        return default
    return table.get(key, default)


def section(section_path: str) -> dict:
    """Return an entire section dict (shallow copy), or empty dict."""
    return dict(_table(section_path) or {})


def _count_leaves(d: dict, _n: int = 0) -> int:
    for v in d.values():
        if isinstance(v, dict):
            _n = _count_leaves(v, _n)
        else:
            _n += 1
    return _n
