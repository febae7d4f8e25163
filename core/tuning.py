"""core/tuning.py — Data-driven tuning constants.

Every gameplay number lives in ``data/tuning.toml``.  Call sites always
pass their own default, so a missing file or key never stops the game::

    from core.tuning import get
    speed = get("player", "run_speed", 200.0)

Command-line flags are layered on top with ``override()``.  F5 calls
``reload()``, which re-reads the file and puts the flags back;
``load()`` starts clean.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    try:
        import tomli as tomllib            # pip install tomli
    except ModuleNotFoundError:
        tomllib = None                     # type: ignore[assignment]


DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / "tuning.toml"

_data: dict = {}
_path: Path = DEFAULT_PATH
# (section, key, value) in the order they were applied
_overrides: list[tuple[str, str, object]] = []


def load(path: str | Path | None = None) -> None:
    """Read tuning from *path* (default ``data/tuning.toml``).

    Drops any earlier overrides.
    """
    global _path
    _path = DEFAULT_PATH if path is None else Path(path)
    _overrides.clear()
    _read()


def reload() -> None:
    """Re-read the current file, keeping command-line overrides."""
    _read()
    for section_path, key, value in _overrides:
        _set(section_path, key, value)


def _read() -> None:
    global _data
    _data = {}
    if not _path.exists():
        print(f"[TUNING] {_path} not found — using defaults")
        return
    if tomllib is None:
        print("[TUNING] No TOML parser available (need Python 3.11+ or `pip install tomli`)")
        return
    with open(_path, "rb") as f:
        _data = tomllib.load(f)
    print(f"[TUNING] Loaded {len(_data)} tables from {_path}")


def _walk(section_path: str) -> dict | None:
    node = _data
    for part in section_path.split("."):
        node = node.get(part) if isinstance(node, dict) else None
        if node is None:
            return None
    return node if isinstance(node, dict) else None


def get(section: str, key: str, default=None):
    """Read a tuning value.

    *section* uses dot-notation for nested tables, e.g.
    ``"ui.restart_button.hover"`` looks up ``[ui.restart_button.hover]``.
    """
    node = _walk(section)
    if node is None:
        return default
    return node.get(key, default)


def section(section_path: str) -> dict:
    """Shallow copy of a whole table, or ``{}``."""
    node = _walk(section_path)
    return dict(node) if node is not None else {}


def override(section_path: str, key: str, value) -> None:
    """Set a value in memory, creating tables as needed.

    Used for ``--debug`` and ``--rules``.  Survives ``reload()``.
    """
    _overrides.append((section_path, key, value))
    _set(section_path, key, value)


def _set(section_path: str, key: str, value) -> None:
    node = _data
    for part in section_path.split("."):
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    node[key] = value
