"""Checkout stand-in for ``src/vector2`` so an uninstalled tree imports.

Submodules resolve from ``src/vector2`` first, and the real package
``__init__`` is executed here so ``from vector2 import Vector2`` sees the
same public names an installed copy exports.
"""

from pathlib import Path
from pkgutil import extend_path

__path__ = extend_path(__path__, __name__)

_SRC_PACKAGE = Path(__file__).resolve().parent.parent / "src" / "vector2"
if _SRC_PACKAGE.is_dir():
    __path__.insert(0, str(_SRC_PACKAGE))
    _SRC_INIT = _SRC_PACKAGE / "__init__.py"
    exec(compile(_SRC_INIT.read_text(), str(_SRC_INIT), "exec"), globals())
