"""Layout analysis CLI command."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, List, Optional, Tuple

from ..codec.base import Codec
from ..codec.bits import GroupBits
from ..codec.model import ModelCodec
from ..codec.structure import StructCodec
from ..exceptions import DataSchemeError
from ..scheme import Scheme
from ..utils.sizing import static_size

_MODULE_NAME = "datascheme_user_module"


def load_module(file_path: Path) -> ModuleType:
    """Import a Python file as a throwaway module.

    Args:
        file_path: Path to Python file containing layout definitions
    """
    spec = importlib.util.spec_from_file_location(_MODULE_NAME, file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[_MODULE_NAME] = module
    spec.loader.exec_module(module)
    return module


def find_layouts(module: ModuleType) -> Dict[str, Codec]:
    """Collect module-level schemes and composite codecs by name.

    Leaf codecs imported into the module (``byte``, ``uint16`` ...) are skipped.
    """
    layouts: Dict[str, Codec] = {}
    for name, obj in vars(module).items():
        if name.startswith("_"):
            continue
        if isinstance(obj, Scheme):
            layouts[name] = obj.codec
        elif isinstance(obj, (StructCodec, ModelCodec)):
            layouts[name] = obj
    return layouts


def find_scheme(module: ModuleType, name: str) -> Scheme[Any]:
    """Look up a layout by name and wrap it into a Scheme if needed."""
    obj = getattr(module, name, None)
    if isinstance(obj, Scheme):
        return obj
    if isinstance(obj, Codec):
        return Scheme(obj)
    raise DataSchemeError(f"No scheme or codec named {name!r}")


def _describe(size: Optional[int]) -> str:
    return "unsized" if size is None else f"{size} bytes"


def _rows(codec: Codec) -> List[Tuple[str, str, str]]:
    if isinstance(codec, ModelCodec):
        codec = codec.codec
    if not isinstance(codec, StructCodec):
        return [("(root)", "-", _describe(static_size(codec)))]

    rows: List[Tuple[str, str, str]] = []
    # Offsets are only known up to the first unsized field
    offset: Optional[int] = 0
    for name, field in codec.fields:
        size = static_size(field)
        where = "?" if offset is None else str(offset)
        detail = _describe(size)
        if isinstance(field, GroupBits):
            bits = ", ".join(f"{bit_name}:{width}" for bit_name, width in field.layout())
            detail = f"{detail} [{bits}]"
        rows.append((name, where, detail))
        offset = None if offset is None or size is None else offset + size
    return rows


def analyze_layout(name: str, codec: Codec) -> None:
    """Print a field-by-field breakdown of a layout.

    Args:
        name: Name the layout is bound to
        codec: Layout codec
    """
    print(f"{'=' * 19} {name} {'=' * 19}")
    print(f"Total size: {_describe(static_size(codec))}")
    if isinstance(codec, ModelCodec):
        print(f"Bound model: {codec.model_class.__name__}")
    print()

    for i, (field_name, where, detail) in enumerate(_rows(codec), 1):
        field_desc = f"{i}. {field_name} @ {where}"
        dots = "." * max(1, 54 - len(field_desc) - len(detail))
        print(f"        {field_desc}{dots}{detail}")

    print()


def analyze_file(file_path: Path) -> None:
    """Analyze all layouts defined in a Python file.

    Args:
        file_path: Path to Python file containing layout definitions
    """
    module = load_module(file_path)
    layouts = find_layouts(module)

    if not layouts:
        print(f"No layouts found in {file_path}")
        return

    print("|" * 7, "datascheme: binary buffer layouts", "|" * 7)
    print(f"{len(layouts)} layout{'s' if len(layouts) != 1 else ''} loaded.")
    print()

    for name, codec in layouts.items():
        analyze_layout(name, codec)
