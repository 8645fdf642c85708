"""
setuptools hook for entitytable.

Metadata lives in pyproject.toml. This file only decides whether the table
builder is compiled: set ENTITYTABLE_USE_MYPYC=1 to build the validator,
builder and lookup modules as C extensions, e.g.

    ENTITYTABLE_USE_MYPYC=1 pip install .[mypyc]
"""

import os
from pathlib import Path

from setuptools import setup

SRC = Path("src") / "entitytable"

# Loader, emitters and CLI spend their time in json and file I/O; only the
# modules that walk every record and prefix gain from compiling.
COMPILED = ("validate", "builder", "lookup")


def mypyc_extensions():
    if os.environ.get("ENTITYTABLE_USE_MYPYC", "0") != "1":
        return []

    try:
        from mypyc.build import mypycify
    except ImportError as e:
        raise SystemExit("ENTITYTABLE_USE_MYPYC=1 needs mypyc: pip install entitytable[mypyc]") from e

    sources = [str(SRC / f"{module}.py") for module in COMPILED]
    missing = [source for source in sources if not Path(source).exists()]
    if missing:
        raise SystemExit(f"cannot compile, missing: {', '.join(missing)}")

    return mypycify(
        sources,
        opt_level=os.environ.get("MYPYC_OPT_LEVEL", "3"),
        debug_level=os.environ.get("MYPYC_DEBUG_LEVEL", "0"),
        multi_file=False,
    )


if __name__ == "__main__":
    setup(ext_modules=mypyc_extensions())
