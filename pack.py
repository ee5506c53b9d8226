#!python3
"""Write generated components into their package trees, with index files and package manifests."""

import asyncio
import json
import shutil
from pathlib import Path
from typing import Iterable, List

from utils import Format, GeneratedArtifact

CJS_PACKAGE_JSON = {"module": "./esm/index.js", "sideEffects": False}
ESM_PACKAGE_JSON = {"type": "module", "sideEffects": False}


def output_dir(package_root: Path, format: Format) -> Path:
    if Format(format) is Format.MODULE:
        return package_root / "esm"
    return package_root


def ensure_write(path: Path, text: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def ensure_write_json(path: Path, obj):
    ensure_write(path, json.dumps(obj, indent=2) + "\n")


def clear_output(package_root: Path):
    """Remove everything a previous build left under package_root."""
    if package_root.exists():
        shutil.rmtree(package_root)


async def write_artifact(artifact: GeneratedArtifact, out_dir: Path) -> List[Path]:
    js_path = out_dir / f"{artifact.identifier}.js"
    dts_path = out_dir / f"{artifact.identifier}.d.ts"
    await asyncio.gather(
        asyncio.to_thread(ensure_write, js_path, artifact.module_source),
        asyncio.to_thread(ensure_write, dts_path, artifact.declaration),
    )
    return [js_path, dts_path]


def export_all(identifiers: Iterable[str], format: Format, include_extension: bool = True) -> str:
    extension = ".js" if include_extension else ""
    lines = []
    for name in sorted(set(identifiers)):
        if Format(format) is Format.MODULE:
            lines.append(f"export {{ default as {name} }} from './{name}{extension}'")
        else:
            lines.append(f'module.exports.{name} = require("./{name}{extension}")')
    return "\n".join(lines) + "\n"


async def write_index(identifiers: Iterable[str], out_dir: Path, format: Format):
    """index.js re-exports every component; ESM resolves without an extension, require() needs one."""
    identifiers = list(identifiers)
    format = Format(format)
    index_js = export_all(identifiers, format, include_extension=format is Format.COMMONJS)
    index_dts = export_all(identifiers, Format.MODULE, include_extension=False)
    await asyncio.gather(
        asyncio.to_thread(ensure_write, out_dir / "index.js", index_js),
        asyncio.to_thread(ensure_write, out_dir / "index.d.ts", index_dts),
    )


async def write_manifests(package_root: Path):
    await asyncio.gather(
        asyncio.to_thread(ensure_write_json, package_root / "package.json", CJS_PACKAGE_JSON),
        asyncio.to_thread(
            ensure_write_json, output_dir(package_root, Format.MODULE) / "package.json", ESM_PACKAGE_JSON
        ),
    )
