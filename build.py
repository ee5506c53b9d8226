#!python3
import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List

from tqdm import tqdm

from component import synthesize
from pack import clear_output, output_dir, write_artifact, write_index, write_manifests
from utils import Format, SourceAsset, pascal_case, setup_logging

PACKAGES = ("icons",)
OPTIMIZED = Path("optimized/")
OUTPUT = Path("react/")
DEPRECATED = Path("deprecated.json")


async def run_all(aws: Iterable, pbar=None) -> List:
    """Await every awaitable; on the first error cancel the rest and re-raise it.

    Results come back in input order. pbar, if given, ticks once per finished task.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    if not tasks:
        return []
    if pbar is not None:
        for task in tasks:
            task.add_done_callback(lambda _: pbar.update())
    try:
        await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    for task in tasks:
        if not task.cancelled() and task.exception() is not None:
            raise task.exception()
    return [task.result() for task in tasks]


def load_deprecated(path: Path) -> FrozenSet[str]:
    """Read the deny-list of SVG file names whose components are marked @deprecated."""
    names = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise ValueError(f"{path}: expected a JSON list of file names")
    return frozenset(names)


async def read_icon(path: Path, deprecated: FrozenSet[str]) -> SourceAsset:
    return SourceAsset(
        filename=path.name,
        markup=await asyncio.to_thread(path.read_text, encoding="utf-8"),
        identifier=pascal_case(path.stem),
        deprecated=path.name in deprecated,
    )


async def get_icons(source_dir: Path, deprecated: Iterable[str] = ()) -> List[SourceAsset]:
    """Read every SVG in source_dir, sorted by file name.

    A missing directory raises; two files that case to the same component name raise ValueError.
    """
    deprecated = frozenset(deprecated)
    if not source_dir.is_dir():
        raise FileNotFoundError(f"SVG source directory not found: {source_dir}")

    paths = sorted(source_dir.glob("*.svg"))
    icons = await run_all(read_icon(p, deprecated) for p in paths)

    seen: Dict[str, str] = {}
    for icon in icons:
        if icon.identifier in seen:
            raise ValueError(
                f"{icon.filename} and {seen[icon.identifier]} both map to {icon.identifier}"
            )
        seen[icon.identifier] = icon.filename
        if icon.deprecated:
            logging.debug(f"{icon.filename} is deprecated.")

    return list(icons)


async def build_one(icon: SourceAsset, out_dir: Path, format: Format):
    artifact = synthesize(icon, format)
    logging.debug(f"Synthesized {icon.identifier} ({format.value})")
    return await write_artifact(artifact, out_dir)


async def build_icons(
    icons: List[SourceAsset], package_root: Path, format: Format, progress: bool = True
):
    out_dir = output_dir(package_root, format)
    with tqdm(
        total=len(icons), desc=f"Building {format.value}", unit=" files", disable=not progress
    ) as pbar:
        await run_all((build_one(icon, out_dir, format) for icon in icons), pbar)
    # Indexes only after every component in this tree is on disk.
    await write_index([icon.identifier for icon in icons], out_dir, format)


async def build_package(
    package: str,
    optimized_root: Path = OPTIMIZED,
    output_root: Path = OUTPUT,
    deprecated: Iterable[str] = (),
    progress: bool = True,
) -> List[SourceAsset]:
    icons = await get_icons(optimized_root / package, deprecated)
    package_root = output_root / package

    clear_output(package_root)

    await run_all(
        [
            build_icons(icons, package_root, Format.COMMONJS, progress),
            build_icons(icons, package_root, Format.MODULE, progress),
            write_manifests(package_root),
        ]
    )
    return icons


def main(args):
    deprecated = load_deprecated(args.deprecated)

    logging.info(f"Building {args.package} package...")
    icons = asyncio.run(
        build_package(
            args.package,
            optimized_root=args.optimized_dir,
            output_root=args.output_dir,
            deprecated=deprecated,
            progress=not args.no_progress,
        )
    )
    n_deprecated = sum(icon.deprecated for icon in icons)
    logging.info(
        f"Finished building {args.package} package: {len(icons)} components ({n_deprecated} deprecated)."
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate React component packages (CommonJS and ESM) from optimized SVGs."
    )
    parser.add_argument(
        "package",
        choices=PACKAGES,
        help="Package to build",
    )
    parser.add_argument(
        "--optimized-dir",
        type=Path,
        default=OPTIMIZED,
        help="Directory containing one folder of optimized SVGs per package",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=OUTPUT,
        help="Directory the package trees are written to",
    )
    parser.add_argument(
        "--deprecated",
        type=Path,
        default=DEPRECATED,
        help="JSON list of SVG file names to mark as deprecated",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide progress bars",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()

    setup_logging()
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    main(args)
