"""Class documentation lookups across the category registry."""

import asyncio

from ..config import ProjectPaths
from ..data.categories import CATEGORIES, Category
from .grammar import get_parser
from .parser import CSharpParser
from .types import ClassDescriptor


async def find_classes_in_category(
    category: Category,
    paths: ProjectPaths,
    parser: CSharpParser | None = None,
) -> list[ClassDescriptor]:
    """Parse every source file declared by a category.

    A file that is missing or fails to parse contributes nothing; the other
    files are still indexed.

    Raises:
        GrammarInitError: If no parser was given and the grammar cannot load
    """
    if parser is None:
        parser = await get_parser()

    classes: list[ClassDescriptor] = []
    for rel_path in category.files:
        path = paths.data_gen_dir / rel_path
        classes.extend(await asyncio.to_thread(parser.parse_file, path, paths.relative_to_root(path)))
    return classes


async def find_class(
    type_name: str,
    paths: ProjectPaths,
    categories: list[Category] | None = None,
    parser: CSharpParser | None = None,
) -> ClassDescriptor | None:
    """Find a declared type by case-insensitive name.

    Categories are scanned in registry order; the first match wins.

    Returns:
        ClassDescriptor or None if no category declares the type
    """
    if parser is None:
        parser = await get_parser()

    wanted = type_name.lower()
    scanned: set[str] = set()
    for category in categories or list(CATEGORIES.values()):
        # Categories may share files; parse each only once per lookup
        for rel_path in category.files:
            if rel_path in scanned:
                continue
            scanned.add(rel_path)
            path = paths.data_gen_dir / rel_path
            descriptors = await asyncio.to_thread(parser.parse_file, path, paths.relative_to_root(path))
            for descriptor in descriptors:
                if descriptor.name.lower() == wanted:
                    return descriptor
    return None
