"""
File system traversal: walk directories and collect JavaScript source files.

This module provides utilities for recursively traversing directories to find
JavaScript files (.js, .mjs, .cjs) for analysis. Dependency, build and VCS
directories are skipped by default.

Typical usage:
    from pathlib import Path
    from seclint.traversal import find_js_files

    # Find all JavaScript files
    js_files = find_js_files(Path("./my_project"))

    # Custom ignore patterns
    sources = find_js_files(
        Path("./my_project"),
        ignore_dirs={"build", "dist", "vendor"}
    )
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Set

logger = logging.getLogger(__name__)

JS_EXTENSIONS = frozenset({".js", ".mjs", ".cjs"})

# Default directories to ignore during traversal
DEFAULT_IGNORE_DIRS: Set[str] = {
    # Dependency and package directories
    "node_modules",
    "bower_components",
    "jspm_packages",
    "vendor",
    "third_party",

    # Build and distribution directories
    "build",
    "dist",
    "out",
    "coverage",
    ".next",
    ".nuxt",

    # Version control
    ".git",
    ".svn",
    ".hg",

    # IDE and editor directories
    ".vscode",
    ".idea",

    # Cache directories
    ".cache",
    ".parcel-cache",
    "__pycache__",
}


def is_js_file(path: Path) -> bool:
    """
    Check if a file is a JavaScript source file.

    Examples:
        >>> is_js_file(Path("app.js"))
        True
        >>> is_js_file(Path("module.mjs"))
        True
        >>> is_js_file(Path("app.ts"))
        False
    """
    return path.suffix.lower() in JS_EXTENSIONS


def is_minified(path: Path) -> bool:
    """Bundled/minified output (`*.min.js`) is not hand-written source."""
    return path.name.lower().endswith(".min.js")


def should_ignore_directory(dir_path: Path, ignore_dirs: Set[str]) -> bool:
    """
    Check if a directory should be ignored during traversal.

    Only the directory name is compared (case-sensitive), not the full path.
    """
    return dir_path.name in ignore_dirs


def find_js_files(
    root: Path,
    ignore_dirs: Optional[Set[str]] = None,
    follow_symlinks: bool = False,
    filter_fn: Optional[Callable[[Path], bool]] = None,
    include_minified: bool = False,
) -> list[Path]:
    """
    Recursively find all JavaScript files in a directory tree.

    Args:
        root: Root directory to start traversal from.
        ignore_dirs: Set of directory names to skip. If None, uses DEFAULT_IGNORE_DIRS.
        follow_symlinks: If True, follow symbolic links during traversal.
                         If False (default), symlinks are skipped for safety.
        filter_fn: Optional additional filter function. If provided, only files
                   for which filter_fn(path) returns True are included.
        include_minified: If False (default), `*.min.js` files are skipped.

    Returns:
        List of Path objects for all matching files, sorted for deterministic ordering.

    Raises:
        FileNotFoundError: If the root directory does not exist.
        NotADirectoryError: If root is not a directory.

    Notes:
        - Permission errors on subdirectories are logged but do not stop traversal.
        - The root path is resolved to an absolute path before traversal.
    """
    if ignore_dirs is None:
        ignore_dirs = DEFAULT_IGNORE_DIRS

    root = root.resolve()

    if not root.exists():
        logger.error("Root directory does not exist: %s", root)
        raise FileNotFoundError(f"Root directory does not exist: {root}")

    if not root.is_dir():
        logger.error("Root path is not a directory: %s", root)
        raise NotADirectoryError(f"Root path is not a directory: {root}")

    logger.info("Starting traversal from: %s", root)
    logger.debug(
        "Traversal config: follow_symlinks=%s, include_minified=%s, ignore_dirs=%s",
        follow_symlinks,
        include_minified,
        ignore_dirs,
    )

    collected_files: list[Path] = []

    def _walk_directory(current_dir: Path) -> None:
        """Recursive helper to walk directory tree."""
        try:
            for entry in current_dir.iterdir():
                if entry.is_symlink() and not follow_symlinks:
                    logger.debug("Skipping symlink: %s", entry)
                    continue

                if entry.is_dir():
                    if should_ignore_directory(entry, ignore_dirs):
                        logger.debug("Ignoring directory: %s", entry)
                        continue
                    _walk_directory(entry)

                elif entry.is_file() and is_js_file(entry):
                    if is_minified(entry) and not include_minified:
                        logger.debug("Skipping minified file: %s", entry)
                        continue
                    if filter_fn is not None and not filter_fn(entry):
                        logger.debug("Filtered out by custom filter: %s", entry)
                        continue

                    logger.debug("Found source file: %s", entry)
                    collected_files.append(entry)

        except PermissionError as e:
            logger.warning("Permission denied accessing directory %s: %s", current_dir, e)
        except OSError as e:
            logger.warning("Error accessing directory %s: %s", current_dir, e)

    _walk_directory(root)

    collected_files.sort()

    logger.info(
        "Traversal complete: found %d source file(s) in %s",
        len(collected_files),
        root,
    )

    return collected_files
