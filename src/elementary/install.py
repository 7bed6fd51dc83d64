"""Asset installation: path composition and the copy step built on it."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from elementary.errors import AssetsNotFoundError, InstallError
from elementary.model.installation import ASSETS_SUFFIX, InstallationPaths

__all__ = ["prepare_installation", "install_assets"]

log = logging.getLogger(__name__)


def prepare_installation(
    source_root: str | os.PathLike[str], target_root: str | os.PathLike[str]
) -> InstallationPaths:
    """Compute where assets come from and where they go. Touches no files."""
    return InstallationPaths(
        source=Path(source_root).joinpath(*ASSETS_SUFFIX),
        destination=Path(target_root).joinpath(*ASSETS_SUFFIX),
    )


def install_assets(
    skill_root: str | os.PathLike[str], target_dir: str | os.PathLike[str]
) -> InstallationPaths:
    """Copy the design-system assets from *skill_root* into *target_dir*.

    Raises AssetsNotFoundError if the skill root has no assets, and
    InstallError if the destination lies inside the source or the target
    cannot be created or written.
    """
    paths = prepare_installation(skill_root, Path(target_dir).resolve())
    if not paths.source.is_dir():
        raise AssetsNotFoundError(paths.source)
    if paths.destination.is_relative_to(paths.source.resolve()):
        raise InstallError(
            f"Cannot install {paths.source} into itself: {paths.destination}"
        )

    try:
        paths.destination.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise InstallError(f"Failed to create target directory: {exc}", cause=exc) from exc

    log.info("Copying %s -> %s", paths.source, paths.destination)
    try:
        shutil.copytree(paths.source, paths.destination, dirs_exist_ok=True)
    except (OSError, shutil.Error) as exc:
        raise InstallError(f"Failed to copy assets: {exc}", cause=exc) from exc
    return paths
