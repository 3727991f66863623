import logging
from pathlib import Path

from .encoding import Codec
from .errors import ApplyDiffError, FileAccessError

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"


def backup_path_for(target: Path) -> Path:
    return target.with_name(f"{target.name}{BACKUP_SUFFIX}")


def write_backup(target: Path, original: str, codec: Codec) -> Path:
    """Save the pre-change content next to target before it is overwritten."""
    backup_path = backup_path_for(target)
    try:
        codec.write(backup_path, original)
    except ApplyDiffError as exc:
        raise FileAccessError(
            f"Backup failed, {target} was left unchanged: {exc.message}",
            path=str(target),
        ) from exc
    logger.info(f"Backup written to {backup_path}")
    return backup_path
