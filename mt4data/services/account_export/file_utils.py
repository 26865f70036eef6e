"""
Перезапись файлов экспорта

rewrite_file() - context manager, гарантирующий закрытие файла на любом пути выхода:
- atomic=False: файл пишется на месте; если файл был создан этой операцией
  и запись упала, он удаляется. Существовавший ранее файл остаётся как есть
  (возможно, частично перезаписанным).
- atomic=True: запись идёт во временный файл рядом с целевым, который
  заменяет целевой только после успешной записи.
"""

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO, Union

from mt4data.services.struct_codec.errors import IoFailureError

logger = logging.getLogger(__name__)


def _wrap_os_error(e: BaseException, path: Path) -> BaseException:
    if isinstance(e, OSError) and not isinstance(e, IoFailureError):
        failure = IoFailureError(f"Failed to write {path}: {e}")
        failure.__cause__ = e
        return failure
    return e


@contextmanager
def rewrite_file(
    path: Union[str, Path],
    atomic: bool = False,
    encoding: str = "utf-8",
) -> Iterator[TextIO]:
    """
    Открыть текстовый файл на полную перезапись

    Raises:
        IoFailureError: ошибка файловой системы (исходная ошибка в __cause__)
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoFailureError(f"Failed to create directory {path.parent}: {e}") from e

    if atomic:
        with _atomic_rewrite(path, encoding) as f:
            yield f
        return

    existed = path.is_file()
    try:
        handle = open(path, "w", encoding=encoding, newline="\n")
    except OSError as e:
        raise IoFailureError(f"Failed to open {path}: {e}") from e

    try:
        with handle:
            yield handle
    except BaseException as e:
        # handle уже закрыт - файл можно удалить (в т.ч. под Windows)
        if not existed and path.is_file():
            path.unlink()
            logger.warning(f"[ACCOUNT-EXPORT] Removed incomplete file {path.name}")
        else:
            logger.error(f"[ACCOUNT-EXPORT] Rewrite of {path.name} failed, file may be incomplete")
        failure = _wrap_os_error(e, path)
        if failure is e:
            raise
        raise failure


@contextmanager
def _atomic_rewrite(path: Path, encoding: str) -> Iterator[TextIO]:
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as e:
        raise IoFailureError(f"Failed to create temporary file for {path}: {e}") from e

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as handle:
            yield handle
        os.replace(tmp_path, path)
    except BaseException as e:
        if tmp_path.exists():
            tmp_path.unlink()
        logger.warning(f"[ACCOUNT-EXPORT] Atomic rewrite of {path.name} failed, target left untouched")
        failure = _wrap_os_error(e, path)
        if failure is e:
            raise
        raise failure
