"""
Static file service - serves the asset root through Starlette's StaticFiles
"""
import errno
import os
import stat
from pathlib import Path, PurePosixPath
from typing import Tuple, Union

from fastapi import HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.datastructures import Headers
from starlette.staticfiles import NotModifiedResponse
from starlette.types import Receive, Scope, Send

from mostro_web.core.config import DEFAULT_MEDIA_TYPE, MEDIA_TYPES, SERVED_METHODS
from mostro_web.core.utils import get_logger

logger = get_logger("static_files")

# Lookup failures that mean "nothing servable here" rather than an I/O fault
MISS_ERRNOS = {
    errno.ENOENT,
    errno.ENOTDIR,
    errno.EACCES,
    errno.EPERM,
    errno.ELOOP,
    errno.ENAMETOOLONG,
}


def media_type_for(path: Union[str, Path]) -> str:
    """Content-Type for a file, looked up by extension"""
    suffix = PurePosixPath(str(path)).suffix.lower()
    return MEDIA_TYPES.get(suffix, DEFAULT_MEDIA_TYPE)


class AssetFileResponse(FileResponse):
    """FileResponse that opens the file once more before any header goes out"""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await run_in_threadpool(self._check_openable)
        except OSError as e:
            if e.errno in MISS_ERRNOS:
                logger.debug(f"Asset vanished before response: {self.path}")
                raise HTTPException(status_code=404)
            raise
        await super().__call__(scope, receive, send)

    def _check_openable(self) -> None:
        with open(self.path, "rb"):
            pass


class StaticAssets(StaticFiles):
    """StaticFiles for a single asset root.

    Differences from the stock class:
      - the root may be missing; every lookup then misses instead of failing
      - unreadable files, NUL bytes and symlink loops are 404s
      - Content-Type comes from MEDIA_TYPES, without a charset parameter
      - 405 responses carry an Allow header
    """

    def __init__(self, directory: Union[str, Path]):
        super().__init__(directory=directory, html=True, check_dir=False)

    async def check_config(self) -> None:
        if not os.path.isdir(self.directory):
            return
        await super().check_config()

    async def get_response(self, path: str, scope: Scope):
        if scope["method"] not in SERVED_METHODS:
            raise HTTPException(status_code=405, headers={"Allow": ", ".join(SERVED_METHODS)})
        return await super().get_response(path, scope)

    def lookup_path(self, path: str) -> Tuple[str, Union[os.stat_result, None]]:
        if "\x00" in path:
            return "", None

        try:
            full_path, stat_result = super().lookup_path(path)
        except OSError as e:
            if e.errno in MISS_ERRNOS:
                return "", None
            raise

        if stat_result is not None and stat.S_ISREG(stat_result.st_mode):
            if not os.access(full_path, os.R_OK):
                logger.debug(f"Unreadable asset: {full_path}")
                return "", None
        return full_path, stat_result

    def file_response(self, full_path, stat_result: os.stat_result, scope: Scope, status_code: int = 200):
        media_type = media_type_for(full_path)
        response = AssetFileResponse(
            full_path,
            status_code=status_code,
            media_type=media_type,
            stat_result=stat_result
        )
        # FileResponse appends a charset to text/* types
        response.headers["content-type"] = media_type

        if self.is_not_modified(response.headers, Headers(scope=scope)):
            return NotModifiedResponse(response.headers)
        return response
