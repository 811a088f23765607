import os
from typing import List

import aiofiles.os

from ..models import CleanupResult, FileOutcome
from .log_writer import LogFileWriter


class FolderCleaner:
    """
    Deletes every file directly inside the target folder.

    Subdirectories and their contents are left alone. A file that cannot be
    deleted is logged and skipped; the next scheduled pass tries it again.
    """

    def __init__(self, target_folder_path: str, log_writer: LogFileWriter):
        self.target_folder_path = target_folder_path
        self._log = log_writer

    async def run_pass(self) -> CleanupResult:
        """Run one cleanup pass. Errors are logged, never raised."""
        folder = self.target_folder_path
        result = CleanupResult(folder=folder)

        try:
            if not await aiofiles.os.path.isdir(folder):
                result.folder_exists = False
                await self._log.write(f"Target folder does not exist: {folder}")
                return result

            files = await self._list_files(folder)
            result.files_found = len(files)

            if not files:
                await self._log.write(f"No files found in {folder}")
                return result

            await self._log.write(
                f"Found {len(files)} file(s) in {folder}. Starting deletion..."
            )

            for file_path in files:
                result.outcomes.append(await self._delete_file(file_path))

            await self._log.write("Cleanup completed.")

        except Exception as e:
            result.error = str(e)
            await self._log.write(f"Error during cleanup: {e}")

        return result

    async def _list_files(self, folder: str) -> List[str]:
        files = []
        for name in await aiofiles.os.listdir(folder):
            path = os.path.join(folder, name)
            if await aiofiles.os.path.isfile(path):
                files.append(path)
        return files

    async def _delete_file(self, file_path: str) -> FileOutcome:
        try:
            await aiofiles.os.remove(file_path)
        except Exception as e:
            await self._log.write(f"Error deleting {file_path}: {e}")
            return FileOutcome(path=file_path, deleted=False, error=str(e))

        await self._log.write(f"Deleted: {file_path}")
        return FileOutcome(path=file_path, deleted=True)
