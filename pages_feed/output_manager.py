"""
Output Manager — Writes the rendered feed to its fixed location.

The feed is written in one go after the whole document has been rendered.
The bytes go to a temporary file next to the target, which is then renamed
over it, so the indexer never picks up a half-written feed and a failed run
leaves the previous feed in place.

Pipeline context:
    Used in Step 4 (Save Output) of the orchestrator pipeline, and by
    print_summary() to report the written file's size.
"""

import os
import tempfile
from typing import Optional

from .exceptions import FilesystemError


class OutputManager:
    """Manages the feed output file.

    Attributes:
        output_path: Where the feed is written (relative paths resolve
                     against the working directory).
        debug: If True, print the temporary file used for each write.
    """

    def __init__(self, output_path: str, debug: bool = False):
        self.output_path = output_path
        self.debug = debug

    def write_feed(self, xml: str) -> str:
        """Write the feed document as UTF-8, replacing any previous feed.

        Args:
            xml: The complete rendered document.

        Returns:
            The path the feed was written to.

        Raises:
            FilesystemError: If the directory cannot be created, the file
                             cannot be written, or the document cannot be
                             encoded as UTF-8.
        """
        directory = os.path.dirname(os.path.abspath(self.output_path))
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=".feed-", suffix=".xml.tmp", dir=directory
            )
            if self.debug:
                print(f"  Writing to temporary file: {tmp_path}")
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(xml)
            # mkstemp creates 0600; the feed is served to the indexer
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, self.output_path)
        except (OSError, UnicodeError) as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise FilesystemError(f"Could not write feed to {self.output_path}: {e}") from e

        return self.output_path

    def file_size_mb(self, path: Optional[str] = None) -> float:
        """Size of the written feed in megabytes (1024 * 1024 bytes)."""
        return os.path.getsize(path or self.output_path) / 1024 / 1024
