import os
import shutil
import tempfile
from contextlib import contextmanager
from typing import BinaryIO, Iterator

from .errors import UploadStorageError

# tesseract sniffs the format from the content; the client's filename is never used
SCRATCH_NAME = "image.jpg"


@contextmanager
def scratch_upload(stream: BinaryIO) -> Iterator[str]:
    """
    Write an uploaded file into a private temporary directory and yield its path.

    The directory is unique per call and is removed, with everything in it,
    when the block exits.
    """
    with tempfile.TemporaryDirectory(prefix="upload-") as workdir:
        path = os.path.join(workdir, SCRATCH_NAME)
        try:
            with open(path, "wb") as out:
                shutil.copyfileobj(stream, out)
        except OSError as e:
            raise UploadStorageError(f"Failed to save image: {e}") from e
        yield path
