import logging
import os
import shutil
import tempfile
from typing import Optional, Protocol

from pytesseract import pytesseract

from .errors import OcrExecutionError, OcrOutputUnreadable, ServerConfigurationError

logger = logging.getLogger(__name__)

OUTPUT_BASENAME = "output"


class TextExtractor(Protocol):
    def extract(self, image_path: str) -> str:
        ...


class TesseractExtractor:
    """
    Runs the tesseract command line tool on an image and returns the raw text.

    Tesseract writes its result to `<basename>.txt`; that file lives in a
    temporary directory owned by the call and is gone when `extract` returns.
    """

    def __init__(self, tesseract_cmd: str = "tesseract", language: str = "eng", timeout: Optional[float] = None):
        self.tesseract_cmd = tesseract_cmd
        self.language = language
        self.timeout = timeout

    def extract(self, image_path: str) -> str:
        if shutil.which(self.tesseract_cmd) is None:
            raise ServerConfigurationError(
                f"OCR engine not installed: {self.tesseract_cmd!r} not found in PATH"
            )

        # run_tesseract reads the module level command
        pytesseract.tesseract_cmd = self.tesseract_cmd

        with tempfile.TemporaryDirectory(prefix="ocr-") as workdir:
            output_base = os.path.join(workdir, OUTPUT_BASENAME)
            try:
                pytesseract.run_tesseract(
                    image_path,
                    output_base,
                    extension="txt",
                    lang=self.language,
                    timeout=self.timeout or 0,  # 0 disables the limit
                )
            except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError, OSError, RuntimeError) as e:
                logger.error(f"Tesseract failed on {image_path}: {e}")
                raise OcrExecutionError(f"OCR failed: {e}") from e

            try:
                with open(output_base + ".txt", encoding="utf-8") as f:
                    return f.read()
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Tesseract output missing for {image_path}: {e}")
                raise OcrOutputUnreadable(f"Failed to read OCR output: {e}") from e
