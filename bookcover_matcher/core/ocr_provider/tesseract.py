import asyncio
import os
import tempfile

from bookcover_matcher                   import ModuleLogger
from bookcover_matcher.core.errors       import OcrEngineError
from bookcover_matcher.core.models       import OcrLine
from bookcover_matcher.core.settings     import TesseractSettings
from bookcover_matcher.core.title_filter import TitleTextFilter
from bookcover_matcher.core.tsv_parser   import TsvLineParser
from pathlib                             import Path

from .base import OcrProvider

logger = ModuleLogger('tesseract')()

CONTENT_TYPE_SUFFIXES = {
    'image/png'  : '.png',
    'image/webp' : '.webp'
}

class TesseractOcrProvider(OcrProvider):
    """
    Runs the tesseract CLI in TSV mode and parses its word-level output into lines.
    """
    engine_name = 'Tesseract'

    def __init__(
        self,
        settings     : TesseractSettings | None = None,
        title_filter : TitleTextFilter | None   = None,
        parser       : TsvLineParser | None     = None
    ):
        """
        Args:
            settings     : Executable, language, tessdata location and timeout
            title_filter : Filter applied to recognised lines
            parser       : TSV parser (defaults to TsvLineParser())
        """
        super().__init__(title_filter = title_filter)
        self.settings = settings or TesseractSettings()
        self.parser   = parser or TsvLineParser()

    async def read_lines(self, image_bytes: bytes, content_type: str) -> list[OcrLine]:
        suffix = CONTENT_TYPE_SUFFIXES.get(content_type.lower(), '.jpg')

        with tempfile.TemporaryDirectory(prefix = 'bookcover_') as temp_dir:
            image_path = Path(temp_dir) / f'cover{suffix}'
            image_path.write_bytes(image_bytes)
            tsv_output = await self.run_tesseract(image_path)

        return self.parser.parse(tsv_output)

    def build_command(self, image_path: Path) -> list[str]:
        return [self.settings.executable, str(image_path), 'stdout', '-l', self.settings.language, 'tsv']

    def build_environment(self) -> dict[str, str] | None:
        """
        Returns the process environment, with TESSDATA_PREFIX set for non-standard installs.
        """
        if not self.settings.tessdata_path:
            return None
        return {**os.environ, 'TESSDATA_PREFIX': self.settings.tessdata_path}

    async def run_tesseract(self, image_path: Path) -> str:
        """
        Runs tesseract on an image file and returns its TSV output.

        Raises:
            OcrEngineError : If tesseract exits non-zero or exceeds the timeout
            OSError        : If the executable cannot be started
        """
        process = await asyncio.create_subprocess_exec(
            *self.build_command(image_path),
            stdout = asyncio.subprocess.PIPE,
            stderr = asyncio.subprocess.PIPE,
            env    = self.build_environment()
        )

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(),
                timeout = self.settings.timeout_seconds
            )
        except asyncio.TimeoutError as e:
            raise OcrEngineError(f"Tesseract timed out after {self.settings.timeout_seconds}s") from e
        finally:
            if process.returncode is None:
                process.kill()
                await process.wait()

        if process.returncode != 0:
            message = stderr.decode('utf-8', errors = 'replace').strip()
            raise OcrEngineError(f"Tesseract CLI failed (exit {process.returncode}): {message}")

        logger.debug(f"Tesseract produced {len(stdout)} bytes of TSV for '{image_path.name}'")
        return stdout.decode('utf-8', errors = 'replace')
