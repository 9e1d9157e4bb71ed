import argparse
import asyncio
import json
import mimetypes
import sys
import uuid

from bookcover_matcher import *
from pathlib           import Path

def build_orchestrator(settings: Settings, engine: str, catalog_db: Path | None) -> CoverMatchOrchestrator:
    """
    Wires the configured OCR engine, OpenLibrary lookup and optional local catalog together.
    """
    title_filter = TitleTextFilter(settings.title_filter)

    if engine == 'easyocr':
        from bookcover_matcher.core.ocr_provider.easyocr_provider import EasyOcrProvider
        ocr_provider = EasyOcrProvider(settings = settings.easyocr, title_filter = title_filter)
    else:
        ocr_provider = TesseractOcrProvider(settings = settings.tesseract, title_filter = title_filter)

    return CoverMatchOrchestrator(
        ocr_provider    = ocr_provider,
        lookup_provider = OpenLibraryLookup(settings = settings.open_library),
        catalog         = DuckDBCatalog(database_path = catalog_db) if catalog_db else None,
        scorer          = BookMatchScorer(settings.scorer),
        title_filter    = title_filter,
        settings        = settings.matcher
    )

def main() -> int:

    parser = argparse.ArgumentParser(
        description = "Identify the book shown on a cover image."
    )
    parser.add_argument(
        "--image-path",
        type     = str,
        required = True,
        help     = "Full path to the cover image to analyse."
    )
    parser.add_argument(
        "--content-type",
        type    = str,
        default = None,
        help    = "MIME type of the image (guessed from the file extension when omitted)."
    )
    parser.add_argument(
        "--engine",
        choices = ['tesseract', 'easyocr'],
        default = 'tesseract',
        help    = "OCR engine to run."
    )
    parser.add_argument(
        "--catalog-db",
        type    = str,
        default = None,
        help    = "Optional DuckDB database holding the local 'books' catalog."
    )
    parser.add_argument(
        "--config",
        type    = str,
        default = None,
        help    = "Optional custom path to matcher.yml."
    )

    args = parser.parse_args()

    image_path = Path(args.image_path).resolve()
    if not image_path.exists() or not image_path.is_file():
        print(f"Error: The specified image does not exist or is not a file: {image_path}")
        return 1

    settings     = load_settings(config_file = args.config)
    image_bytes  = image_path.read_bytes()
    content_type = args.content_type or mimetypes.guess_type(image_path.name)[0] or ''

    validation = CoverImageValidator(settings.image).validate(image_bytes, content_type)
    if not validation.is_valid:
        print(f"Error: {validation.error}")
        return 1

    catalog_db   = Path(args.catalog_db).resolve() if args.catalog_db else None
    orchestrator = build_orchestrator(settings, args.engine, catalog_db)
    response     = asyncio.run(orchestrator.analyze(image_bytes, content_type, request_id = uuid.uuid4().hex))

    print(json.dumps(response.to_dict(), ensure_ascii = False, indent = 4))
    return 0

if __name__ == "__main__":
    sys.exit(main())
