from bookcover_matcher.core.settings import ImageSettings
from typing                          import NamedTuple

class ValidationResult(NamedTuple):
    is_valid : bool
    error    : str | None = None

class CoverImageValidator:
    """
    Checks an uploaded cover image before it is sent to OCR.
    """

    def __init__(self, settings: ImageSettings | None = None):
        self.settings = settings or ImageSettings()

    def validate(self, image_bytes: bytes | None, content_type: str | None) -> ValidationResult:
        """
        Validates size, declared MIME type and actual file signature.

        Returns:
            ValidationResult with a user-facing error message when invalid
        """
        if not image_bytes:
            return ValidationResult(False, "No image file provided")

        if len(image_bytes) > self.settings.max_file_size_bytes:
            max_size_mb = self.settings.max_file_size_bytes // (1024 * 1024)
            return ValidationResult(False, f"Image too large. Maximum size is {max_size_mb}MB.")

        supported = {value.lower() for value in self.settings.supported_types}
        if (content_type or '').lower() not in supported:
            return ValidationResult(False, "Invalid image type. Use JPEG, PNG, or WebP.")

        if not self.is_valid_image_file(image_bytes):
            return ValidationResult(False, "File content is not a recognised image.")

        return ValidationResult(True)

    @staticmethod
    def is_valid_image_file(image_bytes: bytes) -> bool:
        """
        Checks the leading magic bytes for JPEG, PNG, GIF or WebP.
        """
        if len(image_bytes) < 4:
            return False

        if image_bytes[:3] == b'\xff\xd8\xff':
            return True
        if image_bytes[:4] in (b'\x89PNG', b'GIF8'):
            return True
        return len(image_bytes) >= 12 and image_bytes[:4] == b'RIFF' and image_bytes[8:12] == b'WEBP'
