from dataclasses import dataclass, field
from omegaconf   import OmegaConf
from pathlib     import Path
from typing      import Any, List, Optional

DEFAULT_CONFIG_FILE = Path(__file__).resolve().parents[2] / 'config' / 'matcher.yml'

# -------------------- Settings Sections --------------------

@dataclass
class SharpenSettings:
    """
    Height-tier sharpening applied to search words when a lookup finds nothing.
    """
    min_words_required      : int   = 2     # Fewer words than this are never sharpened
    min_tiers_required      : int   = 3     # Fewer height tiers than this leave no meaningful gap
    tier_grouping_tolerance : float = 0.10  # Heights within 10% of a tier's top word share the tier
    min_gap_threshold       : float = 0.25  # Relative drop between tiers that counts as a boundary
    min_words_after_cut     : int   = 2     # Sharpening is abandoned if fewer words survive

@dataclass
class TitleFilterSettings:
    size_ratio_threshold  : float           = 0.4
    vertical_aspect_ratio : float           = 1.0
    min_search_words      : int             = 2
    max_search_words      : int             = 15
    sharpen               : SharpenSettings = field(default_factory = SharpenSettings)

@dataclass
class ScorerSettings:
    min_word_length : int = 1  # Floor on OCR token length; candidate words are never dropped

@dataclass
class MatcherSettings:
    max_results         : int   = 5
    max_lookup_attempts : int   = 3
    min_match_score     : float = 0.0

@dataclass
class TesseractSettings:
    executable      : str           = 'tesseract'
    language        : str           = 'eng'
    tessdata_path   : Optional[str] = None
    timeout_seconds : float         = 30.0

@dataclass
class EasyOcrSettings:
    language_list  : List[str] = field(default_factory = lambda: ['en'])
    gpu_enabled    : bool      = False
    decoder        : str       = 'greedy'
    min_confidence : float     = 0.0

@dataclass
class OpenLibrarySettings:
    search_url      : str   = 'https://openlibrary.org/search.json'
    cover_url       : str   = 'https://covers.openlibrary.org/b/id/{cover_id}-M.jpg'
    result_limit    : int   = 10
    timeout_seconds : float = 10.0

@dataclass
class ImageSettings:
    max_file_size_bytes : int       = 4 * 1024 * 1024
    supported_types     : List[str] = field(
        default_factory = lambda: ['image/jpeg', 'image/png', 'image/webp']
    )

@dataclass
class Settings:
    """
    Root configuration object, one section per component.
    """
    title_filter : TitleFilterSettings = field(default_factory = TitleFilterSettings)
    scorer       : ScorerSettings      = field(default_factory = ScorerSettings)
    matcher      : MatcherSettings     = field(default_factory = MatcherSettings)
    tesseract    : TesseractSettings   = field(default_factory = TesseractSettings)
    easyocr      : EasyOcrSettings     = field(default_factory = EasyOcrSettings)
    open_library : OpenLibrarySettings = field(default_factory = OpenLibrarySettings)
    image        : ImageSettings       = field(default_factory = ImageSettings)

# -------------------- Loading --------------------

def load_settings(
    config_file : Path | None           = None,
    overrides   : dict[str, Any] | None = None
) -> Settings:
    """
    Loads settings from a YAML file, validated against the Settings schema.

    Args:
        config_file : Optional custom path to a YAML config (defaults to config/matcher.yml)
        overrides   : Optional nested dictionary merged over the file contents

    Returns:
        Settings: Typed settings instance

    Raises:
        FileNotFoundError : If the config file does not exist
    """
    config_file = Path(config_file) if config_file else DEFAULT_CONFIG_FILE
    if not config_file.is_file():
        raise FileNotFoundError(f"Config file not found: {config_file}")

    merged_config = OmegaConf.merge(OmegaConf.structured(Settings), OmegaConf.load(config_file))
    if overrides:
        merged_config = OmegaConf.merge(merged_config, OmegaConf.create(overrides))

    return OmegaConf.to_object(merged_config)
