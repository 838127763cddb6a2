"""Configuration management for verse-detect."""

import json
import logging
from dataclasses import asdict, dataclass, field, fields, is_dataclass, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "verse-detect"
CONFIG_FILE = CONFIG_DIR / "config.json"
LOG_FILE = CONFIG_DIR / "verse-detect.log"

DISPLAY_MODES = ("link", "popup", "both")
CONTENT_SOURCE_TYPES = ("local", "remote", "app")
POPUP_POSITIONS = ("auto", "above", "below")
SOCIAL_PLATFORMS = ("facebook", "x", "bluesky", "copy")

DEFAULT_PREFERRED_TEXT_IDS: Dict[str, Union[str, List[str]]] = {
    "en": "ENGWEB",  # World English Bible
    "es": "SPNRVG",  # Reina Valera Gomez
}


@dataclass
class ContentSourceConfig:
    """Where chapter documents and the texts catalog come from."""

    type: str = "remote"
    base_url: str = "https://inscript.bible.cloud/content/texts"
    texts_index_url: Optional[str] = "https://inscript.bible.cloud/content/texts/texts.json"
    text_id: Optional[str] = None
    auto_select_by_language: bool = True
    dynamic_text_selection: bool = True
    preferred_text_ids_by_language: Dict[str, Union[str, List[str]]] = field(
        default_factory=lambda: dict(DEFAULT_PREFERRED_TEXT_IDS)
    )
    path_template: str = "{baseUrl}/{textId}/{sectionId}.html"


@dataclass
class VersionLinkingConfig:
    """Whether links carry the edition id."""

    include_version: bool = True
    version_param: str = "version"


@dataclass
class PopupConfig:
    """Preview popup behavior. Delays are in milliseconds."""

    show_delay: int = 300
    hide_delay: int = 200
    max_width: int = 450
    max_height: int = 400
    show_verse_numbers: bool = True
    show_header: bool = True
    position: str = "auto"
    show_loading_indicator: bool = True
    cache_content: bool = True
    cache_capacity: Optional[int] = None  # None keeps every entry
    cache_ttl: Optional[float] = None  # Seconds
    show_social_share: bool = False
    social_share_platforms: List[str] = field(default_factory=lambda: ["facebook", "x", "copy"])
    show_logo: bool = False
    logo_url: str = "https://inscript.org"
    long_press_threshold: int = 300


@dataclass
class LinkConfig:
    """Link markup and URL building."""

    url_template: Optional[str] = None
    ref_param: str = "ref"
    css_class: str = "verse-link"
    open_in_new_tab: bool = False
    add_data_attributes: bool = True
    use_hash_navigation: bool = True


@dataclass
class StylingConfig:
    """Highlighting of detected references."""

    highlight_verses: bool = True
    highlight_class: str = "verse-detected"
    underline: bool = True


@dataclass
class LanguageConfig:
    """Which languages the detector looks for."""

    auto_detect: bool = True
    primary: Optional[str] = None
    additional: Union[List[str], str] = field(default_factory=list)  # or "all"
    always_include_english: bool = True


@dataclass
class DetectionConfig:
    """Parts of a document that are never scanned."""

    exclude_selectors: str = "script, style, code, pre, .verse-popup, .no-verse-detect"


@dataclass
class AppIntegrationConfig:
    """Hooks into the host reader."""

    use_app_text_loader: bool = True
    use_app_navigation: bool = True


@dataclass
class Config:
    """Application configuration."""

    display_mode: str = "both"
    app_base_url: str = "https://inscript.org"
    default_text_id: Optional[str] = None
    content_source: ContentSourceConfig = field(default_factory=ContentSourceConfig)
    version_linking: VersionLinkingConfig = field(default_factory=VersionLinkingConfig)
    popup: PopupConfig = field(default_factory=PopupConfig)
    link: LinkConfig = field(default_factory=LinkConfig)
    styling: StylingConfig = field(default_factory=StylingConfig)
    language: LanguageConfig = field(default_factory=LanguageConfig)
    detection: DetectionConfig = field(default_factory=DetectionConfig)
    app_integration: AppIntegrationConfig = field(default_factory=AppIntegrationConfig)

    @property
    def shows_popup(self) -> bool:
        """Check whether the display mode includes the popup."""
        return self.display_mode in ("popup", "both")

    @property
    def navigates(self) -> bool:
        """Check whether the display mode allows following a reference."""
        return self.display_mode in ("link", "both")

    @classmethod
    def load(cls) -> "Config":
        """Load config from file, or return defaults."""
        if not CONFIG_FILE.exists():
            return cls()

        try:
            with open(CONFIG_FILE) as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Could not read %s, using defaults: %s", CONFIG_FILE, exc)
            return cls()

        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", CONFIG_FILE)
            return cls()
        return merge_config(data)

    def save(self) -> None:
        """Save config to file."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


def _merge_into(target: Any, data: Mapping[str, Any]) -> Any:
    """Return a copy of a config dataclass with keys from data applied.

    Nested groups are merged key by key; unknown keys are ignored.
    """
    changes: Dict[str, Any] = {}
    for f in fields(target):
        if f.name not in data:
            continue
        value = data[f.name]
        current = getattr(target, f.name)
        if is_dataclass(current):
            if isinstance(value, Mapping):
                changes[f.name] = _merge_into(current, value)
            else:
                logger.warning("Ignoring config value for %s: expected an object", f.name)
        else:
            changes[f.name] = value
    return replace(target, **changes)


def merge_config(data: Optional[Mapping[str, Any]] = None, base: Optional[Config] = None) -> Config:
    """Deep-merge a partial config dictionary onto defaults.

    Args:
        data: Partial config, e.g. {"popup": {"show_delay": 500}}
        base: Config to merge onto; defaults when None

    Returns:
        New Config instance
    """
    return _merge_into(base or Config(), data or {})


def get_config() -> Config:
    """Get the application config."""
    return Config.load()
