# marklist/config/settings.py
# Configuration management for Marklist: mark alphabet, action keys, navigation & lookup options

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, cast

import typer

from ..core.alphabet import DEFAULT_MARKS, MarkAlphabet
from ..core.commands import DEFAULT_ACTION_KEYS, Keymap
from ..core.exceptions import JSONParsingError, SettingsValidationError
from ..core.marker import NavigationVariant
from ..lookup.providers.base import DEFAULT_USER_AGENT
from ..lookup.providers.browser import DEFAULT_LEXIN_HOST
from ..lookup.providers.factory import DEFAULT_FAVOURITES, LOOKUP_REGISTRY
from ..mark_io.generics import read_json_safe, write_json_safe

# overrides the default ~/.marklist/config.json location
CONFIG_ENV_VAR = "MARKLIST_CONFIG"


# * Settings dataclass w/ defaults; validated on construction
@dataclass
class MarklistSettings:
    # ordered key -> glyph bindings; first glyph is the advance-and-mark default
    marks: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_MARKS))
    # action name -> trigger key (missing actions keep their defaults)
    action_keys: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ACTION_KEYS))

    # next-unmarked navigation variant: "scan" | "search"
    navigation: str = "scan"

    # lookup settings
    favourites: list[str] = field(default_factory=lambda: list(DEFAULT_FAVOURITES))
    lookup_timeout: float = 10.0
    wikipedia_lang: str = "en"
    lexin_host: str = DEFAULT_LEXIN_HOST
    user_agent: str = DEFAULT_USER_AGENT

    # review screen
    view_height: int = 20
    theme: str = "deep_blue"

    # dev mode (enables DEBUG output w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        # alphabet & keymap raise ValueError subclasses on bad bindings
        if not isinstance(self.marks, dict):
            raise ValueError(f"marks must be an object, got {type(self.marks).__name__}")
        if not isinstance(self.action_keys, dict):
            raise ValueError(
                f"action_keys must be an object, got {type(self.action_keys).__name__}"
            )
        Keymap(self.action_keys, MarkAlphabet(self.marks))

        valid_navigation = {v.value for v in NavigationVariant}
        if self.navigation not in valid_navigation:
            raise ValueError(
                f"navigation must be one of {sorted(valid_navigation)}, got '{self.navigation}'"
            )

        if not isinstance(self.favourites, list) or not self.favourites:
            raise ValueError("favourites must be a non-empty list of provider names")
        unknown = [name for name in self.favourites if name not in LOOKUP_REGISTRY]
        if unknown:
            raise ValueError(
                f"Unknown favourites provider(s): {', '.join(map(str, unknown))}"
            )

        if (
            isinstance(self.lookup_timeout, bool)
            or not isinstance(self.lookup_timeout, (int, float))
            or self.lookup_timeout <= 0
        ):
            raise ValueError(
                f"lookup_timeout must be a positive number, got {self.lookup_timeout}"
            )

        if not isinstance(self.view_height, int) or self.view_height < 5:
            raise ValueError(f"view_height must be an integer >= 5, got {self.view_height}")

        if not isinstance(self.dev_mode, bool):
            raise ValueError(
                f"dev_mode must be a boolean (true/false), "
                f"got {type(self.dev_mode).__name__}: {self.dev_mode}"
            )

    @property
    def alphabet(self) -> MarkAlphabet:
        return MarkAlphabet(self.marks)

    @property
    def keymap(self) -> Keymap:
        return Keymap(self.action_keys, self.alphabet)

    @property
    def navigation_variant(self) -> NavigationVariant:
        return NavigationVariant(self.navigation)


def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".marklist" / "config.json"


# * Settings manager w/ JSON persistence for loading, saving & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or default_config_path()
        self._settings: Optional[MarklistSettings] = None

    def load(self) -> MarklistSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = MarklistSettings(**data)
            except (JSONParsingError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = MarklistSettings()
        else:
            self._settings = MarklistSettings()

        return self._settings

    def save(self, settings: MarklistSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # * Set one value; the whole settings object is re-validated before saving
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise ValueError(f"Unknown setting: {key}")

        data = asdict(settings)
        data[key] = value
        try:
            updated = MarklistSettings(**data)
        except (TypeError, ValueError) as e:
            raise SettingsValidationError(str(e), key, value) from e
        self.save(updated)

    def reset(self) -> None:
        self.save(MarklistSettings())

    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[MarklistSettings] = None
) -> MarklistSettings:
    if provided is not None:
        return provided

    # search ctx, parent & root for MarklistSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, MarklistSettings):
            return obj

    return settings_manager.load()
