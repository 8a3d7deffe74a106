"""Aggregator configuration.

ViewsConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from waypost.errors import ConfigurationError

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


@dataclass(frozen=True, slots=True)
class ViewsConfig:
    """Aggregator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ViewsConfig(global_name="MyApp", client_routes_file="file-routes.json")
    """

    # Script payload: window.<global_name>.<views_property> = {...};
    global_name: str = "Waypost"
    views_property: str = "views"
    script_marker: str = "views"  # data-waypost="views" on the injected element

    # Route keys
    strip_trailing_slash: bool = True

    # Client routes (file-routes.json produced by the frontend build)
    client_routes_file: str | Path | None = None

    def __post_init__(self) -> None:
        for field_name in ("global_name", "views_property"):
            value = getattr(self, field_name)
            if not _JS_IDENTIFIER.match(value):
                msg = f"{field_name} must be a JavaScript identifier, got {value!r}"
                raise ConfigurationError(msg)

    @property
    def script_prefix(self) -> str:
        """Assignment statement prefix that precedes the views JSON."""
        ns = f"window.{self.global_name}"
        return f"{ns} = {ns} ?? {{}}; {ns}.{self.views_property} = "
