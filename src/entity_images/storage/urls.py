# ABOUTME: Public URL generation for file URIs backed by configured stream wrappers
# ABOUTME: Maps public://path/to/file.png onto the site's public files directory

import re
from urllib.parse import quote

from entity_images.config import Config, get_config

from .errors import FileUrlError

_SCHEME_PATTERN = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*)://(.*)$", re.DOTALL)

# Schemes whose URIs are already usable by a browser
PASSTHROUGH_SCHEMES = frozenset({"http", "https", "data"})


class StreamWrapperUrlGenerator:
    """Generate absolute URLs for file URIs.

    ``scheme://target`` URIs are resolved through the stream wrapper table,
    which maps a scheme onto a directory below ``base_url``. URIs without a
    scheme are treated as paths relative to the site root.
    """

    def __init__(self, base_url: str, stream_wrappers: dict[str, str]):
        self.base_url = base_url.rstrip("/")
        self.stream_wrappers = {scheme: path.strip("/") for scheme, path in stream_wrappers.items()}

    @classmethod
    def from_config(cls, config: Config | None = None) -> "StreamWrapperUrlGenerator":
        config = config or get_config()
        return cls(config.base_url, config.stream_wrappers)

    def generate_absolute_string(self, uri: str) -> str:
        if uri.startswith("//") or uri.startswith("data:"):
            return uri

        match = _SCHEME_PATTERN.match(uri)
        if match is None:
            return f"{self.base_url}/{quote(uri.lstrip('/'), safe='/')}"

        scheme, target = match.group(1).lower(), match.group(2)
        if scheme in PASSTHROUGH_SCHEMES:
            return uri

        directory = self.stream_wrappers.get(scheme)
        if directory is None:
            raise FileUrlError(f"No stream wrapper registered for scheme '{scheme}' (uri: {uri})")

        path = quote(target.lstrip("/"), safe="/")
        return "/".join(part for part in (self.base_url, directory, path) if part)
