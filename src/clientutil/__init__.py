from __future__ import annotations

from importlib import metadata

from clientutil.client_util import ClientUtil

try:
    __version__ = metadata.version("clientutil")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = ["ClientUtil", "__version__"]
