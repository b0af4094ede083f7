"""Built-in catalog sources."""

from localization.i18n.loaders.fs import FsLoader, flatten_messages

__all__ = ["FsLoader", "flatten_messages"]
