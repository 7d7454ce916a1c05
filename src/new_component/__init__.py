"""new-component: scaffolding tool for React components."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("new-component")
except PackageNotFoundError:
    __version__ = "0.0.0"
