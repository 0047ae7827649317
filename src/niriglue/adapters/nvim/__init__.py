"""Neovim adapter for niriglue."""

from .client import NvimClient
from .discovery import find_nvim_session

__all__ = ["NvimClient", "find_nvim_session"]
