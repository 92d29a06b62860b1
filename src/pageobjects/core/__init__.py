# This file makes pageobjects.core a package and exposes the page object classes.

from .browser import Browser
from .component import Component, Scope
from .config_loader import ConfigLoader
from .page import Page

__all__ = [
    "Browser",
    "Component",
    "ConfigLoader",
    "Page",
    "Scope",
]
