# This file makes pageobjects.utils a package and exposes key utilities.

from .logger import setup_logger
from .selenium_waits import wait_until

__all__ = [
    "setup_logger",
    "wait_until",
]
