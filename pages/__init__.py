from .base_page import BasePage
from .front_page import FrontPage

__all__ = ["BasePage", "FrontPage"]
