"""Server-rendered HTML pages."""

from backoffice.pages.login import render_login_page

__all__ = ["render_login_page"]
