"""Page layout: navigation chrome around page content.

ShellLayout.render() is the single entry point pages use. It takes the
page content and an optional title and returns the full HTML document with
header, side panel and content region. The first render happens before the
browser has reported its viewport, so an unknown viewport renders the
persistent panel.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from agora.assets import get_templates_dir
from agora.shell.navigation import NAVIGATION, NavigationEntry, build_navigation
from agora.shell.panel import PanelMode, PanelState, ViewportClass
from agora.shell.router import Router, SessionRouter
from agora.shell.user_menu import USER_ACTIONS

DEFAULT_APP_NAME = "Agora"

# Width of the persistent side panel
SIDEBAR_WIDTH = "250px"


class ShellLayout:
    """Renders pages inside the navigation shell."""

    def __init__(
        self,
        app_name: str = DEFAULT_APP_NAME,
        *,
        entries: Sequence[NavigationEntry] = NAVIGATION,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the layout.

        Args:
            app_name: Application name shown in the panel and document title
            entries: Navigation entries in display order
            templates_dir: Template directory (default: bundled templates)
        """
        self.app_name = app_name
        self.entries = entries
        self._env = Environment(
            loader=FileSystemLoader(templates_dir or get_templates_dir()),
            autoescape=select_autoescape(["html"]),
        )

    def document_title(self, title: str | None = None) -> str:
        if title:
            return f"{self.app_name}-{title}"
        return self.app_name

    def render_content(self, template_name: str, **context: Any) -> Markup:
        """Render a page body template to markup for use as layout children."""
        template = self._env.get_template(template_name)
        return Markup(template.render(**context))

    def render(
        self,
        children: str,
        title: str | None = None,
        *,
        router: Router | None = None,
        viewport: ViewportClass | None = None,
    ) -> str:
        """Render a full page.

        Args:
            children: Page content as HTML markup
            title: Page title, appended to the document title and shown as heading
            router: Router of the current request; supplies the active route
                and link targets (default: unknown route)
            viewport: Viewport class if known from the request

        Returns:
            Complete HTML document
        """
        if router is None:
            router = SessionRouter()
        panel = PanelState(viewport)
        template = self._env.get_template("layout.html")
        return template.render(
            app_name=self.app_name,
            document_title=self.document_title(title),
            title=title,
            content=Markup(children),
            navigation=build_navigation(self.entries, router.pathname),
            user_actions=USER_ACTIONS,
            mode=panel.mode.value,
            persistent=panel.mode is PanelMode.PERSISTENT,
            show_open_control=panel.shows_open_control,
            current_path=router.pathname or "",
            href=router.href,
            sidebar_width=SIDEBAR_WIDTH,
        )
