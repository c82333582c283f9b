import json
import os
from dataclasses import dataclass

from .config import BASE_URL

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
HTML_PATH = os.path.join(BASE_DIR, "widget_html.html")

# Quoted slot in the page script; replaced with the JSON-encoded API origin.
API_BASE_SLOT = '"__API_BASE__"'


@dataclass(frozen=True)
class FruitsWidget:
    identifier: str
    title: str
    template_uri: str
    invoking: str
    invoked: str
    html: str

    def tool_meta(self) -> dict:
        """Descriptor metadata linking a tool's output to this widget."""
        return {
            "openai/outputTemplate": self.template_uri,
            "openai/toolInvocation/invoking": self.invoking,
            "openai/toolInvocation/invoked": self.invoked,
        }


def render_html(template: str, api_base: str = BASE_URL) -> str:
    """Point every API call in the page at ``api_base``."""
    return template.replace(API_BASE_SLOT, json.dumps(api_base.rstrip("/")))


with open(HTML_PATH, "r", encoding="utf-8") as f:
    FRUITS_HTML = render_html(f.read())


widget = FruitsWidget(
    identifier="fruits-widget",
    title="Fruits Catalog",
    template_uri="ui://widget/fruits.html",
    invoking="Loading fruits…",
    invoked="Fruits ready.",
    html=FRUITS_HTML,
)
