import logging
import unicodedata
import uuid
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import CURRENCY, DEFAULT_PRICE, IMAGE_BASE_URL

logger = logging.getLogger(__name__)

FRUITS = """\
Apple
Orange
Kiwi
Strawberry
Berry
Banana
Peach
Grape
Mango
Pineapple
Coconut
Watermelon""".split("\n")


@dataclass(frozen=True)
class CatalogItem:
    title: str
    price: int
    image_url: Optional[str]
    description: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "priceFormatted": format_price(self.price),
            "imageUrl": self.image_url,
            "description": self.description,
        }


def format_price(amount: int) -> str:
    return f"{amount} {CURRENCY}"


def build_image_url(title: str, base_url: str = IMAGE_BASE_URL) -> Optional[str]:
    """Return base_url + title, or None when the result is not a usable URL."""
    url = base_url + title
    if not url or any(ch.isspace() for ch in url):
        return None
    return url


def make_catalog(names: Sequence[str] = FRUITS, base_url: str = IMAGE_BASE_URL) -> List[CatalogItem]:
    return [
        CatalogItem(
            title=name,
            price=DEFAULT_PRICE,
            image_url=build_image_url(name, base_url),
            description=f"This is a picture of {name}.",
        )
        for name in names
    ]


def _fold(text: str) -> str:
    return unicodedata.normalize("NFC", text).casefold()


def filter_items(items: Sequence[CatalogItem], query: str) -> Sequence[CatalogItem]:
    """
    Items whose title contains ``query``, ignoring case, in source order.
    An empty query returns ``items`` itself.
    """
    if not query:
        return items
    q = _fold(query)
    return [item for item in items if q in _fold(item.title)]


CATALOG = make_catalog()


def search_catalog(query: Optional[str]) -> Sequence[CatalogItem]:
    results = filter_items(CATALOG, query or "")
    logger.debug("search %r matched %d of %d fruits", query, len(results), len(CATALOG))
    return results


def find_item(item_id: str) -> Optional[CatalogItem]:
    return next((item for item in CATALOG if item.id == item_id), None)
