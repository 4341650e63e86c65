"""Item picker of the point of sale: category tabs plus name search."""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TypeVar

from ..config import logger as log
from ..constants.item_types import CatalogTab, CatalogTabs, ItemType, ItemTypes
from ..container import get_container

R = TypeVar("R")

ItemSelected = Callable[[object, ItemType], None]


def filter_by_name(items: Iterable[R], term: Optional[str]) -> list[R]:
    """Case-insensitive substring match on ``name``. Empty term keeps all."""
    items = list(items)
    if not term:
        return items
    needle = term.lower()
    return [item for item in items if needle in item.name.lower()]


def tab_item_type(tab: CatalogTab) -> ItemType:
    """Both combo tabs sell items of type ``combo``."""
    if tab in (CatalogTabs.COMBO_SERVICE, CatalogTabs.COMBO_PRODUCT):
        return ItemTypes.COMBO
    return tab


def items_for_tab(tab: CatalogTab) -> list:
    container = get_container()
    if tab == CatalogTabs.SERVICE:
        return container.services.get_all()
    if tab == CatalogTabs.PRODUCT:
        return container.products.get_all()
    if tab == CatalogTabs.COMBO_SERVICE:
        return [c for c in container.combos.get_all() if c.type == "service"]
    if tab == CatalogTabs.COMBO_PRODUCT:
        return [c for c in container.combos.get_all() if c.type == "product"]
    if tab == CatalogTabs.PACKAGE:
        return container.plans.get_all()
    raise ValueError(f"Unknown catalog tab: {tab}")


@dataclass
class CatalogSelector:
    """
    Current tab and search term of the item list.

    ``on_select`` receives the chosen record and its item type. For a walk-in
    sale (no client selected) the package tab cannot be opened.
    """

    on_select: ItemSelected
    walk_in: bool = False
    tab: CatalogTab = CatalogTabs.SERVICE
    search: str = ""

    def is_tab_enabled(self, tab: CatalogTab) -> bool:
        return not (tab == CatalogTabs.PACKAGE and self.walk_in)

    def set_tab(self, tab: CatalogTab) -> bool:
        if tab not in CatalogTabs.ALL:
            raise ValueError(f"Unknown catalog tab: {tab}")
        if not self.is_tab_enabled(tab):
            log.debug("catalog", "Tab disabled for walk-in sale", tab=tab)
            return False
        self.tab = tab
        return True

    def set_search(self, term: str) -> None:
        self.search = term

    def visible_items(self) -> list:
        return filter_by_name(items_for_tab(self.tab), self.search)

    def select(self, item) -> ItemType:
        item_type = tab_item_type(self.tab)
        log.debug("catalog", "Item selected", item_id=item.id, item_type=item_type)
        self.on_select(item, item_type)
        return item_type
