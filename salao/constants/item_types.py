"""Sellable item types and catalog tabs."""

from typing import Literal

ItemType = Literal["service", "product", "combo", "package"]
CatalogTab = Literal["service", "product", "combo-service", "combo-product", "package"]
AmountType = Literal["value", "percentage"]


class ItemTypes:
    SERVICE = "service"
    PRODUCT = "product"
    COMBO = "combo"
    PACKAGE = "package"


class CatalogTabs:
    SERVICE = "service"
    PRODUCT = "product"
    COMBO_SERVICE = "combo-service"
    COMBO_PRODUCT = "combo-product"
    PACKAGE = "package"

    ALL = (SERVICE, PRODUCT, COMBO_SERVICE, COMBO_PRODUCT, PACKAGE)


TAB_LABELS = {
    CatalogTabs.SERVICE: "Serviços",
    CatalogTabs.PRODUCT: "Produtos",
    CatalogTabs.COMBO_SERVICE: "Combos Serv.",
    CatalogTabs.COMBO_PRODUCT: "Combos Prod.",
    CatalogTabs.PACKAGE: "Pacotes",
}
