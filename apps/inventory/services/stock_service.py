"""
Stock level classification for Restock.

Every screen derives the same three stock levels from an item's quantity and
threshold; the helpers here are the single place that rule lives.
"""
from typing import Any, Dict, Iterable, List, Optional
from django.conf import settings
from apps.inventory.models import Item, StockStatus


def classify(quantity: int, threshold: int) -> StockStatus:
    """
    Classify a stock level.

    Out of stock wins over low stock: an item with nothing left is reported
    as out of stock whatever its threshold.
    """
    if quantity == 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= threshold:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


class StockService:
    """Counting, partitioning and labelling of item lists."""

    @staticmethod
    def summarize(items: Iterable[Item]) -> Dict[str, int]:
        """
        Dashboard counters for a list of items.

        ``low_stock`` counts every item at or below its threshold, so
        out-of-stock items are included in it.
        """
        total = low_stock = out_of_stock = 0
        for item in items:
            total += 1
            if item.is_low_stock:
                low_stock += 1
            if item.is_out_of_stock:
                out_of_stock += 1

        return {
            'total': total,
            'low_stock': low_stock,
            'out_of_stock': out_of_stock,
        }

    @staticmethod
    def partition_for_request(items: Iterable[Item]) -> Dict[str, List[Item]]:
        """
        Split items into the three request dropdown groups.

        Groups are disjoint and keep the input order.
        """
        groups = {
            StockStatus.OUT_OF_STOCK.value: [],
            StockStatus.LOW_STOCK.value: [],
            StockStatus.IN_STOCK.value: [],
        }
        for item in items:
            groups[classify(item.quantity, item.threshold).value].append(item)
        return groups

    @staticmethod
    def needing_attention(items: Iterable[Item], limit: Optional[int] = None) -> List[Item]:
        """First ``limit`` items at or below threshold, in input order."""
        if limit is None:
            limit = settings.STOCK_SYSTEM['ATTENTION_ITEMS_LIMIT']
        return [item for item in items if item.is_low_stock][:limit]

    @staticmethod
    def option_label(item: Item) -> str:
        return f"{item.name} - {item.category} ({item.quantity} in stock)"

    @staticmethod
    def describe(item: Item) -> Dict[str, Any]:
        """Compact log/report representation of an item's stock level."""
        status = classify(item.quantity, item.threshold)
        return {
            'id': str(item.id),
            'name': item.name,
            'category': item.category,
            'quantity': item.quantity,
            'threshold': item.threshold,
            'stock_status': status.value,
        }
