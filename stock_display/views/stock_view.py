"""
Stock View.
Responsible for formatting stock data for the API response.
"""

from stock_display.models import StockSummary


class StockView:
    """
    View layer for stock resources.
    """

    @staticmethod
    def render(summary: StockSummary) -> StockSummary:
        """
        Render the stock response. Quantity is only exposed while the product is in stock.
        """
        if not summary.in_stock:
            return summary.model_copy(update={"quantity": None})
        return summary
