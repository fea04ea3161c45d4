"""Market price multiples."""


def price_to_earnings(share_price: float, earnings_per_share: float) -> float:
    return share_price / earnings_per_share


def price_to_book(share_price: float, book_value_per_share: float) -> float:
    return share_price / book_value_per_share


def dividend_yield(annual_dividends_per_share: float, share_price: float) -> float:
    return annual_dividends_per_share / share_price
