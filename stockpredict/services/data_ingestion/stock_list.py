"""
Stock List for US Markets

Ticker validation plus a catalogue of popular US stocks and ETFs for
search/autocomplete. Any ticker in valid format can be predicted; the
catalogue only drives suggestions.
"""

import re

from stockpredict.services.base import MalformedInputError

# 1-5 letters, optional share class suffix (BRK.B)
TICKER_PATTERN = re.compile(r"^[A-Z]{1,5}(\.[A-Z]{1,3})?$")

US_STOCKS = [
    # Mega caps
    {"symbol": "AAPL", "name": "Apple Inc", "sector": "Technology"},
    {"symbol": "MSFT", "name": "Microsoft Corp", "sector": "Technology"},
    {"symbol": "GOOGL", "name": "Alphabet Inc Class A", "sector": "Communication"},
    {"symbol": "AMZN", "name": "Amazon.com Inc", "sector": "Consumer Discretionary"},
    {"symbol": "TSLA", "name": "Tesla Inc", "sector": "Automobile"},
    {"symbol": "META", "name": "Meta Platforms Inc", "sector": "Communication"},
    {"symbol": "NVDA", "name": "NVIDIA Corp", "sector": "Technology"},
    {"symbol": "NFLX", "name": "Netflix Inc", "sector": "Communication"},
    {"symbol": "BABA", "name": "Alibaba Group Holding Ltd", "sector": "Consumer Discretionary"},
    {"symbol": "V", "name": "Visa Inc", "sector": "Finance"},
    {"symbol": "JPM", "name": "JPMorgan Chase & Co", "sector": "Banking"},
    {"symbol": "JNJ", "name": "Johnson & Johnson", "sector": "Healthcare"},
    {"symbol": "WMT", "name": "Walmart Inc", "sector": "Retail"},
    {"symbol": "PG", "name": "Procter & Gamble Co", "sector": "Consumer Staples"},
    {"symbol": "UNH", "name": "UnitedHealth Group Inc", "sector": "Healthcare"},
    {"symbol": "MA", "name": "Mastercard Inc", "sector": "Finance"},
    {"symbol": "DIS", "name": "Walt Disney Co", "sector": "Communication"},
    {"symbol": "HD", "name": "Home Depot Inc", "sector": "Retail"},
    {"symbol": "PYPL", "name": "PayPal Holdings Inc", "sector": "Finance"},
    {"symbol": "BAC", "name": "Bank of America Corp", "sector": "Banking"},
    {"symbol": "INTC", "name": "Intel Corp", "sector": "Technology"},
    {"symbol": "CMCSA", "name": "Comcast Corp", "sector": "Communication"},
    {"symbol": "VZ", "name": "Verizon Communications Inc", "sector": "Telecom"},
    {"symbol": "ADBE", "name": "Adobe Inc", "sector": "Technology"},
    {"symbol": "CRM", "name": "Salesforce Inc", "sector": "Technology"},
    {"symbol": "NKE", "name": "Nike Inc", "sector": "Consumer Discretionary"},
    {"symbol": "PFE", "name": "Pfizer Inc", "sector": "Pharma"},
    {"symbol": "TMO", "name": "Thermo Fisher Scientific Inc", "sector": "Healthcare"},
    {"symbol": "ABBV", "name": "AbbVie Inc", "sector": "Pharma"},
    {"symbol": "COST", "name": "Costco Wholesale Corp", "sector": "Retail"},
    {"symbol": "ORCL", "name": "Oracle Corp", "sector": "Technology"},
    {"symbol": "AVGO", "name": "Broadcom Inc", "sector": "Technology"},
    {"symbol": "XOM", "name": "Exxon Mobil Corp", "sector": "Oil & Gas"},
    {"symbol": "KO", "name": "Coca-Cola Co", "sector": "Consumer Staples"},
    {"symbol": "PEP", "name": "PepsiCo Inc", "sector": "Consumer Staples"},
    {"symbol": "CVX", "name": "Chevron Corp", "sector": "Oil & Gas"},
    {"symbol": "LLY", "name": "Eli Lilly and Co", "sector": "Pharma"},
    {"symbol": "ACN", "name": "Accenture plc", "sector": "Technology"},
    {"symbol": "DHR", "name": "Danaher Corp", "sector": "Healthcare"},
    {"symbol": "QCOM", "name": "Qualcomm Inc", "sector": "Technology"},
    {"symbol": "IBM", "name": "International Business Machines Corp", "sector": "Technology"},
    {"symbol": "CSCO", "name": "Cisco Systems Inc", "sector": "Technology"},
    {"symbol": "BRK.B", "name": "Berkshire Hathaway Inc Class B", "sector": "Finance"},
    # ETFs
    {"symbol": "SPY", "name": "SPDR S&P 500 ETF Trust", "sector": "ETF"},
    {"symbol": "QQQ", "name": "Invesco QQQ Trust", "sector": "ETF"},
    {"symbol": "IWM", "name": "iShares Russell 2000 ETF", "sector": "ETF"},
    {"symbol": "VTI", "name": "Vanguard Total Stock Market ETF", "sector": "ETF"},
    {"symbol": "ARKK", "name": "ARK Innovation ETF", "sector": "ETF"},
    {"symbol": "GLD", "name": "SPDR Gold Shares", "sector": "ETF"},
    {"symbol": "SLV", "name": "iShares Silver Trust", "sector": "ETF"},
    {"symbol": "TLT", "name": "iShares 20+ Year Treasury Bond ETF", "sector": "ETF"},
]

POPULAR_SYMBOLS = [
    "AAPL", "MSFT", "GOOGL", "AMZN", "TSLA", "META", "NVDA", "NFLX",
    "JPM", "V", "UNH", "HD", "PG", "MA", "DIS", "BAC",
]

_BY_SYMBOL = {s["symbol"]: s for s in US_STOCKS}


def is_valid_ticker(ticker: str) -> bool:
    """Check ticker format (e.g. AAPL, BRK.B) after trimming and upper-casing."""
    return bool(TICKER_PATTERN.match(ticker.strip().upper()))


def normalize_ticker(ticker: str) -> str:
    """
    Trim and upper-case a ticker.

    Raises:
        MalformedInputError: If the ticker is not in valid format
    """
    clean = ticker.strip().upper()
    if not TICKER_PATTERN.match(clean):
        raise MalformedInputError(
            "DataIngestionService",
            f'Invalid ticker "{ticker}". Use 1-5 letters, optionally followed '
            "by a dot and 1-3 letters (e.g. AAPL, BRK.B)",
        )
    return clean


def _describe(symbol: str) -> dict:
    return _BY_SYMBOL.get(symbol, {"symbol": symbol, "name": symbol, "sector": "Unknown"})


def search_stocks(query: str, limit: int = 15) -> list[dict]:
    """
    Search stocks by symbol.

    Args:
        query: Search query (partial match)
        limit: Maximum results to return

    Returns:
        The query itself first when it is a valid ticker, then catalogue
        symbols containing it. Popular stocks for an empty query.
    """
    query = query.upper().strip()

    if not query:
        return get_popular_stocks()

    results = []

    # Any valid ticker is searchable, catalogued or not
    if is_valid_ticker(query):
        results.append(_describe(query))

    for stock in US_STOCKS:
        if query in stock["symbol"] and stock["symbol"] != query:
            results.append(stock)

    return results[:limit]


def get_popular_stocks(count: int = 16) -> list[dict]:
    """Get most popular stocks for default display."""
    return [_describe(s) for s in POPULAR_SYMBOLS][:count]

