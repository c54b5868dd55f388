"""JSON keys and header names used on the Stockfighter wire."""

AUTH_HEADER = "X-Starfighter-Authorization"

# Wraps array or undecodable bodies in the uniform keyed structure
RESULTS = "results"

ACCOUNT = "account"
ASKS = "asks"
BIDS = "bids"
DIRECTION = "direction"
ERROR = "error"
FILLS = "fills"
ID = "id"
IS_BUY = "isBuy"
NAME = "name"
OK = "ok"
OPEN = "open"
ORDER_TYPE = "orderType"
ORIGINAL_QTY = "originalQty"
PRICE = "price"
QTY = "qty"
STOCK = "stock"
SYMBOL = "symbol"
SYMBOLS = "symbols"
TIMESTAMP = "ts"
TOTAL_FILLED = "totalFilled"
TYPE = "type"
VENUE = "venue"
