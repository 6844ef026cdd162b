CENTS_KEY = "cents"
CURRENCY_KEY = "currency_iso"

DEFAULT_AMOUNT_CENTS = "0"
DEFAULT_CURRENCY_CODE = "USD"

MAX_BATCH_SIZE = 100
