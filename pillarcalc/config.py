"""
Policy constants and Flask configuration for the pillar 3 vs brokerage calculator.

Rates are decimals (0.05 for 5%). Amounts are in euros but nothing here
depends on the currency.
"""

# ── Final tax on profit at the end of the horizon ────────────────────
PILLAR_FINAL_TAX_RATE = 0.20       # pillar 3 payout is taxed on profit
BROKERAGE_FINAL_TAX_RATE = 0.0     # ETF gains in a brokerage account are tax-exempt

# ── Input bounds ─────────────────────────────────────────────────────
MIN_HORIZON_YEARS = 1
MAX_HORIZON_YEARS = 60

# ── Values the form starts with ──────────────────────────────────────
DEFAULT_REQUEST = {
    "growthRate": 0.05,
    "contribution": 3200,
    "taxCeiling": 3200,
    "years": 30,
    "pillar": {
        "entryFee": 0.03,
        "managementFee": 0.01,
        "taxCreditRate": 0.30,
        "taxSavingMode": "reinvest",
    },
    "brokerage": {
        "entryFee": 0.0,
        "managementFee": 0.002,
    },
}


class DefaultConfig:
    """Loaded first by ``create_app``; override with PILLARCALC_* env vars."""

    PILLAR_FINAL_TAX_RATE = PILLAR_FINAL_TAX_RATE
    BROKERAGE_FINAL_TAX_RATE = BROKERAGE_FINAL_TAX_RATE
    CORS_ORIGINS = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    LOG_LEVEL = "INFO"
