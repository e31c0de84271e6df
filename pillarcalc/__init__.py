"""Pillar 3 retirement account vs brokerage ETF account projections."""
