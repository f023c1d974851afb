"""
BoaDica Price Monitor

Modules:
    models      - Data models (Offer, CompetitivenessVerdict, PriceAlert)
    common      - Shared utilities (config loader, logging, CSV utils)
    extraction  - Offer extraction from rendered page text
    fetching    - Page text providers (static fetch, HTML to text)
    monitoring  - Monitor run, reports and exports
"""
