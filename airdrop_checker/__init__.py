"""
airdrop_checker - 0G Airdrop Eligibility Checker
================================================

A Python package for checking whether EVM wallet addresses are eligible
for the 0G Foundation token airdrop.

Modules:
--------
- config.py          : Configuration management (loads settings from .env)
- models.py          : Result and statistics dataclasses, status values
- errors.py          : Exception types
- validator.py       : EVM address validation and normalization
- http_client.py     : HTTP client with browser headers and retry
- response_parser.py : Maps the API's JSON shapes onto a status per address
- api_client.py      : Single and batch eligibility checks
- loader.py          : Input file loading (text, CSV or Excel)
- checker.py         : Orchestration, statistics, CSV/Excel export
- console.py         : Console rendering of results
- run_checker.py     : Main entry point (CLI)

Usage:
------
    airdrop-checker check 0x742d35Cc6634C0532925a3b8D4C9db96C4b4d8b6
    airdrop-checker file addresses.txt results.xlsx
    python -m airdrop_checker.run_checker file wallets.txt --debug

Workflow:
---------
1. Load configuration from .env file (all settings have defaults)
2. Read addresses from the command line or an input file
3. Report malformed addresses as errors, deduplicate the rest
4. Check all valid addresses with one API request
5. Print grouped results and statistics, optionally export .xlsx/.csv

Output:
-------
Exports have the columns:
- Address   : The wallet address (lowercased if valid)
- Status    : eligible, not_eligible or error
- Message   : Human-readable explanation (e.g. "Eligible with score: 5")
- Timestamp : When the result was captured (ISO 8601)
"""

__version__ = "1.0.0"
