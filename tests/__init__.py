"""
Test suite for the Poultry Records backend.

Test Organization:
- integration/ - API integration tests (database, full request cycle)
- unit/ - Pure helpers (money, feed units) without a database
"""
