"""
Logistics Stock Ledger - warehouse stock, movement audit trail and order admission
"""
