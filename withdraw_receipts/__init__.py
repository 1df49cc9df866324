"""
Withdraw Receipts: withdrawal-request intake, receipts and admin listing
"""

__version__ = "0.1.0"
