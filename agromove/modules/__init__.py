"""Domain modules (wallets, orders, notifications)."""
