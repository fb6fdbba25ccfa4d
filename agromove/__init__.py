"""AgroMove logistics backend: wallets and shipment order lifecycle."""

__version__ = "0.1.0"
