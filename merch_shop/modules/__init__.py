"""Feature modules: catalog, accounts, ledger, inventory, coins and info."""
