"""Pure domain layer: catalog records, reconciliation core and ports."""
