"""HTTP routes — one module per resource, plus health probes."""
