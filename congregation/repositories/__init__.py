"""Entity repositories — CRUD statements composed on the QueryExecutor."""
