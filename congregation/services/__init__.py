"""Entity services — validation, uniqueness checks and defaults before persistence."""
