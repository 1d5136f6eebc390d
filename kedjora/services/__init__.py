"""Business logic: credential checks, content lookups, public page assembly."""
