"""Desktop converter between units of physical quantities."""
