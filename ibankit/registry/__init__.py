"""ibankit.registry: country specification records and registry."""
