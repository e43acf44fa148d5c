"""ibankit.validation: IBAN/BBAN/BIC validation, composition, extraction."""
