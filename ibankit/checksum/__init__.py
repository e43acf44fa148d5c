"""ibankit.checksum: mod-97 engine and national BBAN check digits."""
