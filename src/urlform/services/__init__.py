"""Split, decode y lookups perezosos sobre el string original."""
