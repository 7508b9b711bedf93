"""Flask frontend for the anagram engine (see frontend.web)."""
