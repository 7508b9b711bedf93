import os

# Environment override for the word list (path to a newline-delimited file)
DICTIONARY_ENV: str = "ANAGRAMS_DICTIONARY"

# Word list shipped with the package
DICTIONARY_PATH: str = os.path.join(os.path.dirname(__file__), "data", "words.txt")

ENCODING: str = "utf-8"

# /* ~~~ cap how many anagram rows the CLI / web layer hand back ~~~ */
MAX_RESULTS: int = 500

# Progress logging (set ANAGRAMS_VERBOSE=1 to enable)
VERBOSE_ENV: str = "ANAGRAMS_VERBOSE"
