from .io import Dictionary, load_dictionary, dictionary_from_words, normalize_word
from .validator import validate_wordlist, pretty_summary

__all__ = [
    "Dictionary", "load_dictionary", "dictionary_from_words", "normalize_word",
    "validate_wordlist", "pretty_summary",
]
