"""
Curated in-process knowledge: object mythology and the local myth library.
"""
from .mythology import lookup, has_entry, MYTHOLOGY_DATA, NO_MYTHOLOGY_DATA
from .figures import LOCAL_FIGURES, CULTURE_TERMS, DEFAULT_CULTURE, find_local, terms_for_culture

__all__ = [
    "lookup",
    "has_entry",
    "MYTHOLOGY_DATA",
    "NO_MYTHOLOGY_DATA",
    "LOCAL_FIGURES",
    "CULTURE_TERMS",
    "DEFAULT_CULTURE",
    "find_local",
    "terms_for_culture",
]
