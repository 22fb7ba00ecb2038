import json
import os
from typing import Any, Dict, Iterable, List, Set


class StopWordList:
    """Case-insensitive collection of stop words."""
    
    def __init__(self, words: Iterable[str] = ()):
        """
        Initialize the stop word list.
        
        Args:
            words: Stop words in any case; None entries and empty strings are ignored
        """
        self.words = []
        self._keys = set()
        for word in words or ():
            if word and word.casefold() not in self._keys:
                self._keys.add(word.casefold())
                self.words.append(word)

    @classmethod
    def from_file(cls, path: str) -> 'StopWordList':
        """
        Load stop words from a JSON file holding an array of strings.
        
        Args:
            path: Path to the stop words file

        Returns:
            StopWordList, empty if the file does not exist
        """
        if not os.path.exists(path):
            print(f"Warning: Stop words file {path} not found, no stop words loaded")
            return cls()
        
        with open(path, 'r', encoding='utf-8') as f:
            return cls(json.load(f))

    def __contains__(self, term) -> bool:
        return isinstance(term, str) and term.casefold() in self._keys

    def __iter__(self):
        return iter(self.words)

    def __len__(self):
        return len(self.words)

    def __repr__(self):
        return f"StopWordList({self.words!r})"


def clean_terms(terms: Iterable[str], stop_words: Iterable[str] = ()) -> Set[str]:
    """
    Remove stop words from a collection of terms.
    
    The input is left untouched, a new set is returned.
    
    Args:
        terms: Terms to clean (typically the corpus vocabulary)
        stop_words: Stop words, matched case-insensitively
    
    Returns:
        Set of the terms that are not stop words
    """
    if not isinstance(stop_words, StopWordList):
        stop_words = StopWordList(stop_words)
    
    return {term for term in terms if term not in stop_words}


def load_stop_words(config: Dict[str, Any] = None) -> List[str]:
    """
    Collect the configured stop words.
    
    Reads config["stop_words"]["list"] and the optional JSON file named by
    config["stop_words"]["file"].
    
    Args:
        config: Configuration dictionary
    
    Returns:
        List of stop words, empty when nothing is configured
    """
    stop_words_config = (config or {}).get("stop_words") or {}
    
    words = list(stop_words_config.get("list") or [])
    
    stop_words_file = stop_words_config.get("file")
    if stop_words_file:
        words.extend(StopWordList.from_file(stop_words_file))
    
    return list(StopWordList(words))
