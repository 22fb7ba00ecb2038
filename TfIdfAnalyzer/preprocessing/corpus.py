"""
Corpus loading: turns a text file into the tokenized documents and the vocabulary
consumed by the TF-IDF engine.
"""
import os
from typing import Iterable, List, Set, Tuple

from .document import Document
from .tokenizer import RegexMatchTokenizer, Tokenizer


def load_documents(file_path: str, encoding: str = "utf-8", tokenizer: Tokenizer = None) -> List[Document]:
    """
    Load documents from a text file, one document per line.
    
    Args:
        file_path: Path to the corpus file
        encoding: File encoding
        tokenizer: Tokenizer to use (defaults to RegexMatchTokenizer)
    
    Returns:
        List of tokenized Document objects, in file order
    
    Raises:
        FileNotFoundError: If file_path does not exist
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File does not exist: {file_path}")

    tokenizer = tokenizer or RegexMatchTokenizer()
    documents = []
    with open(file_path, "r", encoding=encoding) as f:
        for line in f:
            line = line.rstrip("\r\n")
            # Only zero-length lines are skipped
            if line:
                doc = Document(id=len(documents), text=line)
                documents.append(doc.tokenize(tokenizer))

    return documents


def build_vocabulary(documents: Iterable[Document]) -> Set[str]:
    """
    Build vocabulary from documents.
    
    Terms are compared case-insensitively; the form of the first occurrence is kept.
    
    Args:
        documents: Iterable of Document objects
    
    Returns:
        Set of unique terms
    """
    vocab = {}
    for doc in documents:
        for term in doc.terms:
            vocab.setdefault(term.casefold(), term)
    return set(vocab.values())


def load_corpus(file_path: str, encoding: str = "utf-8") -> Tuple[List[List[str]], Set[str]]:
    """
    Load a corpus file as term lists plus vocabulary.
    
    Args:
        file_path: Path to the corpus file
        encoding: File encoding
    
    Returns:
        (documents, vocabulary) where every document is its ordered list of terms
    """
    documents = load_documents(file_path, encoding)
    return [doc.terms for doc in documents], build_vocabulary(documents)
