"""
TF-IDF vectorization and cosine similarity ranking.

Documents are ordered lists of terms. Term matching is case-insensitive everywhere;
the first document of a corpus is the query, every other document is a candidate.
"""
import math
from collections import defaultdict
from typing import Dict, Iterable, List, NamedTuple, Sequence, Tuple

from ..preprocessing.preprocess import clean_terms


class TfIdfError(Exception):
    """Base class for TF-IDF computation errors."""


class VocabularyError(TfIdfError):
    """A vocabulary term does not occur in any document of the corpus."""


class EmptyCorpusError(TfIdfError):
    """The corpus has no query document."""


class TfIdfValue(NamedTuple):
    """TF and IDF of one term occurrence."""
    term: str
    tf: float
    idf: float

    @property
    def tfidf(self) -> float:
        return self.tf * self.idf


TermVector = List[TfIdfValue]


def term_frequency(term: str, document: Sequence[str]) -> float:
    """
    Compute term frequency of a term in a document.
    TF(t,d) = count(t,d) / |d|
    
    Args:
        term: The term to count (case-insensitive)
        document: Ordered terms of the document
        
    Returns:
        TF value, 0.0 for an empty term or an empty document
    """
    if not term or not document:
        return 0.0
    
    key = term.casefold()
    occurrences = sum(1 for item in document if item.casefold() == key)
    return occurrences / len(document)


def inverse_document_frequency(documents: Sequence[Sequence[str]], vocabulary: Iterable[str]) -> Dict[str, float]:
    """
    Calculate the inverse document frequency for every vocabulary term.
    IDF(t) = ln(N/DF(t))
    
    Args:
        documents: All documents of the corpus
        vocabulary: Terms to compute IDF for
        
    Returns:
        Dictionary mapping each vocabulary term to its IDF value
        
    Raises:
        VocabularyError: If a vocabulary term occurs in no document
    """
    document_keys = [{item.casefold() for item in document} for document in documents]
    
    idf = {}
    for term in vocabulary:
        key = term.casefold()
        df = sum(1 for keys in document_keys if key in keys)
        if df == 0:
            raise VocabularyError(f"Vocabulary term '{term}' does not occur in any document")
        idf[term] = math.log(len(document_keys) / df)
    
    return idf


def transform_to_tfidf_vectors(documents: Sequence[Sequence[str]], vocabulary: Iterable[str],
                               stop_words: Iterable[str] = ()) -> List[TermVector]:
    """
    Transform documents to TF-IDF vectors.
    
    Stop words are removed from a copy of the vocabulary before IDF is computed; the
    caller's vocabulary is not modified. Every term occurrence of every document gets an
    entry, so a term filtered out of the vocabulary is still present with IDF 0.0.
    
    Args:
        documents: Ordered terms of every document
        vocabulary: Unique terms of the corpus
        stop_words: Stop words to drop from the vocabulary
        
    Returns:
        One vector per document, in input order
    """
    index_vocabulary = clean_terms(vocabulary, stop_words)
    idf_by_term = {
        term.casefold(): value
        for term, value in inverse_document_frequency(documents, index_vocabulary).items()
    }
    
    vectors = []
    for document in documents:
        vector = []
        for term in document:
            idf = idf_by_term.get(term.casefold(), 0.0)
            vector.append(TfIdfValue(term, term_frequency(term, document), idf))
        vectors.append(vector)
    
    return vectors


def _tfidf_by_term(vector: Iterable[TfIdfValue]) -> Dict[str, float]:
    totals = defaultdict(float)
    for value in vector:
        totals[value.term.casefold()] += value.tfidf
    return totals


def dot_product(vector_a: Iterable[TfIdfValue], vector_b: Iterable[TfIdfValue]) -> float:
    """
    Compute the dot product of two TF-IDF vectors.
    
    Every pair of entries with the same term (case-insensitive) contributes, so a term
    present twice in one vector and once in the other adds two products. Summing the
    TF-IDF values per term first gives the same total as the pairwise sum.
    
    Args:
        vector_a: First vector
        vector_b: Second vector
        
    Returns:
        Dot product
    """
    totals_a = _tfidf_by_term(vector_a)
    totals_b = _tfidf_by_term(vector_b)
    
    common_terms = totals_a.keys() & totals_b.keys()
    return sum(totals_a[term] * totals_b[term] for term in common_terms)


def vector_length(values: Iterable[float]) -> float:
    """Euclidean length of a sequence of TF-IDF values."""
    return math.sqrt(sum(value ** 2 for value in values))


def cosine_similarity(vector_a: Sequence[TfIdfValue], vector_b: Sequence[TfIdfValue]) -> float:
    """
    Compute cosine similarity between two TF-IDF vectors.
    
    Args:
        vector_a: First vector
        vector_b: Second vector
        
    Returns:
        Cosine similarity score, 0.0 if either vector has zero length
    """
    length_a = vector_length(value.tfidf for value in vector_a)
    length_b = vector_length(value.tfidf for value in vector_b)
    
    # Avoid division by zero
    if length_a == 0 or length_b == 0:
        return 0.0
    
    return dot_product(vector_a, vector_b) / (length_a * length_b)


def rank_documents(vectors: Sequence[TermVector]) -> List[Tuple[int, float]]:
    """
    Rank candidate documents by similarity to the query document.
    
    The first vector is the query; every other vector is a candidate.
    
    Args:
        vectors: TF-IDF vectors of the whole corpus
        
    Returns:
        List of (candidate_number, similarity) tuples, highest similarity first.
        Candidate numbers start at 1 for the second document of the corpus.
        
    Raises:
        EmptyCorpusError: If there is no query vector
    """
    if not vectors:
        raise EmptyCorpusError("Corpus is empty, there is no query document")
    
    query_vector = vectors[0]
    similarities = [
        (number, cosine_similarity(query_vector, vector))
        for number, vector in enumerate(vectors[1:], start=1)
    ]
    
    similarities.sort(key=lambda x: x[1])
    return list(reversed(similarities))
