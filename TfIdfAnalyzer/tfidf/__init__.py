"""
TF-IDF module computing term weights for a corpus and ranking documents
by cosine similarity to the query document.
"""
from .tfidf import (
    TfIdfError,
    VocabularyError,
    EmptyCorpusError,
    TfIdfValue,
    TermVector,
    term_frequency,
    inverse_document_frequency,
    transform_to_tfidf_vectors,
    dot_product,
    vector_length,
    cosine_similarity,
    rank_documents,
)
