#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Tests for TF-IDF vectorization and cosine similarity
"""

import math

import pytest

from TfIdfAnalyzer.tfidf.tfidf import (
    TfIdfValue,
    VocabularyError,
    EmptyCorpusError,
    term_frequency,
    inverse_document_frequency,
    transform_to_tfidf_vectors,
    dot_product,
    vector_length,
    cosine_similarity,
    rank_documents,
)

CORPUS = [
    ["the", "cat", "sat"],
    ["the", "dog", "sat"],
    ["birds", "fly", "high"],
]
VOCABULARY = {"the", "cat", "sat", "dog", "birds", "fly", "high"}


def test_term_frequency_counts_case_insensitively():
    document = ["The", "cat", "saw", "the", "dog"]
    assert term_frequency("the", document) == pytest.approx(2 / 5)
    assert term_frequency("CAT", document) == pytest.approx(1 / 5)


def test_term_frequency_zero_cases():
    assert term_frequency("bird", ["the", "cat"]) == 0.0
    assert term_frequency("", ["the", "cat"]) == 0.0
    assert term_frequency(None, ["the", "cat"]) == 0.0
    assert term_frequency("cat", []) == 0.0


def test_term_frequencies_of_distinct_terms_sum_to_one():
    document = ["a", "b", "a", "c", "A", "b"]
    distinct = {term.casefold() for term in document}
    total = sum(term_frequency(term, document) for term in distinct)
    assert total == pytest.approx(1.0)
    assert all(0.0 <= term_frequency(term, document) <= 1.0 for term in document)


def test_inverse_document_frequency_values():
    idf = inverse_document_frequency(CORPUS, VOCABULARY)
    assert set(idf) == VOCABULARY
    assert idf["the"] == pytest.approx(math.log(3 / 2))
    assert idf["sat"] == pytest.approx(math.log(3 / 2))
    assert idf["cat"] == pytest.approx(math.log(3))
    assert idf["birds"] == pytest.approx(math.log(3))


def test_inverse_document_frequency_zero_when_term_in_every_document():
    documents = [["a", "b"], ["A", "c"], ["d", "a"]]
    idf = inverse_document_frequency(documents, {"a", "b"})
    assert idf["a"] == 0.0
    assert idf["b"] > 0.0


def test_inverse_document_frequency_rejects_term_absent_from_corpus():
    with pytest.raises(VocabularyError, match="unicorn"):
        inverse_document_frequency(CORPUS, {"cat", "unicorn"})


def test_tfidf_value_derives_tfidf():
    value = TfIdfValue("cat", 0.25, 2.0)
    assert value.tfidf == pytest.approx(0.5)
    with pytest.raises(AttributeError):
        value.tf = 1.0


def test_transform_yields_one_entry_per_occurrence():
    documents = [["cat", "cat", "dog"], ["bird"]]
    vectors = transform_to_tfidf_vectors(documents, {"cat", "dog", "bird"})

    assert len(vectors) == 2
    assert [value.term for value in vectors[0]] == ["cat", "cat", "dog"]
    assert vectors[0][0] == vectors[0][1]
    assert vectors[0][0].tf == pytest.approx(2 / 3)
    assert vectors[0][0].idf == pytest.approx(math.log(2))


def test_transform_keeps_stop_words_with_zero_idf():
    vectors = transform_to_tfidf_vectors(CORPUS, VOCABULARY, stop_words=["THE"])

    the_value = vectors[0][0]
    assert the_value.term == "the"
    assert the_value.tf == pytest.approx(1 / 3)
    assert the_value.idf == 0.0
    assert vectors[0][1].idf == pytest.approx(math.log(3))


def test_transform_does_not_modify_vocabulary():
    vocabulary = set(VOCABULARY)
    transform_to_tfidf_vectors(CORPUS, vocabulary, stop_words=["the", "sat"])
    assert vocabulary == VOCABULARY


def test_transform_matches_vocabulary_case_insensitively():
    documents = [["The", "cat"], ["the", "dog"], ["a", "bird"]]
    vectors = transform_to_tfidf_vectors(documents, {"The", "cat", "dog", "a", "bird"})
    assert vectors[1][0].idf == pytest.approx(math.log(3 / 2))


def test_dot_product_counts_every_matching_pair():
    # "a" occurs twice in vector_a and once in vector_b: two products, not one
    vector_a = [TfIdfValue("a", 0.5, 2.0), TfIdfValue("a", 0.5, 2.0), TfIdfValue("b", 0.5, 1.0)]
    vector_b = [TfIdfValue("A", 1.0, 3.0), TfIdfValue("c", 1.0, 5.0)]

    pairwise = sum(
        a.tfidf * b.tfidf
        for a in vector_a
        for b in vector_b
        if a.term.casefold() == b.term.casefold()
    )
    assert dot_product(vector_a, vector_b) == pytest.approx(pairwise)
    assert dot_product(vector_a, vector_b) == pytest.approx(6.0)


def test_dot_product_with_itself():
    vector = [TfIdfValue("a", 0.5, 2.0), TfIdfValue("b", 0.5, 4.0)]
    assert dot_product(vector, vector) == pytest.approx(1.0 + 4.0)

    # With a duplicate term every pair counts: (1 + 1) ** 2 + 2 ** 2
    duplicated = vector + [TfIdfValue("a", 0.5, 2.0)]
    assert dot_product(duplicated, duplicated) == pytest.approx(8.0)


def test_vector_length():
    assert vector_length([3.0, 4.0]) == pytest.approx(5.0)
    assert vector_length([]) == 0.0


def test_cosine_similarity_with_itself_is_one():
    vector = [TfIdfValue("a", 0.2, 1.5), TfIdfValue("b", 0.3, 0.7), TfIdfValue("c", 0.5, 2.0)]
    assert cosine_similarity(vector, vector) == pytest.approx(1.0)


def test_cosine_similarity_of_degenerate_vector_is_zero():
    vector = [TfIdfValue("a", 0.5, 1.0)]
    assert cosine_similarity([], vector) == 0.0
    assert cosine_similarity(vector, [TfIdfValue("a", 1.0, 0.0)]) == 0.0


def test_shared_terms_increase_similarity():
    vectors = transform_to_tfidf_vectors(CORPUS, VOCABULARY)
    similar = cosine_similarity(vectors[0], vectors[1])
    unrelated = cosine_similarity(vectors[0], vectors[2])
    assert similar > unrelated
    assert unrelated == 0.0


def test_rank_documents_orders_by_similarity():
    documents = CORPUS + [["the", "cat", "sat", "down"]]
    vocabulary = VOCABULARY | {"down"}
    ranking = rank_documents(transform_to_tfidf_vectors(documents, vocabulary))

    assert [number for number, _ in ranking] == [3, 1, 2]
    scores = [similarity for _, similarity in ranking]
    assert scores == sorted(scores, reverse=True)


def test_rank_documents_keeps_tied_candidates():
    documents = [["cat"], ["dog"], ["bird"], ["fish"]]
    ranking = rank_documents(transform_to_tfidf_vectors(documents, {"cat", "dog", "bird", "fish"}))
    assert sorted(number for number, _ in ranking) == [1, 2, 3]
    assert all(similarity == 0.0 for _, similarity in ranking)


def test_rank_documents_requires_query():
    with pytest.raises(EmptyCorpusError):
        rank_documents([])
    assert rank_documents([[TfIdfValue("a", 1.0, 0.0)]]) == []
