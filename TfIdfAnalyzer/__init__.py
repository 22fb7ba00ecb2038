"""
TfIdfAnalyzer - TF-IDF vectors and cosine similarity ranking for a small corpus.
"""
