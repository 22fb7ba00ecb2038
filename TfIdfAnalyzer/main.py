import argparse
import sys
from typing import Any, Dict, List, Tuple

from TfIdfAnalyzer.config import load_config, default_config
from TfIdfAnalyzer.preprocessing.corpus import load_documents, build_vocabulary
from TfIdfAnalyzer.preprocessing.document import Document
from TfIdfAnalyzer.preprocessing.preprocess import load_stop_words
from TfIdfAnalyzer.tfidf.tfidf import (
    EmptyCorpusError,
    TermVector,
    transform_to_tfidf_vectors,
    dot_product,
    vector_length,
    rank_documents,
)


class AnalysisReport:
    """
    Result of one similarity analysis run.
    The first vector belongs to the query document, the rest to the candidates.
    """
    
    def __init__(self, vectors: List[TermVector], vocabulary_size: int):
        if not vectors:
            raise EmptyCorpusError("Corpus is empty, there is no query document")
        
        self.vectors = vectors
        self.vocabulary_size = vocabulary_size
        self.query_vector = vectors[0]
        self.candidate_vectors = vectors[1:]
        
        self.query_length = vector_length(value.tfidf for value in self.query_vector)
        self.candidate_lengths = [
            vector_length(value.tfidf for value in vector) for vector in self.candidate_vectors
        ]
        self.dot_products = [
            dot_product(self.query_vector, vector) for vector in self.candidate_vectors
        ]
        
        # (candidate_number, document_text, similarity), highest similarity first
        self.ranking: List[Tuple[int, str, float]] = [
            (number, " ".join(value.term for value in self.candidate_vectors[number - 1]), similarity)
            for number, similarity in rank_documents(vectors)
        ]


class SimilarityAnalyzer:
    """
    Runs the analysis workflow: load, optional clean, vectorize, report.
    """
    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or default_config()
        self.documents: List[Document] = []
        self.documents_loaded = False
    
    def load_documents(self, documents_path: str) -> List[Document]:
        """
        Load the corpus file.
        
        Args:
            documents_path: Path to the corpus, one document per line
            
        Returns:
            List of loaded documents
            
        Raises:
            FileNotFoundError: If the corpus file does not exist
        """
        encoding = self.config.get("input", {}).get("encoding", "utf-8")
        self.documents = load_documents(documents_path, encoding)
        self.documents_loaded = True
        return self.documents
    
    def analyze(self, clean_document: bool = None) -> AnalysisReport:
        """
        Vectorize the loaded corpus and compare the query document with every candidate.
        
        Args:
            clean_document: Remove configured stop words before vectorization
                (defaults to config["analysis"]["clean_document"])
            
        Returns:
            AnalysisReport with vectors, lengths, dot products and ranking
            
        Raises:
            RuntimeError: If no documents were loaded
            EmptyCorpusError: If the loaded corpus has no document
        """
        if not self.documents_loaded:
            raise RuntimeError("No documents loaded. Load documents first.")
        
        if clean_document is None:
            clean_document = self.config.get("analysis", {}).get("clean_document", False)
        
        stop_words = load_stop_words(self.config) if clean_document else []
        
        terms = [doc.terms for doc in self.documents]
        vocabulary = build_vocabulary(self.documents)
        vectors = transform_to_tfidf_vectors(terms, vocabulary, stop_words)
        
        return AnalysisReport(vectors, len(vocabulary))


def analyze(path: str, clean_document: bool = None, config: Dict[str, Any] = None) -> AnalysisReport:
    """
    Load a corpus file and run the similarity analysis on it.
    
    Args:
        path: Path to the corpus file
        clean_document: Remove configured stop words before vectorization
        config: Configuration dictionary
        
    Returns:
        AnalysisReport
    """
    analyzer = SimilarityAnalyzer(config)
    analyzer.load_documents(path)
    return analyzer.analyze(clean_document)


def display_report(report: AnalysisReport):
    """Print the analysis report in plain text"""
    # Values of the query vector are not displayed
    print("TF-IDF values:")
    for i, vector in enumerate(report.candidate_vectors):
        for value in vector:
            print(f"Text = {i + 1}: Word = {value.term}; TF = {value.tf}; IDF = {value.idf}; TFIDF = {value.tfidf}")
    print()
    
    print(f"Q vector length: {report.query_length}")
    print("Vectors lengths:")
    for i, length in enumerate(report.candidate_lengths):
        print(f"D{i + 1}: {length}")
    print()
    
    print("Dot products:")
    for i, product in enumerate(report.dot_products):
        print(f"D{i + 1}: {product}")
    print()
    
    print("Similarity Analysis:")
    for number, document, similarity in report.ranking:
        print(f"{document}: {similarity}")


def main(argv=None):
    # Parse command-line arguments
    parser = argparse.ArgumentParser(
        description='TfIdfAnalyzer - TF-IDF similarity of corpus documents to the first (query) document'
    )
    parser.add_argument('path', help='Path to corpus file, one document per line')
    parser.add_argument('--clean', action='store_true',
                        help='Remove configured stop words before vectorization')
    parser.add_argument('--config', help='Path to configuration file')
    args = parser.parse_args(argv)
    
    config = load_config(args.config)
    analyzer = SimilarityAnalyzer(config)
    
    try:
        print(f"Loading documents from: {args.path}")
        analyzer.load_documents(args.path)
        print(f"Loaded {len(analyzer.documents)} documents.")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error loading documents: {e}")
        sys.exit(1)
    
    try:
        report = analyzer.analyze(clean_document=True if args.clean else None)
    except EmptyCorpusError as e:
        print(f"Error: {e}")
        sys.exit(1)
    
    print()
    display_report(report)


if __name__ == "__main__":
    main()
