"""
Preprocessing module for the TF-IDF analyzer.
Includes tokenization, corpus loading and stop word filtering.
"""
from .tokenizer import Tokenizer, RegexMatchTokenizer, Token, TokenType
from .document import Document
from .corpus import load_documents, build_vocabulary, load_corpus
from .preprocess import StopWordList, clean_terms, load_stop_words
