from typing import List
from .tokenizer import Tokenizer, RegexMatchTokenizer, TokenType

class Document:
    """
    Represents one document of the analysed corpus.
    A document is a single line of the input file; its terms keep their original case.
    """
    
    def __init__(self, id=None, text: str = ""):
        """
        Initialize a document with content.
        
        Args:
            id: Position of the document in the corpus (0 is the query document)
            text: Raw line the document was read from
        """
        self.id = id
        self.text = text
        self.tokens = None
    
    def tokenize(self, tokenizer: Tokenizer = None) -> 'Document':
        """
        Tokenize the document text.
        
        Args:
            tokenizer: Tokenizer to use (defaults to RegexMatchTokenizer)
            
        Returns:
            Self for chaining operations
        """
        tokenizer = tokenizer or RegexMatchTokenizer()
        self.tokens = tokenizer.tokenize(self.text)
        return self
    
    @property
    def terms(self) -> List[str]:
        """
        Ordered word terms of the document, duplicates included.
        """
        if self.tokens is None:
            self.tokenize()
        
        return [token.processed_form for token in self.tokens
                if token.token_type == TokenType.WORD]

    def __len__(self):
        return len(self.terms)

    def __repr__(self):
        return f"Document(id={self.id!r}, text={self.text!r})"
