"""Base text splitter and document contract."""

from abc import ABC, abstractmethod

from token_splitter.services.chunking.documents import Document
from token_splitter.utils.ids import compute_text_hash, generate_chunk_id


class BaseTextSplitter(ABC):
    """
    Abstract text splitter. Subclasses implement split_text; splitting documents,
    copying metadata and assigning chunk ids is shared here.
    """

    @abstractmethod
    def split_text(self, text: str) -> list[str]:
        """Split text into ordered chunks. Empty or blank text yields []."""
        ...

    def split_documents(self, documents: list[Document]) -> list[Document]:
        """
        Split each document and return one Document per chunk, documents and chunks in order.
        Source metadata is copied (never mutated) and extended with parent_document_id and
        chunk_index. Chunk ids are deterministic for the same parent id and chunk text.
        """
        out: list[Document] = []
        for document in documents:
            for index, chunk_text in enumerate(self.split_text(document.content)):
                metadata = dict(document.metadata)
                metadata["parent_document_id"] = document.id
                metadata["chunk_index"] = index
                out.append(
                    Document(
                        id=generate_chunk_id(document.id, index, compute_text_hash(chunk_text)),
                        content=chunk_text,
                        metadata=metadata,
                    )
                )
        return out

    def __call__(self, documents: list[Document]) -> list[Document]:
        return self.split_documents(documents)
