"""Convert doc-comment formatted plain text into typed blocks."""

from doc2json.document_models import Block, BlockKind, Document
from doc2json.segmenter import is_heading, segment

__version__ = "0.1.0"

__all__ = ["Block", "BlockKind", "Document", "__version__", "is_heading", "segment"]
